"""Loading of XML documentation files into an identity-keyed index."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from xmldoc2md.doc_nodes import DocElement, from_xml

logger = logging.getLogger(__name__)


class DocumentationIndex:
    """Maps documentation ids (``T:Lib.Widget``) to their ``<member>`` element."""

    def __init__(
        self, members: dict[str, DocElement], assembly: str | None = None
    ) -> None:
        self.members = members
        self.assembly = assembly

    def get_member(self, identifier: str) -> DocElement | None:
        return self.members.get(identifier)

    def __len__(self) -> int:
        return len(self.members)

    @classmethod
    def from_string(cls, text: str) -> "DocumentationIndex":
        return cls._from_root(ET.fromstring(text))

    @classmethod
    def load(cls, path: Path) -> "DocumentationIndex":
        """Load a compiler-generated XML documentation file."""
        index = cls._from_root(ET.parse(path).getroot())
        logger.info("Loaded %d documented members from %s", len(index), path)
        return index

    @classmethod
    def _from_root(cls, root: ET.Element) -> "DocumentationIndex":
        assembly = root.findtext("assembly/name")
        members: dict[str, DocElement] = {}
        for member in root.iter("member"):
            name = member.get("name")
            if not name:
                continue
            if name in members:
                logger.warning("Duplicate documentation for %s; keeping first", name)
                continue
            members[name] = from_xml(member)
        return cls(members, assembly=assembly.strip() if assembly else None)
