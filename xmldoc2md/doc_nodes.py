"""Tree model for documentation comments."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class DocText:
    """A run of character data."""

    text: str


@dataclass(frozen=True)
class DocElement:
    """A tagged element with ordered children and string attributes."""

    tag: str
    children: tuple[DocNode, ...] = ()
    attributes: dict[str, str] = field(default_factory=dict, hash=False)

    def get(self, name: str) -> str | None:
        return self.attributes.get(name)

    @property
    def text(self) -> str:
        """Concatenated character data of all descendants."""
        return "".join(c.text for c in self.children)

    def element(self, tag: str) -> DocElement | None:
        """First direct child element with this tag."""
        return next(self.elements(tag), None)

    def elements(self, tag: str | None = None) -> Iterator[DocElement]:
        """Direct child elements, optionally filtered by tag."""
        for c in self.children:
            if isinstance(c, DocElement) and (tag is None or c.tag == tag):
                yield c

    def find_named(self, tag: str, name: str) -> DocElement | None:
        """First child ``<tag name="...">`` element, used for param/typeparam."""
        return next((e for e in self.elements(tag) if e.get("name") == name), None)


DocNode = Union[DocText, DocElement]


def from_xml(element: ET.Element) -> DocElement:
    """Copy an ElementTree element into an immutable DocElement tree."""
    children: list[DocNode] = []
    if element.text:
        children.append(DocText(element.text))
    for child in element:
        children.append(from_xml(child))
        if child.tail:
            children.append(DocText(child.tail))
    return DocElement(
        tag=str(element.tag),
        children=tuple(children),
        attributes=dict(element.attrib),
    )


def parse_fragment(markup: str) -> DocElement:
    """Parse a standalone documentation fragment such as ``<member>...</member>``."""
    return from_xml(ET.fromstring(markup))
