"""Lookup of hand-written example snippets kept next to the generated docs."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ExampleStore:
    """Reads ``<identifier>.md`` files from an examples directory."""

    def __init__(self, directory: Path | str | None) -> None:
        self.directory = Path(directory) if directory else None

    def path_for(self, identifier: str) -> Path | None:
        if self.directory is None:
            return None
        return self.directory / f"{identifier}.md"

    def get(self, identifier: str) -> str | None:
        """Return the snippet for a type or member, or None if there is none.

        Unreadable files are logged and treated as missing.
        """
        path = self.path_for(identifier)
        if path is None or not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read example %s: %s", path, e)
            return None
