"""Lookup of referenced module metadata in prioritized search directories."""

import logging
from pathlib import Path

from xmldoc2md.load_metadata import ModuleMetadata, ModuleReference, load_metadata

logger = logging.getLogger(__name__)


class ModuleResolver:
    """Finds metadata files for modules referenced by the documented module.

    Directories are searched in the order they were added. Within a directory,
    ``{name}/{version}/{name}.yml`` is preferred over ``{name}.yml``.
    """

    def __init__(self, search_directories: list[Path | str] | None = None) -> None:
        self.search_directories: list[Path] = []
        for d in search_directories or []:
            self.add_search_directory(d)

    def add_search_directory(self, directory: Path | str) -> None:
        path = Path(directory)
        if path not in self.search_directories:
            self.search_directories.append(path)

    def find(self, name: str, version: str | None = None) -> Path | None:
        """Path of the metadata file for a module, or None if not found."""
        for d in self.search_directories:
            candidates = []
            if version:
                candidates.append(d / name / version / f"{name}.yml")
            candidates.append(d / f"{name}.yml")
            for c in candidates:
                if c.is_file():
                    return c
        return None

    def resolve(self, name: str, version: str | None = None) -> ModuleMetadata | None:
        path = self.find(name, version)
        if path is None:
            logger.info("Referenced module %s not found; links stay plain", name)
            return None
        return load_metadata(path)

    def resolve_all(
        self, references: tuple[ModuleReference, ...]
    ) -> list[ModuleMetadata]:
        """Load every reference that can be found, skipping the rest."""
        found = []
        for ref in references:
            module = self.resolve(ref.name, ref.version)
            if module is not None:
                found.append(module)
        return found
