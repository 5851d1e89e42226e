"""Index of every type and member available while rendering one module."""

from collections.abc import Iterable

from xmldoc2md.descriptors import MemberDescriptor, MemberKind, TypeDescriptor
from xmldoc2md.well_known_types import find_well_known_type


class MetadataUniverse:
    """Locator-keyed lookups over the documented module and its references.

    Built once per run; the index is never mutated while pages render.
    """

    def __init__(
        self,
        module: str,
        types: Iterable[TypeDescriptor],
        referenced_types: Iterable[TypeDescriptor] = (),
    ) -> None:
        self.module = module
        self.types: dict[str, TypeDescriptor] = {t.full_name: t for t in types}
        self.referenced_types: dict[str, TypeDescriptor] = {
            t.full_name: t
            for t in referenced_types
            if t.full_name not in self.types
        }

    def find_type(self, locator: str) -> TypeDescriptor | None:
        """Resolve a type locator; platform types win over local ones."""
        return (
            find_well_known_type(locator)
            or self.types.get(locator)
            or self.referenced_types.get(locator)
        )

    def is_local(self, type_: TypeDescriptor) -> bool:
        """Whether the type belongs to the module being documented."""
        return self.types.get(type_.full_name) is type_

    def local_types(self) -> list[TypeDescriptor]:
        return sorted(self.types.values(), key=lambda t: t.full_name)

    def find_members(
        self,
        type_locator: str,
        name: str,
        kinds: Iterable[MemberKind] | None = None,
    ) -> list[MemberDescriptor]:
        """All members of a type with exactly this name, in declaration order."""
        type_ = self.find_type(type_locator)
        if type_ is None:
            return []
        wanted = set(kinds) if kinds is not None else set(MemberKind)
        return [m for m in type_.members if m.name == name and m.kind in wanted]

    def inheritance_chain(self, type_: TypeDescriptor) -> list[str]:
        """Root-to-self chain of locators; empty when the type has no base."""
        if not type_.base_types:
            return []
        return [*type_.base_types, type_.full_name]

    def namespaces(self) -> dict[str, list[TypeDescriptor]]:
        """Local types grouped by namespace."""
        ns_to_types: dict[str, list[TypeDescriptor]] = {}
        for t in self.local_types():
            ns_to_types.setdefault(t.namespace, []).append(t)
        return ns_to_types
