"""Data models for the types and members described by module metadata."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from xmldoc2md.type_names import display_name, is_void, simple_name, strip_arity

BACKING_FIELD_SUFFIX = ">k__BackingField"

# Derived types in the same module only; documented like private members
VISIBILITY_ALIASES = {
    "private-protected": "private",
    "protected-private": "private",
}


class MemberKind(Enum):
    """Kinds of members, declared in page order."""

    FIELD = "field"
    PROPERTY = "property"
    CONSTRUCTOR = "constructor"
    METHOD = "method"
    EVENT = "event"

    @property
    def title(self) -> str:
        """Section title used on type pages, e.g. ``Properties``."""
        return {
            MemberKind.FIELD: "Fields",
            MemberKind.PROPERTY: "Properties",
            MemberKind.CONSTRUCTOR: "Constructors",
            MemberKind.METHOD: "Methods",
            MemberKind.EVENT: "Events",
        }[self]

    @property
    def id_prefix(self) -> str:
        """Documentation-id prefix for this kind."""
        return {
            MemberKind.FIELD: "F",
            MemberKind.PROPERTY: "P",
            MemberKind.CONSTRUCTOR: "M",
            MemberKind.METHOD: "M",
            MemberKind.EVENT: "E",
        }[self]

    @property
    def is_callable(self) -> bool:
        return self in (MemberKind.CONSTRUCTOR, MemberKind.METHOD)


class Visibility(Enum):
    """Access levels a member can be declared with."""

    PUBLIC = "public"
    INTERNAL = "internal"
    PROTECTED_INTERNAL = "protected-internal"
    PRIVATE = "private"
    PROTECTED = "protected"

    @classmethod
    def parse(cls, value: str | None) -> Visibility:
        """Parse ``protected internal``, ``protected-internal`` and friends."""
        if not value:
            return cls.PUBLIC
        normalized = "-".join(str(value).strip().lower().replace("_", " ").split())
        return cls(VISIBILITY_ALIASES.get(normalized, normalized))

    @property
    def is_internal(self) -> bool:
        return self in (Visibility.INTERNAL, Visibility.PROTECTED_INTERNAL)


@dataclass(frozen=True)
class Parameter:
    """A parameter of a callable member or indexer."""

    name: str
    type: str  # documentation-id form, e.g. System.Int32
    position: int


@dataclass(frozen=True)
class MemberDescriptor:
    """A field, property, constructor, method or event of a type."""

    kind: MemberKind
    name: str
    declaring_type: str
    signature: str = ""
    visibility: Visibility = Visibility.PUBLIC
    generic_parameters: tuple[str, ...] = ()
    parameters: tuple[Parameter, ...] = ()
    return_type: str | None = None
    is_static: bool = False
    special_name: bool = False
    value: Any = None
    obsolete: bool = False
    obsolete_message: str | None = None

    @property
    def identifier(self) -> str:
        """Documentation id, e.g. ``M:Lib.Widget.Render(System.Int32)``."""
        ident = (
            f"{self.kind.id_prefix}:{self.declaring_type}.{self.name.replace('.', '#')}"
        )
        if self.kind is MemberKind.METHOD and self.generic_parameters:
            ident += f"``{len(self.generic_parameters)}"
        if self.parameters and self.kind in (
            MemberKind.CONSTRUCTOR,
            MemberKind.METHOD,
            MemberKind.PROPERTY,
        ):
            ident += "(" + ",".join(p.type for p in self.parameters) + ")"
        return ident

    @property
    def returns_value(self) -> bool:
        return self.kind is MemberKind.METHOD and not is_void(self.return_type)

    @property
    def display_name(self) -> str:
        if self.kind is MemberKind.CONSTRUCTOR:
            return simple_name(self.declaring_type)
        if self.kind is MemberKind.METHOD and self.generic_parameters:
            return f"{self.name}<{', '.join(self.generic_parameters)}>"
        return self.name

    def signature_label(self, type_parameters: Sequence[str] = ()) -> str:
        """Name plus parameter types, as shown in member headers.

        ``type_parameters`` are the declaring type's generic parameter names,
        used in place of `` `0 `` style references.
        """
        if not self.kind.is_callable and not self.parameters:
            return self.display_name
        params = ", ".join(
            display_name(p.type, type_parameters, self.generic_parameters)
            for p in self.parameters
        )
        if self.kind is MemberKind.PROPERTY:
            return f"{self.display_name}[{params}]"
        return f"{self.display_name}({params})"

    @property
    def is_backing_field(self) -> bool:
        return self.kind is MemberKind.FIELD and self.name.endswith(
            BACKING_FIELD_SUFFIX
        )


@dataclass(frozen=True)
class TypeDescriptor:
    """A snapshot of one type of the metadata universe."""

    full_name: str  # documentation-id form, nested types joined with "."
    namespace: str = ""
    kind: str = "class"
    module: str = ""
    signature: str = ""
    base_types: tuple[str, ...] = ()  # root first, immediate base last
    implements: tuple[str, ...] = ()
    generic_parameters: tuple[str, ...] = ()
    is_flags: bool = False
    obsolete: bool = False
    obsolete_message: str | None = None
    members: tuple[MemberDescriptor, ...] = ()

    @property
    def identifier(self) -> str:
        return f"T:{self.full_name}"

    @property
    def is_enum(self) -> bool:
        return self.kind.lower() == "enum"

    @property
    def name(self) -> str:
        """Display name with generic parameters, e.g. ``Widget<T>``."""
        relative = self.full_name
        if self.namespace and relative.startswith(self.namespace + "."):
            relative = relative[len(self.namespace) + 1 :]
        relative = strip_arity(relative)
        if self.generic_parameters:
            return f"{relative}<{', '.join(self.generic_parameters)}>"
        return relative

    def members_of(self, kind: MemberKind) -> list[MemberDescriptor]:
        """Declared members of one kind, in declaration order."""
        return [m for m in self.members if m.kind is kind]
