"""Selection and ordering of the members shown on a type page."""

from enum import Enum

from xmldoc2md.descriptors import (
    MemberDescriptor,
    MemberKind,
    TypeDescriptor,
    Visibility,
)


class VisibilityPolicy(Enum):
    """Which access levels make it onto a page."""

    PUBLIC_ONLY = "public-only"
    INCLUDE_PRIVATE = "include-private"
    INCLUDE_PRIVATE_EXCEPT_INTERNAL = "include-private-except-internal"
    INTERNAL_ONLY = "internal-only"

    def allows(self, visibility: Visibility) -> bool:
        if self is VisibilityPolicy.PUBLIC_ONLY:
            return visibility is Visibility.PUBLIC
        if self is VisibilityPolicy.INCLUDE_PRIVATE_EXCEPT_INTERNAL:
            return not visibility.is_internal
        if self is VisibilityPolicy.INTERNAL_ONLY:
            return visibility.is_internal
        return True


def select_members(
    type_: TypeDescriptor,
    kind: MemberKind,
    policy: VisibilityPolicy = VisibilityPolicy.PUBLIC_ONLY,
) -> list[MemberDescriptor]:
    """Members of one kind allowed by the policy, sorted by name.

    Compiler-generated backing fields never appear, and special-name methods
    (operators, accessors) are left out of the methods bucket. Overloads keep
    their declaration order.
    """
    selected = []
    for m in type_.members_of(kind):
        if m.is_backing_field:
            continue
        if kind is MemberKind.METHOD and m.special_name:
            continue
        if not policy.allows(m.visibility):
            continue
        selected.append(m)
    return sorted(selected, key=lambda m: m.name)


def select_enum_fields(type_: TypeDescriptor) -> list[MemberDescriptor]:
    """All non-special fields of an enumeration, in declaration order."""
    return [m for m in type_.members_of(MemberKind.FIELD) if not m.special_name]
