"""Resolution of ``cref`` tokens against the metadata universe.

A token is a one-character kind discriminator, a colon and a fully qualified
locator, e.g. ``M:Lib.Widget.Render(System.Int32)``. Resolution never raises:
anything that cannot be parsed or found comes back as ``UnresolvedText``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from xmldoc2md.descriptors import MemberDescriptor, MemberKind, TypeDescriptor
from xmldoc2md.links import LinkStyle, member_anchor, page_url, platform_url
from xmldoc2md.metadata_universe import MetadataUniverse
from xmldoc2md.output_elements import Inline, Link, Text
from xmldoc2md.type_names import format_type_ref, parse_type_reference
from xmldoc2md.well_known_types import PLATFORM_MODULE

logger = logging.getLogger(__name__)

KIND_ALIASES: dict[str, str] = {
    "T": "type",
    "M": "method",
    "F": "field",
    "P": "property",
    "E": "event",
}


@dataclass(frozen=True)
class CrossReferenceToken:
    """A parsed ``X:Locator`` token."""

    kind: str
    locator: str

    @classmethod
    def parse(cls, token: str | None) -> CrossReferenceToken | None:
        """Split a token, or return None when it is malformed."""
        if token is None or len(token) <= 2 or token[1] != ":":
            return None
        if token[0] not in KIND_ALIASES:
            return None
        return cls(kind=KIND_ALIASES[token[0]], locator=token[2:])


@dataclass(frozen=True)
class MethodLocator:
    """A method or constructor locator broken into its lookup keys."""

    type_locator: str
    name: str
    generic_count: int
    parameter_count: int


def deconstruct_method_locator(locator: str) -> MethodLocator | None:
    """Split ``Lib.Widget.Map``1(``0,System.Int32)`` into lookup keys.

    The parameter count is the number of comma-separated chunks after the
    opening parenthesis, so nested generic arguments inflate it; lookups fall
    back to the first overload with the same name when counts disagree.
    """
    parameter_index = locator.find("(")
    parameter_stripped = locator[:parameter_index] if parameter_index > -1 else locator
    generic_index = parameter_stripped.find("``")
    last_dot = parameter_stripped.rfind(".")
    if last_dot <= 0:
        return None

    type_locator = locator[:last_dot]
    name = parameter_stripped[last_dot + 1 :]
    generic_count = 0
    parameter_count = 0

    if parameter_index > -1:
        parameter_count = len(locator[parameter_index:].split(","))

    if generic_index > -1:
        digits = parameter_stripped[generic_index + 2 :]
        if not digits.isdigit():
            return None
        generic_count = int(digits)
        name = parameter_stripped[last_dot + 1 : generic_index]

    return MethodLocator(
        type_locator=type_locator,
        name=name.replace("#", "."),
        generic_count=generic_count,
        parameter_count=parameter_count,
    )


@dataclass(frozen=True)
class ResolvedLink:
    """A token that names a type or member of the universe."""

    target: TypeDescriptor | MemberDescriptor
    name: str
    url: str | None  # None when the target has no page to link to

    def to_inline(self, text: str | None = None) -> Inline:
        label = Text(text or self.name)
        if self.url is None:
            return label
        return Link(label, self.url)


@dataclass(frozen=True)
class UnresolvedText:
    """Fallback for tokens that could not be resolved."""

    text: str

    def to_inline(self, text: str | None = None) -> Inline:
        return Text(text or self.text)


Resolution = Union[ResolvedLink, UnresolvedText]


class CrossReferenceResolver:
    """Turns tokens and type references into links for one rendering run."""

    def __init__(
        self, universe: MetadataUniverse, style: LinkStyle | None = None
    ) -> None:
        self.universe = universe
        self.style = style or LinkStyle()

    def resolve(
        self,
        token: str | None,
        context: TypeDescriptor | None = None,
        text: str | None = None,
    ) -> Resolution:
        """Resolve a ``cref`` token relative to the page being rendered."""
        target = self.find_target(token)
        if isinstance(target, TypeDescriptor):
            return self.link_to_type(target)
        if isinstance(target, MemberDescriptor):
            return self.link_to_member(target, context)
        logger.debug("Unresolved cross-reference: %s", token)
        return UnresolvedText(text or token or "")

    def find_target(
        self, token: str | None
    ) -> TypeDescriptor | MemberDescriptor | None:
        parsed = CrossReferenceToken.parse(token)
        if parsed is None:
            return None

        if parsed.kind == "type":
            return self.universe.find_type(parsed.locator)

        if parsed.kind == "method":
            return self._find_method(parsed.locator)

        idx = parsed.locator.rfind(".")
        if idx <= 0:
            return None
        kind = MemberKind(parsed.kind)
        members = self.universe.find_members(
            parsed.locator[:idx], parsed.locator[idx + 1 :], kinds=[kind]
        )
        return members[0] if members else None

    def _find_method(self, locator: str) -> MemberDescriptor | None:
        method = deconstruct_method_locator(locator)
        if method is None:
            return None
        candidates = self.universe.find_members(
            method.type_locator,
            method.name,
            kinds=[MemberKind.CONSTRUCTOR, MemberKind.METHOD],
        )

        def matches(m: MemberDescriptor) -> bool:
            arity = len(m.generic_parameters)
            if arity and arity != method.generic_count:
                return False
            return len(m.parameters) == method.parameter_count

        return next((m for m in candidates if matches(m)), None) or next(
            iter(candidates), None
        )

    def link_to_type(self, type_: TypeDescriptor) -> ResolvedLink:
        if self.universe.is_local(type_):
            url = page_url(type_.full_name, self.style)
        elif type_.module == PLATFORM_MODULE:
            url = platform_url(type_.full_name)
        else:
            url = None
        return ResolvedLink(target=type_, name=type_.name, url=url)

    def link_to_member(
        self, member: MemberDescriptor, context: TypeDescriptor | None = None
    ) -> ResolvedLink:
        declaring = self.universe.find_type(member.declaring_type)
        anchor = member_anchor(member)
        if context is not None and context.full_name == member.declaring_type:
            url: str | None = f"#{anchor}"
        elif declaring is not None and self.universe.is_local(declaring):
            url = f"{page_url(declaring.full_name, self.style)}#{anchor}"
        elif declaring is not None and declaring.module == PLATFORM_MODULE:
            url = platform_url(f"{declaring.full_name}.{member.name}")
        else:
            url = None
        return ResolvedLink(target=member, name=member.display_name, url=url)

    def type_link(
        self,
        type_ref: str,
        context: TypeDescriptor | None = None,
        method_parameters: Sequence[str] = (),
    ) -> Inline:
        """Inline link for a documentation-id type reference, e.g. a parameter type."""
        ref = parse_type_reference(type_ref)
        type_parameters = context.generic_parameters if context else ()
        label = format_type_ref(ref, type_parameters, method_parameters)
        if ref.is_generic_parameter:
            return Text(label)
        type_ = self.universe.find_type(ref.definition)
        if type_ is None:
            return Text(label)
        return self.link_to_type(type_).to_inline(label)
