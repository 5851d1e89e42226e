"""Tests for cross-reference resolution."""

import pytest

from xmldoc2md.cross_reference import (
    CrossReferenceResolver,
    CrossReferenceToken,
    ResolvedLink,
    UnresolvedText,
    deconstruct_method_locator,
)
from xmldoc2md.descriptors import MemberDescriptor, MemberKind, TypeDescriptor
from xmldoc2md.links import LinkStyle
from xmldoc2md.metadata_universe import MetadataUniverse
from xmldoc2md.output_elements import Link, Text


@pytest.mark.parametrize("token", [None, "", "T:", "X", "Q:Lib.Widget", "TLib"])
def test_malformed_tokens_do_not_parse(token: str | None) -> None:
    """Verify short, colon-less and unknown-kind tokens are rejected."""
    assert CrossReferenceToken.parse(token) is None


def test_token_kinds() -> None:
    """Verify kind letters map to kinds."""
    assert CrossReferenceToken.parse("P:Lib.Widget.Size") == CrossReferenceToken(
        "property", "Lib.Widget.Size"
    )


def test_deconstruct_method_locator() -> None:
    """Verify generic arity, parameter count and name are split out."""
    method = deconstruct_method_locator("Lib.Box`1.Map``1(System.Func{`0,``0})")
    assert method is not None
    assert method.type_locator == "Lib.Box`1"
    assert method.name == "Map"
    assert method.generic_count == 1
    # Commas inside generic arguments count as separators
    assert method.parameter_count == 2


def test_deconstruct_constructor_locator() -> None:
    """Verify #ctor is turned back into .ctor."""
    method = deconstruct_method_locator("Lib.Widget.#ctor(System.Int32)")
    assert method is not None
    assert method.name == ".ctor"
    assert method.parameter_count == 1


def test_resolves_local_type(universe: MetadataUniverse) -> None:
    """Verify local types link to their page."""
    result = CrossReferenceResolver(universe).resolve("T:Lib.Color")
    assert isinstance(result, ResolvedLink)
    assert result.to_inline() == Link(Text("Color"), "./lib.color.md")


def test_well_known_type_links_to_platform_docs(universe: MetadataUniverse) -> None:
    """Verify platform types link to the reference documentation."""
    result = CrossReferenceResolver(universe).resolve("T:System.String")
    assert result.to_inline() == Link(
        Text("String"), "https://docs.microsoft.com/en-us/dotnet/api/system.string"
    )


def test_resolves_overload_by_parameter_count(universe: MetadataUniverse) -> None:
    """Verify method tokens pick the overload with the right parameter count."""
    resolver = CrossReferenceResolver(universe)
    target = resolver.find_target("M:Lib.Widget.Render(System.Int32,System.String)")
    assert isinstance(target, MemberDescriptor)
    assert target.name == "Render"
    ctor = resolver.find_target("M:Lib.Widget.#ctor(System.Int32)")
    assert isinstance(ctor, MemberDescriptor)
    assert ctor.kind is MemberKind.CONSTRUCTOR


def test_falls_back_to_first_overload(universe: MetadataUniverse) -> None:
    """Verify a parameter count mismatch still finds a same-named method."""
    target = CrossReferenceResolver(universe).find_target("M:Lib.Widget.Render")
    assert isinstance(target, MemberDescriptor)
    assert target.name == "Render"


def test_member_link_on_other_page(universe: MetadataUniverse) -> None:
    """Verify members link to their declaring page plus an anchor."""
    result = CrossReferenceResolver(universe).resolve("P:Lib.Widget.Size")
    assert result.to_inline() == Link(Text("Size"), "./lib.widget.md#properties-size")


def test_member_link_on_same_page(universe: MetadataUniverse) -> None:
    """Verify members of the current page link to a bare anchor."""
    widget = universe.find_type("Lib.Widget")
    result = CrossReferenceResolver(universe).resolve("P:Lib.Widget.Size", widget)
    assert result.to_inline() == Link(Text("Size"), "#properties-size")


def test_link_style_flags(universe: MetadataUniverse) -> None:
    """Verify GitLab wiki links drop both the prefix and the extension."""
    resolver = CrossReferenceResolver(universe, LinkStyle.for_platform("gitlab-wiki"))
    assert resolver.resolve("T:Lib.Box`1").to_inline() == Link(
        Text("Box<T>"), "lib.box-1"
    )


def test_unresolved_member_keeps_display_text(universe: MetadataUniverse) -> None:
    """Verify unresolvable tokens degrade to their display text."""
    resolver = CrossReferenceResolver(universe)
    result = resolver.resolve("M:Unknown.Type.Method", text="doIt")
    assert isinstance(result, UnresolvedText)
    assert result.to_inline() == Text("doIt")
    assert resolver.resolve("M:Unknown.Type.Method").to_inline() == Text(
        "M:Unknown.Type.Method"
    )


def test_referenced_types_render_as_text() -> None:
    """Verify types of referenced modules resolve but have no page."""
    other = TypeDescriptor(full_name="Other.Thing", namespace="Other", module="Other")
    universe = MetadataUniverse("Lib", [], [other])
    result = CrossReferenceResolver(universe).resolve("T:Other.Thing")
    assert isinstance(result, ResolvedLink)
    assert result.to_inline() == Text("Thing")


def test_type_link_for_constructed_generic(universe: MetadataUniverse) -> None:
    """Verify constructed generics link to their definition."""
    link = CrossReferenceResolver(universe).type_link(
        "System.Collections.Generic.List{System.Int32}"
    )
    assert link == Link(
        Text("List<Int32>"),
        "https://docs.microsoft.com/en-us/dotnet/api/system.collections.generic.list-1",
    )


def test_type_link_for_generic_parameter(universe: MetadataUniverse) -> None:
    """Verify generic parameters are plain text."""
    box = universe.find_type("Lib.Box`1")
    assert CrossReferenceResolver(universe).type_link("`0", box) == Text("T")
