"""Tests for the metadata universe."""

from xmldoc2md.descriptors import MemberKind, TypeDescriptor
from xmldoc2md.metadata_universe import MetadataUniverse


def test_lookup_order() -> None:
    """Verify platform types win, then local, then referenced types."""
    local = TypeDescriptor(full_name="Lib.A", namespace="Lib", module="Lib")
    shadow = TypeDescriptor(full_name="System.String", namespace="System")
    referenced = TypeDescriptor(full_name="Lib.A", namespace="Lib", module="Other")
    universe = MetadataUniverse("Lib", [local, shadow], [referenced])
    assert universe.find_type("Lib.A") is local
    assert universe.find_type("System.String") is not shadow
    assert universe.is_local(local)
    assert not universe.is_local(referenced)


def test_inheritance_chain(universe: MetadataUniverse) -> None:
    """Verify the chain runs from the root to the type itself."""
    widget = universe.find_type("Lib.Widget")
    assert universe.inheritance_chain(widget) == ["System.Object", "Lib.Widget"]
    assert universe.inheritance_chain(universe.find_type("Lib.Color")) == []


def test_find_members_by_kind(universe: MetadataUniverse) -> None:
    """Verify member lookups match names exactly and filter by kind."""
    assert [m.kind for m in universe.find_members("Lib.Widget", "Size")] == [
        MemberKind.PROPERTY
    ]
    assert universe.find_members("Lib.Widget", "Size", [MemberKind.METHOD]) == []
    assert universe.find_members("Lib.Widget", "Rend") == []


def test_namespaces(universe: MetadataUniverse) -> None:
    """Verify local types are grouped by namespace."""
    assert [t.full_name for t in universe.namespaces()["Lib"]] == [
        "Lib.Box`1",
        "Lib.Color",
        "Lib.Widget",
    ]
