"""Tests for resolving referenced modules."""

from pathlib import Path

from xmldoc2md.load_metadata import ModuleReference
from xmldoc2md.module_resolver import ModuleResolver


def write_module(path: Path, name: str, type_name: str) -> Path:
    """Write a minimal metadata file declaring one type."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        f"module: {name}\ntypes:\n  - fullName: {type_name}\n", encoding="utf-8"
    )
    return path


def test_versioned_layout_wins(tmp_path: Path) -> None:
    """Verify {name}/{version}/{name}.yml is preferred over {name}.yml."""
    versioned = write_module(tmp_path / "Other" / "2.0" / "Other.yml", "Other", "O.A")
    write_module(tmp_path / "Other.yml", "Other", "O.B")
    resolver = ModuleResolver([tmp_path])
    assert resolver.find("Other", "2.0") == versioned
    assert resolver.find("Other") == tmp_path / "Other.yml"


def test_directories_are_searched_in_order(tmp_path: Path) -> None:
    """Verify earlier search directories take priority."""
    first = write_module(tmp_path / "one" / "Other.yml", "Other", "O.A")
    write_module(tmp_path / "two" / "Other.yml", "Other", "O.B")
    resolver = ModuleResolver([tmp_path / "one"])
    resolver.add_search_directory(tmp_path / "two")
    resolver.add_search_directory(tmp_path / "one")
    assert resolver.search_directories == [tmp_path / "one", tmp_path / "two"]
    assert resolver.find("Other") == first


def test_resolve_all_skips_missing(tmp_path: Path) -> None:
    """Verify references that cannot be found are skipped."""
    write_module(tmp_path / "Other.yml", "Other", "O.A")
    modules = ModuleResolver([tmp_path]).resolve_all(
        (ModuleReference("Other"), ModuleReference("Missing", "1.0"))
    )
    assert [m.module for m in modules] == ["Other"]
    assert modules[0].types[0].full_name == "O.A"
