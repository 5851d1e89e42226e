"""Tests for the module index page."""

from xmldoc2md.descriptors import TypeDescriptor
from xmldoc2md.documentation_index import DocumentationIndex
from xmldoc2md.markdown_writer import render_markdown
from xmldoc2md.metadata_universe import MetadataUniverse
from xmldoc2md.render_index_page import render_index_page
from xmldoc2md.render_options import RenderOptions


def test_index_lists_types_by_namespace(
    universe: MetadataUniverse, docs: DocumentationIndex
) -> None:
    """Verify the index links every type with its summary."""
    md = render_markdown(render_index_page(universe, docs))
    assert md == (
        "# Lib\n\n"
        "## Lib\n\n"
        "- [Box&lt;T&gt;](./lib.box-1.md) - Holds one value.\n"
        "- [Color](./lib.color.md) - Colors.\n"
        "- [Widget](./lib.widget.md) - A widget that renders "
        "[Color](./lib.color.md) values.\n"
    )


def test_index_global_namespace_and_link_style(docs: DocumentationIndex) -> None:
    """Verify types without a namespace and platform link styles."""
    loose = TypeDescriptor(full_name="Loose", namespace="")
    universe = MetadataUniverse("Lib", [loose])
    options = RenderOptions.from_config({"links": {"platform": "github-pages"}})
    md = render_markdown(render_index_page(universe, docs, options))
    assert "## Global Namespace\n\n- [Loose](./loose)" in md


def test_index_of_empty_module(docs: DocumentationIndex) -> None:
    """Verify an empty module still gets a page."""
    md = render_markdown(render_index_page(MetadataUniverse("Empty", []), docs))
    assert md == "# Empty\n\nThis module declares no types.\n"
