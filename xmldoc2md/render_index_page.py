"""Logic for rendering the module index page."""

from xmldoc2md.cross_reference import CrossReferenceResolver
from xmldoc2md.documentation_index import DocumentationIndex
from xmldoc2md.markup_converter import MarkupConverter
from xmldoc2md.metadata_universe import MetadataUniverse
from xmldoc2md.output_elements import (
    Document,
    Header,
    Inline,
    InlineGroup,
    ListBlock,
    Paragraph,
    Text,
)
from xmldoc2md.render_options import RenderOptions

GLOBAL_NAMESPACE_TITLE = "Global Namespace"


def render_index_page(
    universe: MetadataUniverse,
    docs: DocumentationIndex,
    options: RenderOptions | None = None,
) -> Document:
    """Render the landing page listing every local type by namespace."""
    options = options or RenderOptions()
    resolver = CrossReferenceResolver(universe, options.link_style)
    page = Document()
    page.append(Header(Text(universe.module), 1))

    namespaces = universe.namespaces()
    if not namespaces:
        page.append(Paragraph(Text("This module declares no types.")))
        return page

    for ns in sorted(namespaces, key=str.lower):
        types = sorted(namespaces[ns], key=lambda t: t.name.lower())
        items: list[Inline] = []
        for t in types:
            converter = MarkupConverter(
                resolver, context=t, code_language=options.code_language
            )
            doc = docs.get_member(t.identifier)
            summary = doc.element("summary") if doc is not None else None
            description = (
                converter.convert_inline(summary.children)
                if summary is not None
                else None
            )
            children: list[Inline] = [resolver.link_to_type(t).to_inline()]
            if description is not None:
                children += [Text(" - "), description]
            items.append(InlineGroup(tuple(children)))

        page.append(Header(Text(ns or GLOBAL_NAMESPACE_TITLE), 2))
        page.append(ListBlock(tuple(items)))
    return page
