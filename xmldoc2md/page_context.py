"""State shared by the renderers while one type page is composed."""

from dataclasses import dataclass

from xmldoc2md.cross_reference import CrossReferenceResolver
from xmldoc2md.descriptors import TypeDescriptor
from xmldoc2md.documentation_index import DocumentationIndex
from xmldoc2md.example_store import ExampleStore
from xmldoc2md.markup_converter import MarkupConverter
from xmldoc2md.metadata_universe import MetadataUniverse
from xmldoc2md.render_options import RenderOptions


@dataclass
class PageContext:
    """Collaborators bound to the type whose page is being rendered.

    A context lives for one page only; nothing in it is reused across pages.
    """

    type_: TypeDescriptor
    universe: MetadataUniverse
    docs: DocumentationIndex
    options: RenderOptions
    resolver: CrossReferenceResolver
    converter: MarkupConverter
    examples: ExampleStore

    @classmethod
    def create(
        cls,
        type_: TypeDescriptor,
        universe: MetadataUniverse,
        docs: DocumentationIndex,
        options: RenderOptions,
        examples: ExampleStore | None = None,
    ) -> "PageContext":
        resolver = CrossReferenceResolver(universe, options.link_style)
        converter = MarkupConverter(
            resolver, context=type_, code_language=options.code_language
        )
        return cls(
            type_=type_,
            universe=universe,
            docs=docs,
            options=options,
            resolver=resolver,
            converter=converter,
            examples=examples or ExampleStore(options.examples_directory),
        )
