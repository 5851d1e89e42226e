"""Logic for composing type documentation pages."""

import logging

from xmldoc2md.descriptors import MemberKind, TypeDescriptor
from xmldoc2md.documentation_index import DocumentationIndex
from xmldoc2md.example_store import ExampleStore
from xmldoc2md.member_selector import select_enum_fields, select_members
from xmldoc2md.metadata_universe import MetadataUniverse
from xmldoc2md.output_elements import (
    Block,
    Document,
    Header,
    HorizontalRule,
    Inline,
    InlineCode,
    InlineGroup,
    LineBreak,
    Link,
    Paragraph,
    Table,
    Text,
    join_inline,
)
from xmldoc2md.page_context import PageContext
from xmldoc2md.render_member_section import render_members_section
from xmldoc2md.render_options import RenderOptions
from xmldoc2md.render_sections import (
    TYPE_OBSOLETE,
    render_example,
    render_obsolete,
    render_remarks,
    render_signature,
    render_summary,
    render_type_parameters,
)

logger = logging.getLogger(__name__)


def render_type_page(
    type_: TypeDescriptor,
    universe: MetadataUniverse,
    docs: DocumentationIndex,
    options: RenderOptions | None = None,
    examples: ExampleStore | None = None,
) -> Document:
    """Compose the documentation page of one type."""
    options = options or RenderOptions()
    ctx = PageContext.create(type_, universe, docs, options, examples)
    page = Document()

    if options.has_back_button:
        page.extend(_render_back_button(options, top=True))

    page.append(Header(Text(type_.name), 1))
    page.append(Paragraph(Text(f"Namespace: {type_.namespace}")))

    type_doc = docs.get_member(type_.identifier)
    if type_doc is not None:
        logger.info("    (documented)")

    page.extend(
        render_obsolete(type_.obsolete, type_.obsolete_message, TYPE_OBSOLETE)
    )
    page.extend(render_summary(ctx, type_doc))
    page.extend(render_signature(ctx, type_.signature))
    page.extend(render_type_parameters(ctx, type_.generic_parameters, type_doc))
    page.extend(_render_inheritance_and_implements(ctx))
    page.extend(render_remarks(ctx, type_doc))

    if type_.is_enum:
        page.extend(_render_enum_fields(ctx))
    else:
        for kind in MemberKind:
            members = select_members(type_, kind, options.policy)
            page.extend(render_members_section(ctx, members))

    example = render_example(ctx, type_.identifier)
    if example:
        logger.info("    (example)")
    page.extend(example)

    if options.has_back_button:
        page.extend(_render_back_button(options, bottom=True))

    return page


def _render_back_button(
    options: RenderOptions,
    *,
    top: bool = False,
    bottom: bool = False,
) -> list[Block]:
    """Render the navigation link back to the index."""
    if top and bottom:
        msg = "Back button cannot be placed at the top and the bottom at once"
        raise ValueError(msg)
    link = Paragraph(
        Link(InlineCode(options.back_button_label), options.back_button_target)
    )
    if bottom:
        return [HorizontalRule(), link]
    return [link, HorizontalRule()]


def _render_inheritance_and_implements(ctx: PageContext) -> list[Block]:
    """Render the root-to-self inheritance chain and implemented interfaces."""
    type_ = ctx.type_
    lines: list[list[Inline]] = []

    chain = ctx.universe.inheritance_chain(type_)
    if chain:
        links = [
            ctx.resolver.link_to_type(type_).to_inline()
            if locator == type_.full_name
            else ctx.resolver.type_link(locator, type_)
            for locator in chain
        ]
        lines.append([Text("Inheritance "), join_inline(links, " → ")])

    if type_.implements:
        links = [ctx.resolver.type_link(i, type_) for i in type_.implements]
        lines.append([Text("Implements "), join_inline(links, ", ")])

    if not lines:
        return []
    children: list[Inline] = []
    for i, line in enumerate(lines):
        if i:
            children.append(LineBreak())
        children.extend(line)
    return [Paragraph(InlineGroup(tuple(children)))]


def _render_enum_fields(ctx: PageContext) -> list[Block]:
    """Render the enumeration members as a Name/Value/Description table.

    Fields without a summary are left out of the table.
    """
    fields = select_enum_fields(ctx.type_)
    if not fields:
        return []

    title = "Fields (Flags)" if ctx.type_.is_flags else "Fields"
    rows: list[tuple[Inline, ...]] = []
    for f in fields:
        doc = ctx.docs.get_member(f.identifier)
        summary = doc.element("summary") if doc is not None else None
        if summary is None:
            continue
        description = ctx.converter.convert_inline(summary.children)
        value = "" if f.value is None else str(f.value)
        rows.append((Text(f.name), Text(value), description or Text("")))
    if not rows:
        return []
    logger.info("    %s", title)

    return [
        Header(Text(title), 2),
        Table(
            headers=("Name", "Value", "Description"),
            rows=tuple(rows),
            alignments=("left", "right", "left"),
        ),
    ]
