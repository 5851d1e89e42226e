"""Logic for rendering the per-member sections of a type page."""

import logging

from xmldoc2md.descriptors import MemberDescriptor, MemberKind
from xmldoc2md.doc_nodes import DocElement
from xmldoc2md.links import member_anchor
from xmldoc2md.output_elements import (
    Anchor,
    Block,
    BlockGroup,
    Header,
    Inline,
    InlineCode,
    InlineGroup,
    LineBreak,
    Paragraph,
    Strong,
    Text,
)
from xmldoc2md.page_context import PageContext
from xmldoc2md.render_sections import (
    MEMBER_OBSOLETE,
    render_example,
    render_obsolete,
    render_remarks,
    render_signature,
    render_summary,
    render_type_parameters,
)

logger = logging.getLogger(__name__)


def render_members_section(
    ctx: PageContext,
    members: list[MemberDescriptor],
) -> list[Block]:
    """Render a titled section for members of a single kind."""
    if not members:
        return []
    title = members[0].kind.title
    logger.info("    %s", title)
    parts: list[Block] = [Header(Text(title), 2)]
    for m in members:
        parts.extend(render_member(ctx, m))
    return parts


def render_member(ctx: PageContext, m: MemberDescriptor) -> list[Block]:
    """Render a single member section."""
    doc = ctx.docs.get_member(m.identifier)
    label = m.signature_label(ctx.type_.generic_parameters)
    header = InlineGroup((Anchor(member_anchor(m)), Strong(Text(label))))
    parts: list[Block] = [Header(header, 3)]

    parts.extend(render_obsolete(m.obsolete, m.obsolete_message, MEMBER_OBSOLETE))
    parts.extend(render_summary(ctx, doc))
    parts.extend(render_signature(ctx, m.signature))

    if m.kind.is_callable:
        parts.extend(render_type_parameters(ctx, m.generic_parameters, doc))
        parts.extend(_render_member_params(ctx, m, doc))
        if m.returns_value:
            parts.extend(_render_member_returns(ctx, m, doc))

    if m.kind is MemberKind.PROPERTY:
        parts.extend(_render_property_value(ctx, m, doc))

    parts.extend(_render_member_exceptions(ctx, doc))
    parts.extend(render_remarks(ctx, doc))

    example = render_example(ctx, m.identifier)
    parts.extend(example)

    logger.info(
        "      %s%s%s",
        m.identifier,
        " (documented)" if doc is not None else "",
        " (example)" if example else "",
    )
    return parts


def _render_member_params(
    ctx: PageContext,
    m: MemberDescriptor,
    doc: DocElement | None,
) -> list[Block]:
    """Render one entry per parameter: name, type link and description."""
    if not m.parameters:
        return []
    parts: list[Block] = [Header(Text("Parameters"), 4)]
    for p in sorted(m.parameters, key=lambda p: p.position):
        type_link = ctx.resolver.type_link(p.type, ctx.type_, m.generic_parameters)
        children: list[Inline] = [InlineCode(p.name), Text(" "), type_link]
        param = doc.find_named("param", p.name) if doc is not None else None
        description = (
            ctx.converter.convert_inline(param.children) if param is not None else None
        )
        if description is not None:
            children += [LineBreak(), description]
        parts.append(Paragraph(InlineGroup(tuple(children))))
    return parts


def _render_member_returns(
    ctx: PageContext,
    m: MemberDescriptor,
    doc: DocElement | None,
) -> list[Block]:
    """Render the return value: documented description, else the return type."""
    parts: list[Block] = [Header(Text("Returns"), 4)]
    returns = doc.element("returns") if doc is not None else None
    converted = (
        ctx.converter.convert(returns.children) if returns is not None else None
    )
    if converted is not None and converted.blocks:
        parts.append(converted)
    elif m.return_type:
        parts.append(
            Paragraph(
                ctx.resolver.type_link(m.return_type, ctx.type_, m.generic_parameters)
            )
        )
    return parts


def _render_property_value(
    ctx: PageContext,
    m: MemberDescriptor,
    doc: DocElement | None,
) -> list[Block]:
    """Render the property type followed by its ``value`` docs."""
    children: list[Inline] = []
    if m.return_type:
        children.append(ctx.resolver.type_link(m.return_type, ctx.type_))
    value = doc.element("value") if doc is not None else None
    description = (
        ctx.converter.convert_inline(value.children) if value is not None else None
    )
    if description is not None:
        if children:
            children.append(LineBreak())
        children.append(description)
    parts: list[Block] = [Header(Text("Property Value"), 4)]
    if children:
        parts.append(Paragraph(InlineGroup(tuple(children))))
    return parts


def _render_member_exceptions(
    ctx: PageContext,
    doc: DocElement | None,
) -> list[Block]:
    """Render one entry per documented exception.

    The description's first paragraph shares a line with the exception link;
    any further blocks follow it unchanged.
    """
    exceptions = list(doc.elements("exception")) if doc is not None else []
    if not exceptions:
        return []
    parts: list[Block] = [Header(Text("Exceptions"), 4)]
    for e in exceptions:
        link = ctx.resolver.resolve(e.get("cref"), ctx.type_).to_inline()
        blocks = _flat_blocks(ctx.converter.convert(e.children))
        if blocks and isinstance(blocks[0], Paragraph):
            first = blocks.pop(0)
            parts.append(Paragraph(InlineGroup((link, LineBreak(), first.content))))
        else:
            parts.append(Paragraph(link))
        parts.extend(blocks)
    return parts


def _flat_blocks(group: BlockGroup) -> list[Block]:
    """Blocks of a group with nested groups (from ``para``) expanded in place."""
    blocks: list[Block] = []
    for b in group.blocks:
        if isinstance(b, BlockGroup):
            blocks.extend(_flat_blocks(b))
        else:
            blocks.append(b)
    return blocks
