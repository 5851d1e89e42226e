"""Page sections shared by type headers and member sections."""

from collections.abc import Sequence

from xmldoc2md.doc_nodes import DocElement
from xmldoc2md.output_elements import (
    Block,
    CodeBlock,
    Header,
    HorizontalRule,
    InlineCode,
    InlineGroup,
    LineBreak,
    Paragraph,
    RawBlock,
    Strong,
    Text,
)
from xmldoc2md.page_context import PageContext

TYPE_OBSOLETE = "This type is obsolete."
MEMBER_OBSOLETE = "This member is obsolete."


def render_obsolete(
    obsolete: bool, message: str | None, default_message: str
) -> list[Block]:
    """Render the caution callout for obsolete types and members."""
    if not obsolete:
        return []
    return [
        Header(Text("Caution"), 4),
        Paragraph(Text(message or default_message)),
        HorizontalRule(),
    ]


def render_summary(ctx: PageContext, doc: DocElement | None) -> list[Block]:
    summary = doc.element("summary") if doc is not None else None
    if summary is None:
        return []
    converted = ctx.converter.convert(summary.children)
    return [converted] if converted.blocks else []


def render_signature(ctx: PageContext, signature: str) -> list[Block]:
    if not signature.strip():
        return []
    return [CodeBlock(ctx.options.code_language, signature.strip())]


def render_type_parameters(
    ctx: PageContext,
    names: Sequence[str],
    doc: DocElement | None,
) -> list[Block]:
    """Render one entry per generic parameter with its ``typeparam`` docs."""
    if not names:
        return []
    parts: list[Block] = [Header(Text("Type Parameters"), 4)]
    for name in names:
        typeparam = doc.find_named("typeparam", name) if doc is not None else None
        description = (
            ctx.converter.convert_inline(typeparam.children)
            if typeparam is not None
            else None
        )
        children = [InlineCode(name)]
        if description is not None:
            children += [LineBreak(), description]
        parts.append(Paragraph(InlineGroup(tuple(children))))
    return parts


def render_remarks(ctx: PageContext, doc: DocElement | None) -> list[Block]:
    remarks = doc.element("remarks") if doc is not None else None
    if remarks is None:
        return []
    converted = ctx.converter.convert(remarks.children)
    if not converted.blocks:
        return []
    return [Paragraph(Strong(Text("Remarks:"))), converted]


def render_example(ctx: PageContext, identifier: str) -> list[Block]:
    """Append a pre-rendered example snippet when one exists."""
    snippet = ctx.examples.get(identifier)
    if snippet is None or not snippet.strip():
        return []
    return [RawBlock(snippet.strip())]
