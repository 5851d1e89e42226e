"""Serialization of output elements to Markdown text."""

from collections.abc import Iterable

from xmldoc2md.md_codeblock import md_codeblock
from xmldoc2md.md_table import md_table
from xmldoc2md.output_elements import (
    Anchor,
    Block,
    BlockGroup,
    CodeBlock,
    Document,
    Header,
    HorizontalRule,
    Inline,
    InlineCode,
    InlineGroup,
    LineBreak,
    Link,
    ListBlock,
    Paragraph,
    RawBlock,
    Strong,
    Table,
    Text,
)


def render_markdown(blocks: Document | Iterable[Block]) -> str:
    """Render a page to Markdown, one blank line between blocks."""
    rendered = [md for md in (render_block(b) for b in blocks) if md]
    if not rendered:
        return ""
    return "\n\n".join(rendered).rstrip() + "\n"


def render_block(block: Block) -> str:
    if isinstance(block, Paragraph):
        return render_inline(block.content).strip()
    if isinstance(block, Header):
        return f"{'#' * block.level} {render_inline(block.content).strip()}"
    if isinstance(block, HorizontalRule):
        return "---"
    if isinstance(block, CodeBlock):
        return md_codeblock(block.language, block.code)
    if isinstance(block, ListBlock):
        return _render_list(block)
    if isinstance(block, Table):
        return md_table(
            list(block.headers),
            [[render_inline(c).strip() for c in row] for row in block.rows],
            list(block.alignments),
        )
    if isinstance(block, BlockGroup):
        return "\n\n".join(md for md in map(render_block, block.blocks) if md)
    if isinstance(block, RawBlock):
        return block.text.strip()
    msg = f"Unsupported block element: {type(block).__name__}"
    raise TypeError(msg)


def render_inline(element: Inline) -> str:
    if isinstance(element, Text):
        return escape_text(element.text)
    if isinstance(element, InlineCode):
        return _code_span(element.text)
    if isinstance(element, Strong):
        return f"**{render_inline(element.content).strip()}**"
    if isinstance(element, Link):
        return f"[{render_inline(element.content)}]({element.url})"
    if isinstance(element, LineBreak):
        return "<br>\n"
    if isinstance(element, Anchor):
        return f'<a id="{element.id}"/>'
    if isinstance(element, InlineGroup):
        return "".join(render_inline(c) for c in element.children)
    msg = f"Unsupported inline element: {type(element).__name__}"
    raise TypeError(msg)


def escape_text(text: str) -> str:
    """Escape angle brackets so generic names are not read as HTML."""
    return text.replace("<", "&lt;").replace(">", "&gt;")


def _code_span(text: str) -> str:
    if "`" not in text:
        return f"`{text}`"
    return f"`` {text} ``"


def _render_list(block: ListBlock) -> str:
    lines = []
    for i, item in enumerate(block.items, start=1):
        marker = f"{i}." if block.ordered else "-"
        body = render_inline(item).strip().replace("\n", "\n" + " " * (len(marker) + 1))
        lines.append(f"{marker} {body}")
    return "\n".join(lines)
