"""Conversion of documentation-comment trees into output elements."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from enum import Enum

from xmldoc2md.cross_reference import CrossReferenceResolver
from xmldoc2md.descriptors import TypeDescriptor
from xmldoc2md.doc_nodes import DocElement, DocNode, DocText
from xmldoc2md.output_elements import (
    Block,
    BlockGroup,
    CodeBlock,
    Header,
    Inline,
    InlineCode,
    InlineGroup,
    LineBreak,
    Link,
    ListBlock,
    Paragraph,
    RawBlock,
    Strong,
    Text,
    is_inline,
    join_inline,
    plain_text,
)

WHITESPACE_RUN_RE = re.compile(r"\s{2,}")
LIST_ITEM_SEPARATOR = " - "

Handler = Callable[[DocElement], "Inline | Block | None"]


class DocTag(Enum):
    """Documentation tags with dedicated handling; anything else renders as text."""

    SUMMARY = "summary"
    REMARKS = "remarks"
    PARA = "para"
    EXAMPLE = "example"
    CODE = "code"
    LIST = "list"
    ITEM = "item"
    TERM = "term"
    DESCRIPTION = "description"
    PARAM = "param"
    TYPEPARAM = "typeparam"
    RETURNS = "returns"
    VALUE = "value"
    EXCEPTION = "exception"
    SEE = "see"
    SEEALSO = "seealso"
    BR = "br"
    C = "c"

    @classmethod
    def parse(cls, tag: str) -> DocTag | None:
        try:
            return cls(tag)
        except ValueError:
            return None


def collapse_whitespace(text: str) -> str:
    """Collapse runs of two or more whitespace characters into one space."""
    return WHITESPACE_RUN_RE.sub(" ", text)


def format_code_block(code: str) -> str:
    """Strip surrounding blank lines and the first line's indentation.

    Every line loses at most as many leading spaces as the first line had, so
    applying this twice gives the same result as applying it once.
    """
    if not code:
        return code
    lines = code.replace("\r\n", "\n").split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    text = "\n".join(lines).rstrip()
    if not text:
        return ""

    indent = len(text) - len(text.lstrip(" "))

    def reindent_line(line: str) -> str:
        i = 0
        while i < indent and i < len(line) and line[i] == " ":
            i += 1
        return line[i:]

    return "\n".join(reindent_line(line) for line in text.split("\n"))


class MarkupConverter:
    """Walks documentation nodes for one page and emits output elements."""

    def __init__(
        self,
        resolver: CrossReferenceResolver,
        context: TypeDescriptor | None = None,
        code_language: str = "csharp",
    ) -> None:
        self.resolver = resolver
        self.context = context
        self.code_language = code_language
        self._handlers: dict[DocTag, Handler] = {
            DocTag.SEE: self._convert_see,
            DocTag.SEEALSO: self._convert_see,
            DocTag.C: self._convert_inline_code,
            DocTag.BR: self._convert_line_break,
            DocTag.PARA: self._convert_nested,
            DocTag.EXAMPLE: self._convert_nested,
            DocTag.CODE: self._convert_code,
            DocTag.LIST: self._convert_list,
        }

    def convert(self, nodes: Iterable[DocNode] | None) -> BlockGroup:
        """Convert nodes to blocks, wrapping runs of inline content in paragraphs."""
        blocks: list[Block] = []
        run: list[Inline] = []

        def flush() -> None:
            paragraph = _finish_run(run)
            if paragraph is not None:
                blocks.append(Paragraph(paragraph))
            run.clear()

        for node in nodes or ():
            element = self.convert_node(node)
            if element is None:
                continue
            if is_inline(element):
                run.append(element)
            else:
                flush()
                blocks.append(element)
        flush()
        return BlockGroup(tuple(blocks))

    def convert_inline(self, nodes: Iterable[DocNode] | None) -> InlineGroup | None:
        """Convert nodes onto a single line; None when nothing is left.

        Block content is flattened rather than dropped: paragraphs and list
        entries become space-separated runs and code blocks become code spans.
        """
        runs: list[list[Inline]] = [[]]
        for node in nodes or ():
            element = self.convert_node(node)
            if element is None:
                continue
            if is_inline(element):
                runs[-1].append(element)
            else:
                runs.extend([i] for i in _flatten_block(element))
                runs.append([])
        finished = [r for r in (_finish_run(run) for run in runs) if r is not None]
        if not finished:
            return None
        if len(finished) == 1:
            return finished[0]
        return join_inline(finished, " ")

    def convert_node(self, node: DocNode) -> Inline | Block | None:
        if isinstance(node, DocText):
            return Text(collapse_whitespace(node.text))
        if isinstance(node, DocElement):
            tag = DocTag.parse(node.tag)
            handler = self._handlers.get(tag) if tag is not None else None
            if handler is None:
                return Text(collapse_whitespace(node.text))
            return handler(node)
        return None

    def _convert_see(self, element: DocElement) -> Inline:
        display = collapse_whitespace(element.text).strip() or None
        cref = element.get("cref")
        href = element.get("href")
        if cref is None and href:
            return Link(Text(display or href), href)
        langword = element.get("langword")
        if cref is None and langword:
            return InlineCode(langword)
        return self.resolver.resolve(cref, self.context, display).to_inline(display)

    def _convert_inline_code(self, element: DocElement) -> Inline:
        return InlineCode(element.text)

    def _convert_line_break(self, element: DocElement) -> Inline:
        if element.text:
            return InlineGroup((LineBreak(), Text(element.text)))
        return LineBreak()

    def _convert_nested(self, element: DocElement) -> Block:
        return self.convert(element.children)

    def _convert_code(self, element: DocElement) -> Block:
        return CodeBlock(self.code_language, format_code_block(element.text))

    def _convert_list(self, element: DocElement) -> Block:
        items: list[Inline] = []
        for item in element.elements("item"):
            term_el = item.element("term")
            description_el = item.element("description")
            term = (
                self.convert_inline(term_el.children) if term_el is not None else None
            )
            description = (
                self.convert_inline(description_el.children)
                if description_el is not None
                else None
            )

            parts: list[Inline] = []
            if term is not None:
                parts.append(Strong(term))
                if description is not None:
                    parts += [Text(LIST_ITEM_SEPARATOR), description]
            elif description is not None:
                parts.append(description)
            elif term_el is None and description_el is None:
                bare = self.convert_inline(item.children)
                if bare is not None:
                    parts.append(bare)
            items.append(InlineGroup(tuple(parts)))
        return ListBlock(tuple(items), ordered=element.get("type") == "number")


def _flatten_block(block: Block) -> list[Inline]:
    """Inline elements for a block, one per paragraph, list entry or code block."""
    if isinstance(block, (Paragraph, Header)):
        return [block.content]
    if isinstance(block, BlockGroup):
        return [i for b in block.blocks for i in _flatten_block(b)]
    if isinstance(block, ListBlock):
        return list(block.items)
    if isinstance(block, (CodeBlock, RawBlock)):
        text = " ".join(plain_text(block).split())
        if not text:
            return []
        return [InlineCode(text) if isinstance(block, CodeBlock) else Text(text)]
    return []


def _finish_run(run: list[Inline]) -> InlineGroup | None:
    """Trim whitespace at the edges of an inline run; None if nothing remains."""
    children = list(run)
    while children and isinstance(children[0], Text):
        stripped = children[0].text.lstrip()
        if stripped:
            children[0] = Text(stripped)
            break
        children.pop(0)
    while children and isinstance(children[-1], Text):
        stripped = children[-1].text.rstrip()
        if stripped:
            children[-1] = Text(stripped)
            break
        children.pop()
    if not children:
        return None
    return InlineGroup(tuple(children))
