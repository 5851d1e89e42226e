"""Block and inline elements handed to the Markdown writer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union

# -----------------------------
# Inline elements
# -----------------------------


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class InlineCode:
    text: str


@dataclass(frozen=True)
class Strong:
    content: Inline


@dataclass(frozen=True)
class Link:
    content: Inline
    url: str


@dataclass(frozen=True)
class LineBreak:
    """Hard line break inside a paragraph."""


@dataclass(frozen=True)
class Anchor:
    """Named target for in-page links."""

    id: str


@dataclass(frozen=True)
class InlineGroup:
    """A run of inline elements rendered back to back."""

    children: tuple[Inline, ...]


Inline = Union[Text, InlineCode, Strong, Link, LineBreak, Anchor, InlineGroup]

# -----------------------------
# Block elements
# -----------------------------


@dataclass(frozen=True)
class Paragraph:
    content: Inline


@dataclass(frozen=True)
class Header:
    content: Inline
    level: int


@dataclass(frozen=True)
class HorizontalRule:
    pass


@dataclass(frozen=True)
class CodeBlock:
    language: str
    code: str


@dataclass(frozen=True)
class ListBlock:
    items: tuple[Inline, ...]
    ordered: bool = False


@dataclass(frozen=True)
class Table:
    headers: tuple[str, ...]
    rows: tuple[tuple[Inline, ...], ...]
    alignments: tuple[str, ...] = ()  # "left" | "right" | "center", per column


@dataclass(frozen=True)
class BlockGroup:
    """Blocks converted from one documentation fragment."""

    blocks: tuple[Block, ...]


@dataclass(frozen=True)
class RawBlock:
    """Pre-rendered Markdown inserted verbatim."""

    text: str


Block = Union[
    Paragraph, Header, HorizontalRule, CodeBlock, ListBlock, Table, BlockGroup, RawBlock
]

INLINE_TYPES = (Text, InlineCode, Strong, Link, LineBreak, Anchor, InlineGroup)


def is_inline(element: object) -> bool:
    return isinstance(element, INLINE_TYPES)


def join_inline(items: Iterable[Inline], separator: str) -> InlineGroup:
    """Join inline elements with a text separator."""
    children: list[Inline] = []
    for i, item in enumerate(items):
        if i:
            children.append(Text(separator))
        children.append(item)
    return InlineGroup(tuple(children))


def plain_text(element: Inline | Block | None) -> str:
    """Text content of an element, without any markup."""
    if element is None:
        return ""
    if isinstance(element, (Text, InlineCode, RawBlock)):
        return element.text
    if isinstance(element, (Strong, Link, Paragraph, Header)):
        return plain_text(element.content)
    if isinstance(element, LineBreak):
        return "\n"
    if isinstance(element, InlineGroup):
        return "".join(plain_text(c) for c in element.children)
    if isinstance(element, BlockGroup):
        return "\n".join(plain_text(b) for b in element.blocks)
    if isinstance(element, CodeBlock):
        return element.code
    if isinstance(element, ListBlock):
        return "\n".join(plain_text(i) for i in element.items)
    return ""


class Document:
    """Ordered, append-only sequence of blocks making up one page."""

    def __init__(self) -> None:
        self._blocks: list[Block] = []

    def append(self, block: Block) -> None:
        self._blocks.append(block)

    def extend(self, blocks: Iterable[Block]) -> None:
        self._blocks.extend(blocks)

    @property
    def elements(self) -> tuple[Block, ...]:
        return tuple(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(tuple(self._blocks))

    def __len__(self) -> int:
        return len(self._blocks)
