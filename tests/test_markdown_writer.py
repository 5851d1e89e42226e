"""Tests for Markdown serialization."""

from xmldoc2md.markdown_writer import render_block, render_inline, render_markdown
from xmldoc2md.md_codeblock import md_codeblock
from xmldoc2md.md_table import md_table
from xmldoc2md.output_elements import (
    Anchor,
    BlockGroup,
    CodeBlock,
    Document,
    Header,
    HorizontalRule,
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


def test_md_codeblock() -> None:
    """Test Markdown code block generation."""
    assert md_codeblock("csharp", "int x;\n") == "```csharp\nint x;\n```"
    assert md_codeblock("md", "```x```") == "````md\n```x```\n````"


def test_md_table() -> None:
    """Test Markdown table generation with alignments."""
    table = md_table(["A", "B"], [["1", "a|b"]], ["left", "right"])
    assert table == "| A | B |\n| --- | ---: |\n| 1 | a\\|b |"
    assert md_table(["A"], []) == ""


def test_inline_elements() -> None:
    """Verify each inline element's Markdown form."""
    assert render_inline(Text("List<T>")) == "List&lt;T&gt;"
    assert render_inline(InlineCode("x")) == "`x`"
    assert render_inline(InlineCode("a`b")) == "`` a`b ``"
    assert render_inline(Strong(Text("bold"))) == "**bold**"
    assert render_inline(Link(Text("Foo"), "./foo.md")) == "[Foo](./foo.md)"
    assert render_inline(LineBreak()) == "<br>\n"
    assert render_inline(Anchor("methods-run")) == '<a id="methods-run"/>'


def test_lists() -> None:
    """Verify bulleted and numbered lists."""
    items = (Text("One"), InlineGroup((Text("Two"), LineBreak(), Text("more"))))
    assert render_block(ListBlock(items)) == "- One\n- Two<br>\n  more"
    assert render_block(ListBlock(items[:1] * 2, ordered=True)) == "1. One\n2. One"


def test_document_spacing() -> None:
    """Verify blocks are separated by one blank line and empty ones vanish."""
    doc = Document()
    doc.append(Header(Text("Widget"), 1))
    doc.append(BlockGroup(()))
    doc.append(Paragraph(Text("Hello")))
    doc.append(HorizontalRule())
    doc.append(CodeBlock("csharp", "int x;"))
    doc.append(Table(("A",), ()))
    doc.append(RawBlock("\nraw\n"))
    assert render_markdown(doc) == (
        "# Widget\n\nHello\n\n---\n\n```csharp\nint x;\n```\n\nraw\n"
    )
    assert render_markdown(Document()) == ""
