"""Utility for generating fenced Markdown code blocks."""


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced code block, widening the fence if the code has one."""
    fence = "```"
    while fence in code:
        fence += "`"
    return f"{fence}{lang}\n{code.rstrip()}\n{fence}"
