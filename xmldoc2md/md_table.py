"""Utility for generating Markdown tables."""

ALIGNMENT_MARKERS = {
    "left": "---",
    "right": "---:",
    "center": ":---:",
}


def md_table(
    headers: list[str],
    rows: list[list[str]],
    alignments: list[str] | None = None,
) -> str:
    """Generate a Markdown table.

    ``alignments`` holds one of ``left``, ``right`` or ``center`` per column;
    missing entries default to left. Pipes inside cells are escaped.
    """
    if not rows:
        return ""
    alignments = list(alignments or [])
    markers = [
        ALIGNMENT_MARKERS.get(alignments[i] if i < len(alignments) else "left", "---")
        for i in range(len(headers))
    ]
    out = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(markers) + " |",
    ]
    out.extend("| " + " | ".join(_cell(c) for c in r) + " |" for r in rows)
    return "\n".join(out)


def _cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")
