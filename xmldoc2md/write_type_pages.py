"""Logic for writing type pages to disk."""

import logging
from pathlib import Path

from xmldoc2md.documentation_index import DocumentationIndex
from xmldoc2md.example_store import ExampleStore
from xmldoc2md.links import page_name
from xmldoc2md.markdown_writer import render_markdown
from xmldoc2md.metadata_universe import MetadataUniverse
from xmldoc2md.render_options import RenderOptions
from xmldoc2md.render_type_page import render_type_page

logger = logging.getLogger(__name__)


def output_file_for_type(out_root: Path, full_name: str) -> Path:
    """``Lib.Widget`1`` -> ``out_root/lib.widget-1.md``."""
    return out_root / f"{page_name(full_name)}.md"


def write_type_pages(
    universe: MetadataUniverse,
    docs: DocumentationIndex,
    options: RenderOptions,
    out_root: Path,
    examples: ExampleStore | None = None,
) -> int:
    """Write one page per local type; returns the number of pages written.

    A type whose page cannot be composed is logged and skipped, and nothing
    is written for it.
    """
    examples = examples or ExampleStore(options.examples_directory)
    out_root.mkdir(parents=True, exist_ok=True)
    written = 0
    types = universe.local_types()
    total_types = len(types)
    print(f"Writing {total_types} type pages...")
    for t in types:
        logger.info("%s", t.full_name)
        try:
            md = render_markdown(render_type_page(t, universe, docs, options, examples))
        except Exception:
            logger.exception("Failed to render page for %s; skipping", t.full_name)
            continue
        output_file_for_type(out_root, t.full_name).write_text(md, encoding="utf-8")
        written += 1
        if written % 50 == 0:
            print(f"  ... wrote {written}/{total_types} types")
    return written
