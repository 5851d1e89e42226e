"""Convert XML documentation comments into Markdown pages.

Reads a module metadata YAML file and the compiler-generated XML documentation
for the same module, then writes one Markdown page per type plus an index
page into the output directory.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

import yaml

from xmldoc2md.documentation_index import DocumentationIndex
from xmldoc2md.example_store import ExampleStore
from xmldoc2md.links import LinkStyle
from xmldoc2md.load_config import load_config
from xmldoc2md.load_metadata import MetadataError, load_metadata
from xmldoc2md.markdown_writer import render_markdown
from xmldoc2md.metadata_universe import MetadataUniverse
from xmldoc2md.module_resolver import ModuleResolver
from xmldoc2md.render_index_page import render_index_page
from xmldoc2md.render_options import ConfigurationError, RenderOptions
from xmldoc2md.write_type_pages import write_type_pages

logger = logging.getLogger(__name__)

INDEX_FILE = "index.md"


def build_options(args: argparse.Namespace, config: dict[str, Any]) -> RenderOptions:
    """Merge command line flags over the configuration and validate the result."""
    try:
        options = RenderOptions.from_config(config)
    except ConfigurationError as e:
        raise SystemExit(f"Invalid configuration: {e}") from e

    overrides: dict[str, Any] = {}
    if args.include_private:
        overrides["include_private_members"] = True
    if args.exclude_internals:
        overrides["exclude_internals"] = True
    if args.only_internal:
        overrides["only_internal_members"] = True
    if args.back_button:
        overrides["has_back_button"] = True
    if args.back_button_label is not None:
        overrides["back_button_label"] = args.back_button_label
    if args.back_button_target is not None:
        overrides["back_button_target"] = args.back_button_target
    if args.examples is not None:
        overrides["examples_directory"] = args.examples
    if args.platform is not None:
        overrides["link_style"] = options.link_style.combined(
            LinkStyle.for_platform(args.platform)
        )

    options = dataclasses.replace(options, **overrides)
    try:
        return options.validate()
    except ConfigurationError as e:
        raise SystemExit(f"Invalid configuration: {e}") from e


def load_universe(
    metadata_path: Path, search_directories: list[Path | str]
) -> MetadataUniverse:
    """Load the documented module and whichever of its references can be found."""
    metadata = load_metadata(metadata_path)
    resolver = ModuleResolver(search_directories)
    resolver.add_search_directory(metadata_path.parent)
    referenced = [
        t for module in resolver.resolve_all(metadata.references) for t in module.types
    ]
    return MetadataUniverse(metadata.module, metadata.types, referenced)


def run_conversion(args: argparse.Namespace) -> int:
    """Execute the conversion pipeline."""
    for path in (args.metadata, args.docs):
        if not path.is_file():
            msg = f"Input file not found: {path}"
            raise SystemExit(msg)

    config = load_config(args.config)
    options = build_options(args, config)
    search_directories = [*config.get("search_directories", []), *args.search_dir]

    try:
        universe = load_universe(args.metadata, search_directories)
        docs = DocumentationIndex.load(args.docs)
    except (OSError, yaml.YAMLError, ET.ParseError, MetadataError) as e:
        msg = f"Could not load inputs: {e}"
        raise SystemExit(msg) from e

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)

    examples = ExampleStore(options.examples_directory)
    written = write_type_pages(universe, docs, options, out_root, examples)

    if not args.no_index:
        md = render_markdown(render_index_page(universe, docs, options))
        (out_root / INDEX_FILE).write_text(md, encoding="utf-8")
        written += 1

    print(f"Generated {written} Markdown pages into: {out_root}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Convert XML documentation comments to Markdown pages.",
    )
    ap.add_argument(
        "metadata",
        type=Path,
        help="Module metadata YAML file describing the documented types",
    )
    ap.add_argument(
        "docs",
        type=Path,
        help="XML documentation file produced by the compiler",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Output directory for the generated Markdown pages",
    )
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument(
        "--examples",
        type=Path,
        help="Directory of <identifier>.md example files to append",
    )
    ap.add_argument(
        "--include-private",
        action="store_true",
        help="Document non-public members too",
    )
    ap.add_argument(
        "--exclude-internals",
        action="store_true",
        help="With --include-private, leave out internal members",
    )
    ap.add_argument(
        "--only-internal",
        action="store_true",
        help="With --include-private, document internal members only",
    )
    ap.add_argument(
        "--back-button",
        action="store_true",
        help="Add a link back to the index at the top and bottom of each page",
    )
    ap.add_argument("--back-button-label", help="Text of the back link")
    ap.add_argument("--back-button-target", help="Target of the back link")
    platform = ap.add_mutually_exclusive_group()
    platform.add_argument(
        "--github-pages",
        dest="platform",
        action="store_const",
        const="github-pages",
        help="Write links without the .md extension",
    )
    platform.add_argument(
        "--gitlab-wiki",
        dest="platform",
        action="store_const",
        const="gitlab-wiki",
        help="Write links without the .md extension and the ./ prefix",
    )
    ap.add_argument(
        "--search-dir",
        action="append",
        default=[],
        type=Path,
        help="Directory to search for referenced module metadata (repeatable)",
    )
    ap.add_argument(
        "--no-index",
        action="store_true",
        help="Do not write index.md",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output, including unresolved cross-references",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the conversion process."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_conversion(args)


if __name__ == "__main__":
    raise SystemExit(main())
