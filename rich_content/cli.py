"""Command-line interface for extracting rich content from HTML files.

WHY: Developers need a quick way to see what the engine makes of a real
page: which nodes survive conversion, what the re-rendered markup looks
like, and what plain text comes out. The CLI wires together parsing,
selector extraction, optional coalescing and the pluggable formatters
behind a single command.

HOW: Uses argparse to accept an input HTML file, a CSS selector, output
format selection and an output directory. The file is parsed into an
lxml DOM, the selector extractor pulls out the matched element's
children, and each selected formatter's output is saved next to the
source (or to --output-dir). Status messages go to stderr.

RULES:
- Positional argument: input HTML file path
- --selector defaults to config.DEFAULT_SELECTOR; "" means the document root
- --formats: comma-separated formatter keys (default: config.DEFAULT_FORMATS)
- --coalesce (default on) pipes the extracted content through concat
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-content-2.html)
- Errors print "Error: ..." to stderr and exit with status 1
"""

from __future__ import annotations

import argparse
import itertools
import logging
import sys
from pathlib import Path
from typing import List, Optional

from lxml import etree

from rich_content.config import (
    DEFAULT_FORMATS,
    DEFAULT_SELECTOR,
    LOG_FORMAT,
    resolve_log_level,
)
from rich_content.core.children import concat, make_selector_extractor
from rich_content.dom.lxml_dom import parse_document
from rich_content.formatters import FORMATTERS

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Running the CLI twice on the same page must not overwrite the
    first run's output.

    HOW: Check if {stem}{suffix} exists. If so, increment a counter
    and insert it before the file extension until a free name is found.

    RULES:
    - First attempt: {stem}{suffix} (e.g. article-content.html)
    - Conflict: article-content-2.html, article-content-3.html, ...

    Returns:
        A Path that does not yet exist.
    """
    name, dot, ext = suffix.rpartition(".")
    if not name:
        name, dot, ext = suffix, "", ""

    candidates = itertools.chain(
        ["{}{}".format(stem, suffix)],
        ("{}{}-{}{}{}".format(stem, name, n, dot, ext) for n in itertools.count(2)),
    )
    return next(output_dir / c for c in candidates if not (output_dir / c).exists())


def _parse_formats(raw: Optional[str]) -> List[str]:
    if raw:
        keys = [f.strip() for f in raw.split(",") if f.strip()]
    else:
        keys = list(DEFAULT_FORMATS)

    unknown = [k for k in keys if k not in FORMATTERS]
    if unknown:
        _fail("Unknown format(s): {}. Available: {}".format(
            ", ".join(unknown), ", ".join(sorted(FORMATTERS.keys()))
        ))
    return keys


def run(args: argparse.Namespace) -> List[Path]:
    """Execute extraction and formatting for parsed arguments.

    Returns:
        The paths of all files written, in formatter order.
    """
    input_path = Path(args.input_file).resolve()
    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    format_keys = _parse_formats(args.formats)

    _status("Reading {}".format(input_path.name))
    try:
        root = parse_document(input_path.read_bytes())
    except (etree.ParserError, etree.XMLSyntaxError, ValueError) as exc:
        _fail("Could not parse {}: {}".format(input_path.name, exc))

    selector = args.selector
    sequence = make_selector_extractor(selector)(root)
    if selector and not sequence:
        _status("  Selector {!r} matched no content".format(selector))
    logger.info("Extracted %d item(s) with selector %r", len(sequence), selector)

    if args.coalesce:
        sequence = concat(sequence)

    saved: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        for output in formatter.format(sequence):
            path = _resolve_output_path(input_path.stem, output.suffix, output_dir)
            if isinstance(output.content, bytes):
                path.write_bytes(output.content)
            else:
                path.write_text(output.content, encoding="utf-8")
            _status("  {}: {}".format(formatter.name, path))
            saved.append(path)

    _status("Done.")
    return saved


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rich_content",
        description="Extract rich content from an HTML file and write it "
                    "as markup, plain text or a JSON tree.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the HTML file to read.",
    )

    parser.add_argument(
        "--selector",
        default=DEFAULT_SELECTOR,
        help="CSS selector of the element whose children are extracted "
             "(default: %(default)s). Pass an empty string for the document root.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: {}.".format(
                 ", ".join(sorted(FORMATTERS.keys())), ",".join(DEFAULT_FORMATS)
             ),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--coalesce",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Merge adjacent text runs before writing (default: %(default)s).",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level, e.g. DEBUG (default: RICH_CONTENT_LOG_LEVEL or WARNING).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=resolve_log_level(args.log_level), format=LOG_FORMAT)
    run(args)


if __name__ == "__main__":
    main()
