"""Command line driver.

Usage:
    pl0dash PATH [--format xml|json|tokens] [--stdout] [--suffix SUFFIX]
                 [--max-depth N] [-v]

PATH is a single source file or a directory; in directory mode every
``*.pl0`` file directly inside it is processed in sorted order. Each file
is independent: a failure is reported and the batch continues.

Exit status is 0 when every file succeeded, 1 when any failed, 2 when PATH
does not exist.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pl0dash import __version__, compile_file
from pl0dash.config import ParseConfig, parse_config_context
from pl0dash.errors import Pl0DashError
from pl0dash.utils.logger import get_logger

logger = get_logger(__name__)

SOURCE_SUFFIX = ".pl0"

# Output file suffix per format; the token stream gets a "T" marker so it
# can sit next to the tree output.
DEFAULT_SUFFIXES = {
    "xml": ".xml",
    "json": ".json",
    "tokens": "T.xml",
}


def collect_sources(path: Path) -> list[Path]:
    """Return the source files to process for ``path``."""
    if path.is_dir():
        return sorted(p for p in path.glob(f"*{SOURCE_SUFFIX}") if p.is_file())
    return [path]


def output_path(source: Path, suffix: str) -> Path:
    """``gcd.pl0`` with suffix ``T.xml`` becomes ``gcdT.xml``."""
    return source.with_name(source.stem + suffix)


def process_file(source: Path, fmt: str, *, to_stdout: bool, suffix: str) -> bool:
    """Compile one file and write its output. Returns True on success."""
    try:
        text = compile_file(source, fmt=fmt)
    except Pl0DashError as exc:
        logger.error("%s", exc)
        return False
    except OSError as exc:
        logger.error("%s: cannot read source: %s", source, exc.strerror or exc)
        return False

    if to_stdout:
        sys.stdout.write(text)
        return True

    target = output_path(source, suffix)
    try:
        target.write_text(text, encoding="utf-8")
    except OSError as exc:
        logger.error("%s: cannot write output: %s", target, exc.strerror or exc)
        return False
    logger.info("wrote %s", target)
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pl0dash",
        description="Lex and parse PL/0-dash programs into a tagged syntax tree.",
    )
    parser.add_argument("path", type=Path, help="source file or directory of .pl0 files")
    parser.add_argument(
        "--format",
        "-f",
        choices=sorted(DEFAULT_SUFFIXES),
        default="xml",
        help="output format (default: xml)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="print output instead of writing files next to the sources",
    )
    parser.add_argument(
        "--suffix",
        help="output file suffix (default depends on --format)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=ParseConfig().max_depth,
        help="maximum grammar nesting depth (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="more logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    if not args.path.exists():
        logger.error("%s: no such file or directory", args.path)
        return 2

    try:
        config = ParseConfig(max_depth=args.max_depth)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    sources = collect_sources(args.path)
    if not sources:
        logger.warning("%s: no %s files found", args.path, SOURCE_SUFFIX)

    suffix = args.suffix or DEFAULT_SUFFIXES[args.format]
    failures = 0
    with parse_config_context(config):
        for source in sources:
            if not process_file(source, args.format, to_stdout=args.stdout, suffix=suffix):
                failures += 1

    if failures:
        logger.warning("%d of %d file(s) failed", failures, len(sources))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
