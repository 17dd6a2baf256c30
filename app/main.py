"""Command line entry point: print `.strings` catalogs as JSON."""

import argparse
import json
import sys
from typing import Optional, Sequence

from infrastructure.logging import get_module_logger
from infrastructure.services import get_settings
from modules.strings import ParserError, ParserOptions, StringsCatalogService

logger = get_module_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strings-catalog",
        description="Extract keys, translations and comments from .strings catalogs.",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Catalog files, or directories searched recursively for catalogs.",
    )
    parser.add_argument(
        "--separator",
        default=None,
        help="Key-structure separator (default: STRINGS_KEY_SEPARATOR or '.').",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation; 0 prints one line.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool.

    Returns:
        0 on success, 1 if a catalog failed to parse, 2 if no catalog was found.
    """
    args = build_parser().parse_args(argv)

    strings_settings = get_settings().strings
    options = ParserOptions.from_settings(strings_settings)
    if args.separator is not None:
        options = ParserOptions(separator=args.separator)

    service = StringsCatalogService(
        options=options, extensions=strings_settings.file_extensions
    )

    files = service.discover(args.paths)
    if not files:
        print("No catalog files found.", file=sys.stderr)
        return 2

    try:
        catalogs = [service.load_catalog(path) for path in files]
    except ParserError as e:
        logger.error("catalog_parse_failed", path=str(e.path), reason=e.reason)
        print(f"error: {e}", file=sys.stderr)
        return 1

    json.dump(
        [catalog.to_dict() for catalog in catalogs],
        sys.stdout,
        ensure_ascii=False,
        indent=args.indent or None,
    )
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
