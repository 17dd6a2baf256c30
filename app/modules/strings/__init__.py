"""Strings catalogs - entries and comments from `.strings` files.

A catalog is decoded as a property list (authoritative keys and translations)
and re-scanned as text to recover the ``/* ... */`` comment that precedes each
key. The two results are merged by exact key.

Main components:
- models: Entry, Catalog
- parser: StringsFileParser, merge_entries, scan_file_comments
- decoder: decode_catalog
- scanner: CommentScanner, scan_comments
- service: StringsCatalogService for many catalogs
- errors: ParserError and its subclasses
"""

from modules.strings.decoder import decode_catalog
from modules.strings.errors import (
    CatalogDecodeError,
    CatalogLoadError,
    InvalidEntryError,
    InvalidPlaceholderError,
    ParserError,
)
from modules.strings.models import Catalog, Entry
from modules.strings.options import ParserOptions
from modules.strings.parser import StringsFileParser, merge_entries, scan_file_comments
from modules.strings.placeholders import PlaceholderType, parse_placeholders
from modules.strings.scanner import CommentScanner, scan_comments
from modules.strings.service import StringsCatalogService, get_catalog_service

__all__ = [
    "Catalog",
    "CatalogDecodeError",
    "CatalogLoadError",
    "CommentScanner",
    "Entry",
    "InvalidEntryError",
    "InvalidPlaceholderError",
    "ParserError",
    "ParserOptions",
    "PlaceholderType",
    "StringsCatalogService",
    "StringsFileParser",
    "decode_catalog",
    "get_catalog_service",
    "merge_entries",
    "parse_placeholders",
    "scan_comments",
    "scan_file_comments",
]
