"""Strings file parser.

A catalog is read twice. The decode pass turns the bytes into the
authoritative key to translation mapping and any failure there aborts the
parse. The scan pass re-reads the text to recover comments; it is
best-effort and reports failures as an ``OperationResult`` that is absorbed
before the two results are merged by key.
"""

from os import PathLike
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from infrastructure.logging import bind_catalog_context, get_module_logger
from infrastructure.operations import OperationResult
from modules.strings.decoder import decode_catalog
from modules.strings.encoding import read_text
from modules.strings.errors import CatalogLoadError, InvalidEntryError
from modules.strings.models import Entry
from modules.strings.options import ParserOptions
from modules.strings.scanner import scan_comments

logger = get_module_logger()


def merge_entries(
    translations: Mapping[str, str],
    comments: Mapping[str, str],
    options: ParserOptions,
    path: Union[str, PathLike] = "<memory>",
) -> List[Entry]:
    """Build one entry per decoded key and attach the matching comments.

    Comments are matched on the exact key string. Keys that only appear in
    ``comments`` are dropped.

    Args:
        translations: Decoded key to translation mapping.
        comments: Key to comment mapping from the scan pass (may be empty).
        options: Parser options; the separator is handed to entry construction.
        path: Catalog path, used in error messages only.

    Returns:
        List of entries, in no guaranteed order.

    Raises:
        InvalidEntryError: If an entry cannot be constructed.
    """
    entries = []
    for key, translation in translations.items():
        try:
            entry = Entry.create(
                key=key,
                translation=translation,
                key_structure_separator=options.separator,
                comment=comments.get(key),
            )
        except ValueError as e:
            raise InvalidEntryError(path, key, str(e)) from e
        entries.append(entry)
    return entries


def scan_file_comments(path: Union[str, PathLike]) -> OperationResult:
    """Recover the comments of a catalog file.

    Args:
        path: Path of the catalog.

    Returns:
        OperationResult whose data is the key to comment mapping on success.
        Read and decoding failures are returned, never raised.
    """
    try:
        text = read_text(path)
    except OSError as e:
        return OperationResult.not_found(
            f"Could not re-read catalog text: {e}", error_code="TEXT_UNREADABLE"
        )
    except (UnicodeError, LookupError) as e:
        return OperationResult.permanent_error(
            f"Could not decode catalog text: {e}", error_code="TEXT_UNDECODABLE"
        )
    return OperationResult.success(data=scan_comments(text))


class StringsFileParser:
    """Parser for `.strings` catalog files.

    Attributes:
        options: Parser options (key-structure separator).
    """

    extensions = (".strings",)

    def __init__(self, options: Optional[ParserOptions] = None):
        self.options = options or ParserOptions()

    def parse_file(self, path: Union[str, PathLike]) -> List[Entry]:
        """Parse one catalog file into entries.

        Args:
            path: Path of the catalog.

        Returns:
            One entry per decoded key, in no guaranteed order.

        Raises:
            CatalogLoadError: If the file cannot be read.
            CatalogDecodeError: If the file is not a string-to-string
                property list or repeats a key.
            InvalidEntryError: If a key or translation is not a valid entry.
        """
        path = Path(path)
        with bind_catalog_context(path=path, table=path.stem):
            translations = self._decode(path)

            result = scan_file_comments(path)
            if not result.is_success:
                logger.debug(
                    "comment_scan_skipped",
                    status=result.status.value,
                    error_code=result.error_code,
                    reason=result.message,
                )
            comments: Dict[str, str] = result.unwrap_or({})

            entries = merge_entries(translations, comments, self.options, path)
            logger.debug(
                "catalog_parsed",
                entry_count=len(entries),
                comment_count=sum(1 for entry in entries if entry.comment),
            )
            return entries

    def _decode(self, path: Path) -> Dict[str, str]:
        try:
            data = path.read_bytes()
        except OSError as e:
            logger.warning("catalog_unreadable", error=str(e))
            raise CatalogLoadError(path, e.strerror or str(e)) from e
        return decode_catalog(data, path)
