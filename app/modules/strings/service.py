"""Catalog service.

Facade over the strings file parser for callers working with many catalogs:
it discovers catalog files, parses them one by one, and imposes a
deterministic order on the result.
"""

from functools import lru_cache
from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from infrastructure.logging import get_module_logger
from infrastructure.services import get_settings
from modules.strings.models import Catalog
from modules.strings.options import ParserOptions
from modules.strings.parser import StringsFileParser

logger = get_module_logger()


class StringsCatalogService:
    """Load `.strings` catalogs from files and directories.

    Usage:
        service = StringsCatalogService()
        for catalog in service.load_all([Path("Resources/en.lproj")]):
            for entry in catalog.entries:
                print(entry.key, entry.comment)
    """

    def __init__(
        self,
        options: Optional[ParserOptions] = None,
        parser: Optional[StringsFileParser] = None,
        extensions: Optional[Sequence[str]] = None,
    ):
        """Initialize the catalog service.

        Args:
            options: Parser options; defaults to the configured settings.
            parser: Optional pre-configured parser, takes precedence over
                ``options``.
            extensions: File extensions picked up from directories; defaults
                to the extensions the parser supports.
        """
        self._parser = parser or StringsFileParser(
            options or ParserOptions.from_settings()
        )
        self.extensions = tuple(
            ext.lower() for ext in (extensions or self._parser.extensions)
        )

    @property
    def parser(self) -> StringsFileParser:
        """Access the underlying parser."""
        return self._parser

    def discover(self, paths: Iterable[Union[str, PathLike]]) -> List[Path]:
        """Expand paths into the catalog files they denote.

        Directories are searched recursively for files with a supported
        extension. Explicit file paths are kept whatever their extension,
        so that an unreadable or mistyped path still fails loudly when parsed.

        Returns:
            Sorted list of unique file paths.
        """
        found = set()
        for raw in paths:
            path = Path(raw)
            if path.is_dir():
                for candidate in path.rglob("*"):
                    if candidate.is_file() and candidate.suffix.lower() in self.extensions:
                        found.add(candidate)
            else:
                found.add(path)
        return sorted(found)

    def load_catalog(self, path: Union[str, PathLike]) -> Catalog:
        """Parse one catalog and order its entries by key.

        Raises:
            ParserError: If the catalog cannot be read or decoded.
        """
        path = Path(path)
        entries = self._parser.parse_file(path)
        return Catalog(path=path, entries=tuple(entries)).sorted()

    def load_all(self, paths: Iterable[Union[str, PathLike]]) -> List[Catalog]:
        """Discover and parse catalogs.

        Returns:
            Catalogs ordered by path, each with entries ordered by key.

        Raises:
            ParserError: For the first catalog that fails to parse.
        """
        files = self.discover(paths)
        catalogs = [self.load_catalog(path) for path in files]
        logger.info(
            "catalogs_loaded",
            catalog_count=len(catalogs),
            entry_count=sum(len(catalog.entries) for catalog in catalogs),
        )
        return catalogs


@lru_cache
def get_catalog_service() -> StringsCatalogService:
    """Get an application-scoped catalog service built from settings.

    Returns:
        StringsCatalogService configured from the strings feature settings.
    """
    strings_settings = get_settings().strings
    return StringsCatalogService(
        options=ParserOptions.from_settings(strings_settings),
        extensions=strings_settings.file_extensions,
    )
