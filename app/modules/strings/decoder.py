"""Structured decoding of catalog bytes.

The decoder is the authoritative source of keys and translations. Text
property lists (including the brace-less "strings resource" shortcut) are
handled by openstep_plist; XML and binary property lists, which is what a
compiled `.strings` file becomes, are handled by plistlib.
"""

import codecs
import plistlib
from os import PathLike
from typing import Any, Dict, Union
from xml.parsers.expat import ExpatError

import openstep_plist

from modules.strings.encoding import decode_strict
from modules.strings.errors import CatalogDecodeError

_BINARY_PLIST_HEADER = b"bplist00"
_XML_PLIST_HEADERS = (b"<?xml", b"<!DOCTYPE plist", b"<plist")


class DuplicateKeyError(ValueError):
    """A key occurs twice in the same property-list dictionary."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"duplicate key {key!r}")


class _UniqueKeyDict(dict):
    """Dictionary refusing to overwrite a key, used while parsing."""

    def __setitem__(self, key, value):
        if key in self:
            raise DuplicateKeyError(key)
        super().__setitem__(key, value)


def _is_serialized_plist(data: bytes) -> bool:
    if data.startswith(_BINARY_PLIST_HEADER):
        return True
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]
    head = data.lstrip()[:64]
    return head.startswith(_XML_PLIST_HEADERS)


def _load_serialized(data: bytes, path: Union[str, PathLike]) -> Any:
    try:
        return plistlib.loads(data, dict_type=_UniqueKeyDict)
    except DuplicateKeyError as e:
        raise CatalogDecodeError(path, str(e)) from e
    # plistlib lets some malformed element content escape as AttributeError
    # or TypeError (e.g. an unparsable <date>).
    except (
        plistlib.InvalidFileException,
        ExpatError,
        ValueError,
        AttributeError,
        TypeError,
    ) as e:
        raise CatalogDecodeError(path, f"invalid property list: {e}") from e


def _load_text(data: bytes, path: Union[str, PathLike]) -> Any:
    try:
        text = decode_strict(data)
    except UnicodeDecodeError as e:
        raise CatalogDecodeError(path, f"malformed encoding: {e}") from e

    try:
        return openstep_plist.loads(text, dict_type=_UniqueKeyDict)
    except DuplicateKeyError as e:
        raise CatalogDecodeError(path, str(e)) from e
    except openstep_plist.ParseError as e:
        raise CatalogDecodeError(path, f"invalid property list: {e}") from e


def decode_catalog(data: bytes, path: Union[str, PathLike]) -> Dict[str, str]:
    """Decode catalog bytes into a key to translation mapping.

    Args:
        data: Raw file content.
        path: Path of the catalog, used in error messages only.

    Returns:
        Mapping of translation keys to translations.

    Raises:
        CatalogDecodeError: If the bytes are not a property list whose top
            level is a string-to-string dictionary, or a key is duplicated.
    """
    if _is_serialized_plist(data):
        document = _load_serialized(data, path)
    else:
        document = _load_text(data, path)

    if not isinstance(document, dict):
        raise CatalogDecodeError(
            path, f"expected a dictionary, got {type(document).__name__}"
        )

    translations: Dict[str, str] = {}
    for key, value in document.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise CatalogDecodeError(
                path,
                f"expected string values, got {type(value).__name__} for key {key!r}",
            )
        translations[key] = value
    return translations
