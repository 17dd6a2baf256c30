"""Byte-to-text decoding for catalog files.

`.strings` files are usually UTF-16 with a byte-order mark, but UTF-8 files
(with or without a BOM) are common too. The decode pass needs a strict,
deterministic decoding; the comment scan pass only needs some decoding that
yields text and may fall back to detection.
"""

import codecs
from os import PathLike
from pathlib import Path
from typing import Optional, Union

import chardet

# UTF-32 LE must be checked before UTF-16 LE: its BOM starts with the same bytes.
_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def sniff_bom(data: bytes) -> Optional[str]:
    """Return the codec named by the byte-order mark of ``data``, if any."""
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding
    return None


def decode_strict(data: bytes) -> str:
    """Decode catalog bytes for the structured decode pass.

    The byte-order mark selects the codec; without one the bytes must be
    valid UTF-8.

    Raises:
        UnicodeDecodeError: If the bytes are not valid in the selected codec.
    """
    return data.decode(sniff_bom(data) or "utf-8")


def decode_best_effort(data: bytes) -> str:
    """Decode catalog bytes for the comment scan pass.

    Tries the byte-order mark, then UTF-8, then whatever chardet detects.

    Raises:
        UnicodeDecodeError: If no candidate decoding succeeds.
        LookupError: If chardet names a codec Python does not know.
    """
    encoding = sniff_bom(data)
    if encoding is not None:
        return data.decode(encoding)

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        detected = chardet.detect(data)["encoding"]
        if not detected:
            raise
        return data.decode(detected)


def read_text(path: Union[str, PathLike]) -> str:
    """Read a catalog file as text for the comment scan pass.

    Raises:
        OSError: If the file cannot be read.
        UnicodeError: If the bytes cannot be decoded.
        LookupError: If the detected codec is unknown.
    """
    return decode_best_effort(Path(path).read_bytes())
