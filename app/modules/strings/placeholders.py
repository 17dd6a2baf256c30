"""Placeholder parsing for translations.

Translations use printf-style format specifiers (``%d``, ``%@``, ``%1$s``...).
The types of those placeholders, in argument order, describe the parameters
a generated accessor for the entry takes.
"""

import re
from enum import Enum

from modules.strings.errors import InvalidPlaceholderError

# The space flag is deliberately not accepted: "50% off" is text, not "% o".
_PLACEHOLDER_RE = re.compile(
    r"%(?:%|"
    r"(?:(?P<position>[1-9]\d*)\$)?"
    r"[-+#0']*\d*(?:\.\d*)?"
    r"(?:hh|h|ll|l|q|z|t|j|L)?"
    r"(?P<conversion>[@aAcCdDeEfFgGioOpsSuUxX]))"
)


class PlaceholderType(str, Enum):
    """Type of the argument consumed by a format placeholder."""

    OBJECT = "object"
    INT = "int"
    FLOAT = "float"
    CHAR = "char"
    C_STRING = "cstring"
    POINTER = "pointer"

    @classmethod
    def from_conversion(cls, conversion: str) -> "PlaceholderType":
        """Map a printf conversion character to its placeholder type.

        Raises:
            ValueError: If the conversion character is not supported.
        """
        try:
            return _CONVERSIONS[conversion]
        except KeyError as e:
            raise ValueError(f"Unsupported conversion: %{conversion}") from e


_CONVERSIONS = {
    "@": PlaceholderType.OBJECT,
    **{c: PlaceholderType.INT for c in "dDioOuUxX"},
    **{c: PlaceholderType.FLOAT for c in "aAeEfFgG"},
    **{c: PlaceholderType.CHAR for c in "cC"},
    **{c: PlaceholderType.C_STRING for c in "sS"},
    "p": PlaceholderType.POINTER,
}


def parse_placeholders(text: str) -> tuple[PlaceholderType, ...]:
    """Return the placeholder types of ``text`` in argument order.

    ``%%`` is a literal percent sign. Positional placeholders (``%2$@``) are
    placed at their position; the others take positions 1, 2, 3... in the
    order they appear. Unused positions are collapsed.

    Args:
        text: Translation to inspect.

    Returns:
        Tuple of PlaceholderType, one per argument.

    Raises:
        InvalidPlaceholderError: If one position is used with two types.
    """
    slots: dict[int, PlaceholderType] = {}
    next_position = 1

    for match in _PLACEHOLDER_RE.finditer(text):
        conversion = match.group("conversion")
        if conversion is None:
            continue

        placeholder = PlaceholderType.from_conversion(conversion)
        if match.group("position"):
            position = int(match.group("position"))
        else:
            position = next_position
            next_position += 1

        existing = slots.get(position)
        if existing is not None and existing != placeholder:
            raise InvalidPlaceholderError(position, existing.value, placeholder.value)
        slots[position] = placeholder

    return tuple(slots[position] for position in sorted(slots))
