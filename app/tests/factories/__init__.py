"""Test data factories for deterministic test data generation."""

from tests.factories.strings import (
    make_entry,
    make_record,
    make_strings_text,
    write_strings_file,
)

__all__ = [
    "make_entry",
    "make_record",
    "make_strings_text",
    "write_strings_file",
]
