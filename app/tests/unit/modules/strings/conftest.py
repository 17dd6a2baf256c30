"""Feature-level fixtures for strings catalog tests.

Provides sample catalog text and catalog files in the encodings found in
real projects.
"""

import pytest

from modules.strings import ParserOptions, StringsFileParser
from tests.factories.strings import make_strings_text, write_strings_file


@pytest.fixture
def commented_catalog_text():
    """Catalog text mixing commented and uncommented records."""
    return make_strings_text(
        [
            ("alert__message", "Some alert body there", "Title of the alert"),
            ("alert__title", "Title of the alert", "Title for an alert"),
            ("apples.count", "You have %d apples", "A comment with no space above it"),
            ("bananas.owner", "Those %d bananas belong to %@.", None),
        ]
    )


@pytest.fixture
def commented_catalog(tmp_path, commented_catalog_text):
    """UTF-16 catalog file built from commented_catalog_text."""
    return write_strings_file(tmp_path, commented_catalog_text)


@pytest.fixture
def strings_parser():
    """Parser with the default "." separator."""
    return StringsFileParser(ParserOptions(separator="."))
