"""Tests for modules.strings.parser module."""

import pytest

from infrastructure.operations import OperationStatus
from modules.strings import (
    CatalogDecodeError,
    CatalogLoadError,
    InvalidEntryError,
    ParserError,
    ParserOptions,
    StringsFileParser,
    merge_entries,
    scan_file_comments,
)
from modules.strings.placeholders import PlaceholderType
from tests.factories.strings import make_strings_text, write_strings_file


def _by_key(entries):
    return {entry.key: entry for entry in entries}


@pytest.mark.unit
class TestMergeEntries:
    """Tests for merge_entries."""

    def test_one_entry_per_decoded_key(self):
        entries = merge_entries({"a": "x", "b": "y"}, {}, ParserOptions())
        assert {entry.key for entry in entries} == {"a", "b"}
        assert all(entry.comment is None for entry in entries)

    def test_comment_attached_on_exact_match(self):
        entries = _by_key(
            merge_entries({"a": "x", "b": "y"}, {"b": "About b"}, ParserOptions())
        )
        assert entries["a"].comment is None
        assert entries["b"].comment == "About b"

    def test_scanner_only_keys_are_dropped(self):
        entries = merge_entries({"a": "x"}, {"a": "c", "ghost": "g"}, ParserOptions())
        assert [entry.key for entry in entries] == ["a"]

    def test_no_key_normalization(self):
        entries = _by_key(merge_entries({"Key": "x"}, {"key": "c"}, ParserOptions()))
        assert entries["Key"].comment is None

    def test_separator_is_threaded_to_entries(self):
        entries = _by_key(
            merge_entries({"alert__title": "x"}, {}, ParserOptions(separator="__"))
        )
        assert entries["alert__title"].key_structure == ("alert", "title")

    def test_invalid_entry_names_path_and_key(self):
        with pytest.raises(InvalidEntryError) as exc_info:
            merge_entries({"a": "%1$d %1$@"}, {}, ParserOptions(), "L.strings")
        assert exc_info.value.key == "a"
        assert "L.strings" in str(exc_info.value)


@pytest.mark.unit
class TestScanFileComments:
    """Tests for scan_file_comments."""

    def test_success(self, tmp_path):
        path = write_strings_file(tmp_path, '/* c */\n"a" = "x";\n')
        result = scan_file_comments(path)
        assert result.is_success
        assert result.data == {"a": "c"}

    def test_missing_file_is_not_raised(self, tmp_path):
        result = scan_file_comments(tmp_path / "missing.strings")
        assert result.status == OperationStatus.NOT_FOUND
        assert result.unwrap_or({}) == {}

    def test_undecodable_text_is_not_raised(self, tmp_path, monkeypatch):
        def _fail(path):
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

        monkeypatch.setattr("modules.strings.parser.read_text", _fail)
        result = scan_file_comments(tmp_path / "Localizable.strings")
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "TEXT_UNDECODABLE"


@pytest.mark.unit
class TestStringsFileParser:
    """Tests for StringsFileParser."""

    def test_default_options(self):
        assert StringsFileParser().options == ParserOptions(separator=".")

    def test_extensions(self):
        assert StringsFileParser.extensions == (".strings",)

    def test_greeting(self, tmp_path, strings_parser):
        path = write_strings_file(tmp_path, '/* A greeting */\n"greeting" = "hi";')
        entries = strings_parser.parse_file(path)

        assert len(entries) == 1
        entry = entries[0]
        assert entry.key == "greeting"
        assert entry.translation == "hi"
        assert entry.comment == "A greeting"

    def test_only_commented_key_gets_comment(self, tmp_path, strings_parser):
        text = make_strings_text([("a", "x", None), ("b", "y", "About b")])
        entries = _by_key(strings_parser.parse_file(write_strings_file(tmp_path, text)))

        assert set(entries) == {"a", "b"}
        assert entries["a"].comment is None
        assert entries["b"].comment == "About b"

    def test_commented_catalog(self, commented_catalog, strings_parser):
        entries = _by_key(strings_parser.parse_file(commented_catalog))

        assert set(entries) == {
            "alert__message",
            "alert__title",
            "apples.count",
            "bananas.owner",
        }
        assert entries["alert__title"].comment == "Title for an alert"
        assert entries["apples.count"].comment == "A comment with no space above it"
        assert entries["apples.count"].key_structure == ("apples", "count")
        assert entries["apples.count"].placeholders == (PlaceholderType.INT,)
        assert entries["bananas.owner"].comment is None
        assert entries["bananas.owner"].placeholders == (
            PlaceholderType.INT,
            PlaceholderType.OBJECT,
        )

    def test_escaped_key_matches_decoded_key(self, tmp_path, strings_parser):
        text = '/* Quoted */\n"say \\"hi\\"" = "x";\n/* Tabbed */\n"a\\tb" = "y";\n'
        entries = _by_key(strings_parser.parse_file(write_strings_file(tmp_path, text)))

        assert entries['say "hi"'].comment == "Quoted"
        assert entries["a\tb"].comment == "Tabbed"

    def test_multiline_comment_is_trimmed(self, tmp_path, strings_parser):
        text = '/*\n  A multiline\n  comment\n*/\n"a" = "x";\n'
        entries = strings_parser.parse_file(write_strings_file(tmp_path, text))
        assert entries[0].comment == "A multiline\n  comment"

    def test_unterminated_comment(self, tmp_path, strings_parser):
        text = '"a" = "x";\n/* unterminated\n'
        entries = strings_parser.parse_file(write_strings_file(tmp_path, text))

        assert [entry.key for entry in entries] == ["a"]
        assert entries[0].comment is None

    def test_utf8_file(self, tmp_path, strings_parser):
        text = '/* Grüße */\n"greeting" = "Grüß dich";\n'
        path = write_strings_file(tmp_path, text, encoding="utf-8")
        entries = strings_parser.parse_file(path)
        assert entries[0].comment == "Grüße"

    def test_binary_plist_has_no_comments(self, tmp_path, strings_parser):
        import plistlib

        path = tmp_path / "Localizable.strings"
        path.write_bytes(plistlib.dumps({"a": "x"}, fmt=plistlib.FMT_BINARY))
        entries = strings_parser.parse_file(path)

        assert [(entry.key, entry.translation, entry.comment) for entry in entries] == [
            ("a", "x", None)
        ]

    def test_empty_file(self, tmp_path, strings_parser):
        assert strings_parser.parse_file(write_strings_file(tmp_path, "")) == []

    def test_scan_failure_degrades_to_no_comments(
        self, commented_catalog, strings_parser, monkeypatch
    ):
        def _fail(path):
            raise OSError("gone")

        monkeypatch.setattr("modules.strings.parser.read_text", _fail)
        entries = strings_parser.parse_file(commented_catalog)

        assert len(entries) == 4
        assert all(entry.comment is None for entry in entries)

    def test_parsing_twice_gives_equal_entries(self, commented_catalog, strings_parser):
        first = strings_parser.parse_file(commented_catalog)
        second = strings_parser.parse_file(commented_catalog)
        assert set(first) == set(second)

    def test_missing_file(self, tmp_path, strings_parser):
        path = tmp_path / "missing.strings"
        with pytest.raises(CatalogLoadError) as exc_info:
            strings_parser.parse_file(path)
        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)

    def test_directory_is_unreadable(self, tmp_path, strings_parser):
        with pytest.raises(CatalogLoadError):
            strings_parser.parse_file(tmp_path)

    def test_decode_failure_skips_scan(self, tmp_path, strings_parser, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "modules.strings.parser.scan_file_comments",
            lambda path: calls.append(path),
        )
        path = write_strings_file(tmp_path, '"a" = "x";\n"a" = "y";\n')

        with pytest.raises(CatalogDecodeError):
            strings_parser.parse_file(path)
        assert calls == []

    def test_empty_key_is_fatal(self, tmp_path, strings_parser):
        path = write_strings_file(tmp_path, '"a" = "x";\n"" = "y";\n')
        with pytest.raises(InvalidEntryError):
            strings_parser.parse_file(path)

    def test_all_fatal_errors_are_parser_errors(self, tmp_path, strings_parser):
        path = write_strings_file(tmp_path, '("not", "a", "dictionary")')
        with pytest.raises(ParserError):
            strings_parser.parse_file(path)
