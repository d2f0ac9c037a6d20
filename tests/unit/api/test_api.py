from collections.abc import Mapping

import pytest

import csv_kit
from csv_kit import Dialect, EncodingError, ParseConfig, parse, parse_line
from csv_kit.api import resolve_config


class TestResolveConfig:
    def test_none_gives_defaults(self) -> None:
        assert resolve_config(None) == ParseConfig()

    def test_config_passes_through(self) -> None:
        config = ParseConfig(col_sep=";")

        assert resolve_config(config) is config

    def test_dialect(self) -> None:
        assert resolve_config(Dialect(name="p", col_sep="|")) == ParseConfig(col_sep="|")

    def test_mapping(self) -> None:
        options: Mapping[str, str] = {"col_sep": ";"}

        assert resolve_config(options) == ParseConfig(col_sep=";")

    def test_unknown_option_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown parse options: quote_char"):
            resolve_config({"col_sep": ";", "quote_char": '"'})

    def test_invalid_separator_raises(self) -> None:
        with pytest.raises(ValueError, match="single character"):
            resolve_config({"col_sep": ""})


class TestParse:
    def test_default_comma(self) -> None:
        assert parse("foo,,baz").records == [["foo", None, "baz"]]

    def test_col_sep_option(self) -> None:
        assert parse("foo;bar", {"col_sep": ";"}).records == [["foo", "bar"]]

    def test_single_field_with_col_sep_option(self) -> None:
        assert parse("foo", {"col_sep": ";"}).records == [["foo"]]

    def test_multiline_with_col_sep_option(self) -> None:
        result = parse("foo;bar\nbaz;quz", {"col_sep": ";"})

        assert result.records == [["foo", "bar"], ["baz", "quz"]]

    def test_dialect_from_library(self) -> None:
        dialect = csv_kit.DialectLibrary().get("pipe")

        assert parse("a|b", dialect).records == [["a", "b"]]

    def test_bytes_with_bad_encoding(self) -> None:
        with pytest.raises(EncodingError):
            parse(b"\xc3\x28")


class TestParseLine:
    def test_first_record(self) -> None:
        assert parse_line("a;b\nc", {"col_sep": ";"}) == ["a", "b"]

    def test_empty(self) -> None:
        assert parse_line("") is None
