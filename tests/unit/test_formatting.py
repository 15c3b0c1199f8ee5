"""Tests for digest formatting helpers."""

import pytest

from chunkhash.utils.formatting import format_digest, parse_seed


class TestFormatDigest:
    @pytest.mark.parametrize(
        "value,fmt,expected",
        [
            (0, "hex", "0000000000000000"),
            (255, "hex", "00000000000000ff"),
            ((1 << 64) - 1, "hex", "ffffffffffffffff"),
            (0, "int", "0"),
            ((1 << 64) - 1, "int", "18446744073709551615"),
        ],
    )
    def test_formats(self, value, fmt, expected):
        assert format_digest(value, fmt) == expected

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            format_digest(1, "base64")


class TestParseSeed:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("0", 0),
            ("42", 42),
            ("0x2a", 42),
            ("0X2A", 42),
            ("-1", -1),
            ("-0x10", -16),
            (" 7 ", 7),
        ],
    )
    def test_parses(self, text, expected):
        assert parse_seed(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "0xzz", "1.5"])
    def test_rejects_garbage(self, text):
        with pytest.raises(ValueError):
            parse_seed(text)
