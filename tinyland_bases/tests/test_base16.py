"""Tests for the base16 (hex) codec."""

import random

import pytest

from tinyland_bases.base16 import (
    BASE16_ALPHABET,
    b16decode,
    b16decode_str,
    b16encode,
    b16encode_str,
)
from tinyland_bases.errors import MalformedLengthError

QUICK_FOX = "The quick brown fox jumps over the lazy dog"
QUICK_FOX_HEX = (
    "54686520717569636B2062726F776E20666F78206A756D7073206"
    "F76657220746865206C617A7920646F67"
)


class TestBase16KnownValues:
    """RFC 4648 section 10 vectors plus a few extras."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (b"", ""),
            (b"f", "66"),
            (b"fo", "666F"),
            (b"foo", "666F6F"),
            (b"foob", "666F6F62"),
            (b"fooba", "666F6F6261"),
            (b"foobar", "666F6F626172"),
            (b"\xff", "FF"),
            (b"\xff\x80", "FF80"),
            (QUICK_FOX.encode(), QUICK_FOX_HEX),
        ],
    )
    def test_encode_decode(self, raw, expected):
        assert b16encode(raw) == expected
        assert b16decode(expected) == raw

    def test_decode_lowercase(self):
        assert b16decode("666f6f626172") == b"foobar"
        assert b16decode(QUICK_FOX_HEX.lower()) == QUICK_FOX.encode()

    def test_decode_mixed_case(self):
        assert b16decode("fF80aB") == b"\xff\x80\xab"

    def test_str_helpers(self):
        assert b16encode_str("foo") == "666F6F"
        assert b16decode_str("666F6F") == "foo"


class TestBase16Decoration:
    """Characters outside the alphabet are skipped."""

    @pytest.mark.parametrize(
        "encoded, expected",
        [
            ("6 66.f", b"fo"),
            ("66 6 .f6f", b"foo"),
            ("666;f6 f' 62", b"foob"),
            ("666f 6 f6.2'61", b"fooba"),
            ("6. 66f#6f&62;61!72", b"foobar"),
            ("de:ad:be:ef", b"\xde\xad\xbe\xef"),
            ("ＦＦ", b""),
        ],
    )
    def test_decorated_input(self, encoded, expected):
        assert b16decode(encoded) == expected

    def test_random_whitespace_insertion(self):
        rng = random.Random(16)
        data = rng.randbytes(500)
        encoded = list(b16encode(data))
        for _ in range(60):
            encoded.insert(rng.randrange(len(encoded) + 1), rng.choice(" \t\r\n"))
        assert b16decode("".join(encoded)) == data


class TestBase16Errors:
    """A dangling nibble fails the whole decode."""

    @pytest.mark.parametrize("encoded", ["FF80F", "F", "6 6 6"])
    def test_odd_digit_count_lenient(self, encoded):
        assert b16decode(encoded) == b""

    def test_odd_digit_count_strict(self):
        with pytest.raises(MalformedLengthError, match="odd number"):
            b16decode("FF80F", strict=True)

    def test_strict_accepts_valid_input(self):
        assert b16decode("FF 80", strict=True) == b"\xff\x80"

    def test_type_errors(self):
        with pytest.raises(TypeError):
            b16encode("text")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            b16decode(b"FF")  # type: ignore[arg-type]


class TestBase16RoundTrip:
    def test_every_octet(self):
        data = bytes(range(256))
        assert b16decode(b16encode(data)) == data

    def test_long_random_payload(self):
        data = random.Random(1616).randbytes(50_000)
        encoded = b16encode(data)
        assert len(encoded) == 100_000
        assert b16decode(encoded) == data

    def test_alphabet(self):
        assert len(BASE16_ALPHABET) == 16
        assert BASE16_ALPHABET == BASE16_ALPHABET.upper()
