"""Base58 codec (Bitcoin alphabet).

Base58 is positional base conversion, not bit regrouping: the input is read
as one big-endian integer and re-expressed in base 58. Leading zero octets
carry no positional value, so each is written as a leading ``1`` (the zero
digit) and restored on decode.

The conversion is quadratic: every output digit costs a pass over the
remaining integer, O(len(input) * len(output)) overall. Python integers
serve as the growable digit accumulator; digits are peeled off ten at a time
to keep the number of big-integer divisions down.

Decoding skips ASCII whitespace anywhere in the input, including between
leading ``1`` characters. Any other character outside the alphabet,
including the look-alikes ``0``, ``O``, ``I`` and ``l``, fails the decode.
"""

import logging

from tinyland_bases.errors import CarryResidueError, InvalidCharacterError
from tinyland_bases.tables import (
    INVALID,
    BytesLike,
    decode_or_empty,
    require_bytes,
    reverse_table,
    symbol_value,
)

log = logging.getLogger(__name__)

BITCOIN_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_B58_TABLE = reverse_table(BITCOIN_ALPHABET)

_WHITESPACE = frozenset(" \t\n\v\f\r")

_CHUNK_DIGITS = 10
_CHUNK = 58**_CHUNK_DIGITS


def _encoded_capacity(length: int) -> int:
    # log(256) / log(58) is just under 1.37 digits per octet
    return length * 137 // 100 + 1


def _b58encode(data: bytes) -> str:
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))

    num = int.from_bytes(data[leading_zeros:], byteorder="big")
    digits = []  # least significant first
    while num:
        num, chunk = divmod(num, _CHUNK)
        for _ in range(_CHUNK_DIGITS):
            chunk, rem = divmod(chunk, 58)
            digits.append(rem)
    while digits and digits[-1] == 0:
        digits.pop()

    if len(digits) > _encoded_capacity(len(data) - leading_zeros):
        raise CarryResidueError("base58", "digit accumulator overflowed")

    return BITCOIN_ALPHABET[0] * leading_zeros + "".join(
        BITCOIN_ALPHABET[d] for d in reversed(digits)
    )


def b58encode(data: BytesLike) -> str:
    """Encode bytes to a base58 string using the Bitcoin alphabet."""
    data = require_bytes(data)
    if not data:
        return ""
    try:
        return _b58encode(data)
    except CarryResidueError as exc:
        log.error("Base58 encode failed: %s", exc)
        return ""


def _b58decode(encoded: str, strict: bool) -> bytes:
    leading_zeros = 0
    start = len(encoded)
    for pos, ch in enumerate(encoded):
        if ch == BITCOIN_ALPHABET[0]:
            leading_zeros += 1
        elif ch not in _WHITESPACE:
            start = pos
            break

    values = []
    for pos in range(start, len(encoded)):
        ch = encoded[pos]
        if ch in _WHITESPACE:
            continue
        value = symbol_value(_B58_TABLE, ch)
        if value == INVALID:
            raise InvalidCharacterError("base58", ch, pos)
        values.append(value)

    num = 0
    for i in range(0, len(values), _CHUNK_DIGITS):
        chunk_values = values[i : i + _CHUNK_DIGITS]
        chunk = 0
        for value in chunk_values:
            chunk = chunk * 58 + value
        num = num * 58 ** len(chunk_values) + chunk

    byte_len = (num.bit_length() + 7) // 8
    # Base 256 never needs more digits than base 58 did
    if byte_len > len(values):
        raise CarryResidueError("base58", "octet accumulator overflowed")
    return b"\x00" * leading_zeros + num.to_bytes(byte_len, byteorder="big")


def b58decode(encoded: str, strict: bool = False) -> bytes:
    """Decode a base58 string to bytes using the Bitcoin alphabet.

    Returns ``b""`` for malformed input unless ``strict`` is set, in which
    case ``InvalidCharacterError`` (a ``ValueError``) is raised instead.
    """
    return decode_or_empty(_b58decode, encoded, strict)


def b58encode_str(text: str, encoding: str = "utf-8") -> str:
    """Encode a text string to base58."""
    return b58encode(text.encode(encoding))


def b58decode_str(encoded: str, encoding: str = "utf-8", strict: bool = False) -> str:
    """Decode a base58 string to text."""
    return b58decode(encoded, strict=strict).decode(encoding)
