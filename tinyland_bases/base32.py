"""Base32 codec per RFC 4648 section 6.

Input octets are regrouped into 5-bit symbols through a small sliding
register; 40 bits (eight symbols) form one quantum, and the final quantum is
filled out with ``=`` padding.

Decoding stops at the first ``=``, ignores characters outside the alphabet,
and folds lowercase letters to uppercase. Missing padding is tolerated, but
any set bit left over in the final partial symbol is rejected.
"""

from tinyland_bases.errors import MalformedLengthError, NonZeroPaddingError
from tinyland_bases.tables import (
    INVALID,
    BytesLike,
    decode_or_empty,
    require_bytes,
    reverse_table,
    symbol_value,
)

BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE32_PAD = "="
_B32_TABLE = reverse_table(BASE32_ALPHABET, fold_case=True)

# Symbols per 40-bit quantum
_QUANTUM = 8


def b32encode(data: BytesLike) -> str:
    """Encode bytes to padded base32 text."""
    data = require_bytes(data)
    if not data:
        return ""

    output = []
    group = 0
    group_size = 0
    for octet in data:
        group = (group << 8) | octet
        group_size += 8
        while group_size >= 5:
            group_size -= 5
            output.append(BASE32_ALPHABET[(group >> group_size) & 0x1F])
        group &= (1 << group_size) - 1

    if group_size:
        # Left-align the residual bits on a 5-bit boundary
        output.append(BASE32_ALPHABET[(group << (5 - group_size)) & 0x1F])

    output.append(BASE32_PAD * (-len(output) % _QUANTUM))
    return "".join(output)


def _b32decode(encoded: str, strict: bool) -> bytes:
    output = bytearray()
    group = 0
    group_size = 0
    for ch in encoded:
        if ch == BASE32_PAD:
            break
        value = symbol_value(_B32_TABLE, ch)
        if value == INVALID:
            continue
        group = (group << 5) | value
        group_size += 5
        if group_size >= 8:
            group_size -= 8
            output.append((group >> group_size) & 0xFF)
            group &= (1 << group_size) - 1

    # 1, 3 or 6 symbols in the final quantum leave 5 or more bits behind
    if strict and group_size >= 5:
        raise MalformedLengthError(
            "base32", "final quantum has a symbol count no encoder produces"
        )
    if group:
        raise NonZeroPaddingError("base32", "non-zero bits in final symbol")
    return bytes(output)


def b32decode(encoded: str, strict: bool = False) -> bytes:
    """Decode base32 text, with or without its ``=`` padding."""
    return decode_or_empty(_b32decode, encoded, strict)


def b32encode_str(text: str, encoding: str = "utf-8") -> str:
    """Encode a text string to base32."""
    return b32encode(text.encode(encoding))


def b32decode_str(encoded: str, encoding: str = "utf-8", strict: bool = False) -> str:
    """Decode base32 text to a string."""
    return b32decode(encoded, strict=strict).decode(encoding)
