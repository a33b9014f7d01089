"""Base45 codec per RFC 9285.

Pairs of octets form a 16-bit value ``n`` written as three symbols
``c, d, e`` with ``n = c + d*45 + e*45*45``, least significant symbol
first. A trailing single octet is written as two symbols.

The alphabet is case-sensitive and includes the space character. Decoding
ignores every character outside it, so lowercase letters, newlines and tabs
are skipped rather than folded or rejected.
"""

from tinyland_bases.errors import MalformedLengthError, ValueRangeError
from tinyland_bases.tables import (
    INVALID,
    BytesLike,
    decode_or_empty,
    require_bytes,
    reverse_table,
    symbol_value,
)

BASE45_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"
_B45_TABLE = reverse_table(BASE45_ALPHABET)


def b45encode(data: BytesLike) -> str:
    """Encode bytes to base45 text."""
    data = require_bytes(data)
    a = BASE45_ALPHABET
    output = []
    full = len(data) - len(data) % 2
    for i in range(0, full, 2):
        value = (data[i] << 8) | data[i + 1]
        output.append(a[value % 45] + a[(value // 45) % 45] + a[(value // 2025) % 45])
    if full < len(data):
        value = data[full]
        output.append(a[value % 45] + a[(value // 45) % 45])
    return "".join(output)


def _b45decode(encoded: str, strict: bool) -> bytes:
    output = bytearray()
    group = []
    for ch in encoded:
        value = symbol_value(_B45_TABLE, ch)
        if value == INVALID:
            continue
        group.append(value)
        if len(group) == 3:
            pair = group[0] + group[1] * 45 + group[2] * 2025
            if strict and pair > 0xFFFF:
                raise ValueRangeError("base45", f"group value {pair} exceeds 16 bits")
            output.append((pair >> 8) & 0xFF)
            output.append(pair & 0xFF)
            group.clear()

    if len(group) == 1:
        raise MalformedLengthError("base45", "dangling single symbol")
    if group:
        octet = group[0] + group[1] * 45
        if strict and octet > 0xFF:
            raise ValueRangeError("base45", f"group value {octet} exceeds 8 bits")
        output.append(octet & 0xFF)
    return bytes(output)


def b45decode(encoded: str, strict: bool = False) -> bytes:
    """Decode base45 text.

    With ``strict`` set, groups whose value does not fit their output
    octets are rejected as RFC 9285 requires; otherwise they are truncated.
    """
    return decode_or_empty(_b45decode, encoded, strict)


def b45encode_str(text: str, encoding: str = "utf-8") -> str:
    """Encode a text string to base45."""
    return b45encode(text.encode(encoding))


def b45decode_str(encoded: str, encoding: str = "utf-8", strict: bool = False) -> str:
    """Decode base45 text to a string."""
    return b45decode(encoded, strict=strict).decode(encoding)
