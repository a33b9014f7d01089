"""Base64 codec per RFC 4648 section 4 (standard alphabet).

Three octets fill a 24-bit group that is emitted as four 6-bit symbols. A
final group of one octet produces two symbols and ``==``, a final group of
two octets produces three symbols and ``=``.

Decoding mirrors the base32 rules: it stops at the first ``=``, skips any
character outside the alphabet (line breaks, spaces), accepts input whose
padding was dropped, and rejects set bits in the zero-filled tail. The
alphabet holds both letter cases, so decoding is case-sensitive.
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

BASE64_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)
BASE64_PAD = "="
_B64_TABLE = reverse_table(BASE64_ALPHABET)


def b64encode(data: BytesLike) -> str:
    """Encode bytes to padded base64 text."""
    data = require_bytes(data)
    a = BASE64_ALPHABET
    output = []
    full = len(data) - len(data) % 3
    for i in range(0, full, 3):
        group = (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
        output.append(
            a[group >> 18] + a[(group >> 12) & 0x3F] + a[(group >> 6) & 0x3F] + a[group & 0x3F]
        )

    tail = data[full:]
    if len(tail) == 1:
        group = tail[0] << 16
        output.append(a[group >> 18] + a[(group >> 12) & 0x3F] + BASE64_PAD * 2)
    elif len(tail) == 2:
        group = (tail[0] << 16) | (tail[1] << 8)
        output.append(
            a[group >> 18] + a[(group >> 12) & 0x3F] + a[(group >> 6) & 0x3F] + BASE64_PAD
        )
    return "".join(output)


def _b64decode(encoded: str, strict: bool) -> bytes:
    output = bytearray()
    group = 0
    group_size = 0
    for ch in encoded:
        if ch == BASE64_PAD:
            break
        value = symbol_value(_B64_TABLE, ch)
        if value == INVALID:
            continue
        group = (group << 6) | value
        group_size += 6
        if group_size == 24:
            output += group.to_bytes(3, "big")
            group = 0
            group_size = 0

    if group_size:
        # 6, 12 or 18 bits: a lone symbol, then one or two whole octets
        if strict and group_size == 6:
            raise MalformedLengthError("base64", "dangling single symbol")
        count = group_size // 8
        spare = group_size - count * 8
        if group & ((1 << spare) - 1):
            raise NonZeroPaddingError("base64", "non-zero bits in final symbol")
        output += (group >> spare).to_bytes(count, "big")
    return bytes(output)


def b64decode(encoded: str, strict: bool = False) -> bytes:
    """Decode base64 text, with or without its ``=`` padding."""
    return decode_or_empty(_b64decode, encoded, strict)


def b64encode_str(text: str, encoding: str = "utf-8") -> str:
    """Encode a text string to base64."""
    return b64encode(text.encode(encoding))


def b64decode_str(encoded: str, encoding: str = "utf-8", strict: bool = False) -> str:
    """Decode base64 text to a string."""
    return b64decode(encoded, strict=strict).decode(encoding)
