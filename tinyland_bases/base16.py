"""Base16 (hex) codec per RFC 4648 section 8.

Encoding emits uppercase digits. Decoding is case-insensitive and silently
skips every character outside the alphabet, so hex dumps decorated with
spaces or punctuation decode as-is.
"""

from tinyland_bases.errors import MalformedLengthError
from tinyland_bases.tables import (
    INVALID,
    BytesLike,
    decode_or_empty,
    require_bytes,
    reverse_table,
    symbol_value,
)

BASE16_ALPHABET = "0123456789ABCDEF"
_B16_TABLE = reverse_table(BASE16_ALPHABET, fold_case=True)


def b16encode(data: BytesLike) -> str:
    """Encode bytes as uppercase hex, two characters per octet."""
    data = require_bytes(data)
    return "".join(
        BASE16_ALPHABET[octet >> 4] + BASE16_ALPHABET[octet & 0x0F] for octet in data
    )


def _b16decode(encoded: str, strict: bool) -> bytes:
    output = bytearray()
    group = 0
    group_size = 0
    for ch in encoded:
        value = symbol_value(_B16_TABLE, ch)
        if value == INVALID:
            continue
        group = ((group << 4) | value) & 0xFF
        group_size += 4
        if group_size == 8:
            output.append(group)
            group_size = 0
    if group_size:
        raise MalformedLengthError("base16", "odd number of hex digits")
    return bytes(output)


def b16decode(encoded: str, strict: bool = False) -> bytes:
    """Decode hex text; an odd digit count yields ``b""`` unless ``strict``."""
    return decode_or_empty(_b16decode, encoded, strict)


def b16encode_str(text: str, encoding: str = "utf-8") -> str:
    """Encode a text string to base16."""
    return b16encode(text.encode(encoding))


def b16decode_str(encoded: str, encoding: str = "utf-8", strict: bool = False) -> str:
    """Decode base16 text to a string."""
    return b16decode(encoded, strict=strict).decode(encoding)
