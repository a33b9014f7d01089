"""Alphabet tables and input checks shared by the codec modules.

Every codec keeps its forward alphabet as a ``str`` and its reverse lookup
as a 256-entry ``bytes`` object computed once at import time, mapping each
single-byte code point to a symbol value or to ``INVALID``.
"""

import logging
from typing import Callable, Union

from tinyland_bases.errors import DecodeError

log = logging.getLogger(__name__)

INVALID = 0xFF

BytesLike = Union[bytes, bytearray, memoryview]


def _byte_index(alphabet: str, code: int, fold_case: bool) -> int:
    char = chr(code)
    if fold_case and "a" <= char <= "z":
        char = char.upper()
    idx = alphabet.find(char)
    return INVALID if idx < 0 else idx


def reverse_table(alphabet: str, fold_case: bool = False) -> bytes:
    """Invert ``alphabet`` into a lookup table indexed by code point 0-255.

    With ``fold_case`` the ASCII lowercase letters map to the value of their
    uppercase counterparts; the alphabet itself must then be uppercase.
    """
    if len(set(alphabet)) != len(alphabet) or len(alphabet) >= INVALID:
        raise ValueError(f"Unusable alphabet: {alphabet!r}")
    return bytes(_byte_index(alphabet, code, fold_case) for code in range(0x100))


def symbol_value(table: bytes, char: str) -> int:
    """Return the symbol value of ``char``, or ``INVALID``."""
    code = ord(char)
    return table[code] if code < 0x100 else INVALID


def require_bytes(data: BytesLike) -> bytes:
    """Return ``data`` as ``bytes``, rejecting anything that is not bytes-like."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError("Input must be bytes")


def require_text(encoded: str) -> str:
    if not isinstance(encoded, str):
        raise TypeError("Input must be a string")
    return encoded


def decode_or_empty(
    decoder: Callable[[str, bool], bytes], encoded: str, strict: bool
) -> bytes:
    """Run ``decoder`` on ``encoded``, applying the lenient or strict policy.

    ``decoder`` also receives ``strict`` for the checks only strict mode
    applies. In lenient mode a ``DecodeError`` yields ``b""``, which callers
    cannot tell apart from the decoding of an empty string.
    """
    require_text(encoded)
    try:
        return decoder(encoded, strict)
    except DecodeError as exc:
        if strict:
            raise
        log.debug("Lenient decode returned empty result: %s", exc)
        return b""
