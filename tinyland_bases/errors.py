"""Exception hierarchy for the tinyland_bases codecs.

Decoders raise these only in strict mode; the default lenient mode converts
any ``DecodeError`` into an empty result.
"""

from typing import Optional


class BasesError(Exception):
    """Base exception for all codec operations."""


class UnknownCodecError(BasesError, KeyError):
    """Raised when a codec name does not match any registered codec."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0]) if self.args else ""


class DecodeError(BasesError, ValueError):
    """Raised when encoded text cannot be decoded."""

    def __init__(self, codec: str, message: str):
        super().__init__(f"{codec}: {message}")
        self.codec = codec


class MalformedLengthError(DecodeError):
    """The input ends with a symbol group no encoder can produce."""


class NonZeroPaddingError(DecodeError):
    """Residual bits that must be zero padding are set."""


class InvalidCharacterError(DecodeError):
    """A character outside the alphabet appeared where one is required."""

    def __init__(self, codec: str, char: str, position: Optional[int] = None):
        where = f" at position {position}" if position is not None else ""
        super().__init__(codec, f"invalid character {char!r}{where}")
        self.char = char
        self.position = position


class CarryResidueError(DecodeError):
    """Base conversion finished with carry left over."""


class ValueRangeError(DecodeError):
    """A symbol group decodes to a value wider than its output octets."""
