"""Tinyland Bases - binary-to-text codecs for base16, 32, 45, 58 and 64.

Every codec exposes a total ``encode`` and a ``decode`` that returns ``b""``
for malformed input by default, or raises a ``DecodeError`` subclass when
called with ``strict=True``. Includes a small CLI for stdin/stdout use.
"""

__version__ = "0.1.0"

from tinyland_bases.errors import (  # noqa: F401
    BasesError,
    CarryResidueError,
    DecodeError,
    InvalidCharacterError,
    MalformedLengthError,
    NonZeroPaddingError,
    UnknownCodecError,
    ValueRangeError,
)
from tinyland_bases.base16 import (  # noqa: F401
    b16decode,
    b16decode_str,
    b16encode,
    b16encode_str,
)
from tinyland_bases.base32 import (  # noqa: F401
    b32decode,
    b32decode_str,
    b32encode,
    b32encode_str,
)
from tinyland_bases.base45 import (  # noqa: F401
    b45decode,
    b45decode_str,
    b45encode,
    b45encode_str,
)
from tinyland_bases.base58 import (  # noqa: F401
    b58decode,
    b58decode_str,
    b58encode,
    b58encode_str,
)
from tinyland_bases.base64 import (  # noqa: F401
    b64decode,
    b64decode_str,
    b64encode,
    b64encode_str,
)
from tinyland_bases.registry import CODECS, Codec, get_codec  # noqa: F401
from tinyland_bases.cli import main  # noqa: F401
