"""Name-based lookup of the five codecs, used by the CLI."""

from typing import Callable, Dict, NamedTuple

from tinyland_bases.base16 import b16decode, b16encode
from tinyland_bases.base32 import b32decode, b32encode
from tinyland_bases.base45 import b45decode, b45encode
from tinyland_bases.base58 import b58decode, b58encode
from tinyland_bases.base64 import b64decode, b64encode
from tinyland_bases.errors import UnknownCodecError


class Codec(NamedTuple):
    name: str
    encode: Callable[..., str]
    decode: Callable[..., bytes]


CODECS: Dict[str, Codec] = {
    "base16": Codec("base16", b16encode, b16decode),
    "base32": Codec("base32", b32encode, b32decode),
    "base45": Codec("base45", b45encode, b45decode),
    "base58": Codec("base58", b58encode, b58decode),
    "base64": Codec("base64", b64encode, b64decode),
}

# "16", "b16", ... for every "baseNN", plus "hex"
_ALIASES = {
    alias: name
    for name in CODECS
    for alias in (name[len("base") :], "b" + name[len("base") :])
}
_ALIASES["hex"] = "base16"


def get_codec(name: str) -> Codec:
    """Look up a codec by canonical name or alias, case-insensitively.

    Raises:
        UnknownCodecError: If the name matches no codec.
    """
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return CODECS[key]
    except KeyError:
        raise UnknownCodecError(
            f"Unknown codec {name!r} (expected one of: {', '.join(CODECS)})"
        ) from None
