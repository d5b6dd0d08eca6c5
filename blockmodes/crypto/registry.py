"""Name -> (encrypt, decrypt) lookup for the supported modes."""
from __future__ import annotations

from typing import Callable, NamedTuple

from blockmodes.common.errors import UnknownModeError
from blockmodes.crypto.cbc import cbc_decrypt, cbc_encrypt
from blockmodes.crypto.ctr import ctr_decrypt, ctr_encrypt
from blockmodes.crypto.ecb import ecb_decrypt, ecb_encrypt


class Mode(NamedTuple):
    name: str
    encrypt: Callable[..., bytes]
    decrypt: Callable[..., bytes]
    # carries a random IV / nonce header block
    has_header: bool


MODES: dict[str, Mode] = {
    "ecb": Mode("ecb", ecb_encrypt, ecb_decrypt, False),
    "cbc": Mode("cbc", cbc_encrypt, cbc_decrypt, True),
    "ctr": Mode("ctr", ctr_encrypt, ctr_decrypt, True),
}


def get_mode(name: str) -> Mode:
    try:
        return MODES[name.strip().lower()]
    except (KeyError, AttributeError):
        raise UnknownModeError(
            f"unknown mode {name!r}; expected one of {sorted(MODES)}"
        ) from None
