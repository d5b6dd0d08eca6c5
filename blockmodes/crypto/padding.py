"""PKCS#7-style padding: always pad, even when already block-aligned."""
from __future__ import annotations

import logging

from blockmodes.common.errors import PaddingError

log = logging.getLogger(__name__)

BLOCK_SIZE = 16  # bytes


def _check_block_size(block_size: int) -> None:
    if block_size < 1 or block_size > 255:
        raise ValueError("block_size must be in 1..255")


def pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """Append ``n`` bytes of value ``n`` so the length becomes a multiple of
    ``block_size``. ``n`` is in ``1..block_size``; aligned input gets a whole
    extra block, so the last byte always describes the padding.
    """
    _check_block_size(block_size)
    pad_len = block_size - (len(data) % block_size)
    return bytes(data) + bytes([pad_len]) * pad_len


def un_pad(data: bytes, block_size: int = BLOCK_SIZE, strict: bool = True) -> bytes:
    """Remove the padding added by :func:`pad`.

    Raises PaddingError if the trailing length byte is out of range or, when
    ``strict``, if the pad bytes do not all carry that value.
    """
    _check_block_size(block_size)
    if not data:
        raise PaddingError("empty data for un_pad")
    pad_len = data[-1]
    if pad_len < 1 or pad_len > block_size:
        log.debug("[PAD] bad padding length %d", pad_len)
        raise PaddingError("bad padding length")
    if pad_len > len(data):
        log.debug("[PAD] padding length %d exceeds buffer of %d", pad_len, len(data))
        raise PaddingError("padding longer than data")
    if strict:
        # fold the comparison so every pad byte is inspected
        bad = 0
        for b in data[-pad_len:]:
            bad |= b ^ pad_len
        if bad:
            log.debug("[PAD] bad padding bytes")
            raise PaddingError("bad padding bytes")
    return bytes(data[:-pad_len])
