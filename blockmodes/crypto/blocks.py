"""Split buffers into fixed-size blocks and join them back."""
from __future__ import annotations

from typing import Iterable

from blockmodes.common.errors import InvalidLengthError

BLOCK_SIZE = 16  # bytes


def group(data: bytes, block_size: int = BLOCK_SIZE) -> list[bytes]:
    """Partition ``data`` into consecutive ``block_size`` blocks.

    The length must already be a multiple of ``block_size`` (run ``pad``
    first); nothing is padded or dropped here.
    """
    if block_size < 1:
        raise ValueError("block_size must be positive")
    if len(data) % block_size != 0:
        raise InvalidLengthError(
            f"data length {len(data)} is not a multiple of {block_size}"
        )
    data = bytes(data)
    return [data[i : i + block_size] for i in range(0, len(data), block_size)]


def un_group(blocks: Iterable[bytes]) -> bytes:
    return b"".join(blocks)


def xor_blocks(a: bytes, b: bytes) -> bytes:
    if len(a) != len(b):
        raise InvalidLengthError(f"cannot xor blocks of length {len(a)} and {len(b)}")
    return bytes(x ^ y for x, y in zip(a, b))


def check_aligned(data: bytes, block_size: int = BLOCK_SIZE, min_blocks: int = 1) -> None:
    """Validate a received ciphertext: whole blocks, at least ``min_blocks``."""
    if len(data) % block_size != 0:
        raise InvalidLengthError(
            f"ciphertext length {len(data)} is not a multiple of {block_size}"
        )
    if len(data) < min_blocks * block_size:
        raise InvalidLengthError(
            f"ciphertext must hold at least {min_blocks} block(s) of {block_size} bytes"
        )
