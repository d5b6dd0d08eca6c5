"""Counter mode.

For block ``i`` the counter block ``V[i] = nonce || le(i)`` is encrypted and
the result is XORed into the data, so the cipher only ever runs forwards and
every block is independent of every other one. The random nonce fills the
first half of the first ciphertext block; the second half is zero on the wire
and ignored when decoding.

Both directions build ``V[i]`` through :func:`counter_block`. A counter
encoded with a different byte order on one side does not fail: it silently
yields the wrong plaintext.
"""
from __future__ import annotations

import logging

from blockmodes.common.config import ModeConfig, resolve_config
from blockmodes.common.errors import InvalidLengthError
from blockmodes.common.parallel import map_indexed
from blockmodes.common.utils import RandomBytes, ensure_bytes, take_random
from blockmodes.crypto.aes import AES128, BlockCipher, check_key
from blockmodes.crypto.blocks import check_aligned, group, un_group, xor_blocks
from blockmodes.crypto.padding import BLOCK_SIZE, pad, un_pad

log = logging.getLogger(__name__)

COUNTER_BYTEORDER = "little"


def counter_block(nonce: bytes, index: int, block_size: int = BLOCK_SIZE) -> bytes:
    half = block_size // 2
    if len(nonce) != half:
        raise InvalidLengthError(f"nonce must be {half} bytes, got {len(nonce)}")
    if index < 0 or index >= 1 << (8 * half):
        raise InvalidLengthError(f"counter {index} does not fit in {half} bytes")
    return bytes(nonce) + index.to_bytes(half, COUNTER_BYTEORDER)


def _nonce_size(cipher: BlockCipher) -> int:
    if cipher.block_size % 2:
        raise InvalidLengthError("CTR needs an even block size")
    return cipher.block_size // 2


def _apply_keystream(
    blocks: list[bytes], nonce: bytes, key: bytes, cipher: BlockCipher, workers: int
) -> list[bytes]:
    def step(i: int, block: bytes) -> bytes:
        keystream = cipher.encrypt_block(counter_block(nonce, i, cipher.block_size), key)
        return xor_blocks(block, keystream)

    return map_indexed(step, blocks, workers)


def ctr_encrypt(
    plain_text: bytes,
    key: bytes,
    *,
    cipher: BlockCipher | None = None,
    config: ModeConfig | None = None,
    random_bytes: RandomBytes | None = None,
) -> bytes:
    """Return ``nonce || zeros || C[0] || ... || C[n-1]``.

    The plaintext is padded first, so ciphertext length follows the same
    block arithmetic as ECB and CBC.
    """
    cipher = cipher or AES128
    cfg = resolve_config(config)
    plain_text = ensure_bytes("plain_text", plain_text)
    key = check_key(key, cipher)

    half = _nonce_size(cipher)
    nonce = take_random(half, random_bytes)
    blocks = group(pad(plain_text, cipher.block_size), cipher.block_size)
    log.debug("[CTR] encrypt %d blocks", len(blocks))

    header = nonce + bytes(half)
    return header + un_group(_apply_keystream(blocks, nonce, key, cipher, cfg.workers))


def ctr_decrypt(
    cipher_text: bytes,
    key: bytes,
    *,
    cipher: BlockCipher | None = None,
    config: ModeConfig | None = None,
) -> bytes:
    cipher = cipher or AES128
    cfg = resolve_config(config)
    cipher_text = ensure_bytes("cipher_text", cipher_text)
    key = check_key(key, cipher)
    half = _nonce_size(cipher)
    check_aligned(cipher_text, cipher.block_size, min_blocks=2)

    blocks = group(cipher_text, cipher.block_size)
    nonce = blocks[0][:half]
    log.debug("[CTR] decrypt %d blocks", len(blocks) - 1)

    plain_blocks = _apply_keystream(blocks[1:], nonce, key, cipher, cfg.workers)
    return un_pad(un_group(plain_blocks), cipher.block_size, strict=cfg.strict_padding)
