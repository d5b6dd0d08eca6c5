"""Cipher Block Chaining mode.

Each plaintext block is XORed with the previous ciphertext block before it is
encrypted; a fresh random IV stands in for the block before the first one and
is sent as the first block of the ciphertext:

    C[i] = E(P[i] xor C[i-1]),  C[-1] = IV
    P[i] = D(C[i]) xor C[i-1]

Encryption is a chain and runs strictly in order. Decryption only needs
ciphertext blocks that have already been received, so every index can be
computed independently.
"""
from __future__ import annotations

import logging
from itertools import accumulate

from blockmodes.common.config import ModeConfig, resolve_config
from blockmodes.common.parallel import map_indexed
from blockmodes.common.utils import RandomBytes, ensure_bytes, take_random
from blockmodes.crypto.aes import AES128, BlockCipher, check_key
from blockmodes.crypto.blocks import check_aligned, group, un_group, xor_blocks
from blockmodes.crypto.padding import pad, un_pad

log = logging.getLogger(__name__)


def cbc_encrypt(
    plain_text: bytes,
    key: bytes,
    *,
    cipher: BlockCipher | None = None,
    config: ModeConfig | None = None,
    random_bytes: RandomBytes | None = None,
) -> bytes:
    """Return ``IV || C[0] || ... || C[n-1]`` for the padded plaintext.

    ``config`` is accepted so all modes share a signature; the chain is always
    computed in order, whatever ``config.workers`` says.
    """
    cipher = cipher or AES128
    plain_text = ensure_bytes("plain_text", plain_text)
    key = check_key(key, cipher)

    bs = cipher.block_size
    iv = take_random(bs, random_bytes)
    blocks = group(pad(plain_text, bs), bs)
    log.debug("[CBC] encrypt %d blocks", len(blocks))

    def step(previous: bytes, block: bytes) -> bytes:
        return cipher.encrypt_block(xor_blocks(block, previous), key)

    # fold with the previous ciphertext block as accumulator; yields IV, C[0], ...
    chain = accumulate(blocks, step, initial=iv)
    return un_group(chain)


def cbc_decrypt(
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
    # IV plus at least one (padding) block
    check_aligned(cipher_text, cipher.block_size, min_blocks=2)

    blocks = group(cipher_text, cipher.block_size)
    log.debug("[CBC] decrypt %d blocks", len(blocks) - 1)

    def step(i: int, block: bytes) -> bytes:
        # blocks[i] is the ciphertext block preceding blocks[i + 1]
        return xor_blocks(cipher.decrypt_block(block, key), blocks[i])

    plain_blocks = map_indexed(step, blocks[1:], cfg.workers)
    return un_pad(un_group(plain_blocks), cipher.block_size, strict=cfg.strict_padding)
