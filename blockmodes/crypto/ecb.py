"""Electronic Code Book mode.

WARNING: ECB is NOT secure. Every block is encrypted on its own under the
same key, so equal plaintext blocks give equal ciphertext blocks and the
structure of the message shows through. It is kept to demonstrate exactly
that; use CBC or CTR for anything real.
"""
from __future__ import annotations

import logging

from blockmodes.common.config import ModeConfig, resolve_config
from blockmodes.common.parallel import map_indexed
from blockmodes.common.utils import ensure_bytes
from blockmodes.crypto.aes import AES128, BlockCipher, check_key
from blockmodes.crypto.blocks import check_aligned, group, un_group
from blockmodes.crypto.padding import pad, un_pad

log = logging.getLogger(__name__)


def ecb_encrypt(
    plain_text: bytes,
    key: bytes,
    *,
    cipher: BlockCipher | None = None,
    config: ModeConfig | None = None,
) -> bytes:
    cipher = cipher or AES128
    cfg = resolve_config(config)
    plain_text = ensure_bytes("plain_text", plain_text)
    key = check_key(key, cipher)

    blocks = group(pad(plain_text, cipher.block_size), cipher.block_size)
    log.debug("[ECB] encrypt %d blocks", len(blocks))
    encrypted = map_indexed(
        lambda _i, block: cipher.encrypt_block(block, key), blocks, cfg.workers
    )
    return un_group(encrypted)


def ecb_decrypt(
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
    check_aligned(cipher_text, cipher.block_size, min_blocks=1)

    blocks = group(cipher_text, cipher.block_size)
    log.debug("[ECB] decrypt %d blocks", len(blocks))
    decrypted = map_indexed(
        lambda _i, block: cipher.decrypt_block(block, key), blocks, cfg.workers
    )
    return un_pad(un_group(decrypted), cipher.block_size, strict=cfg.strict_padding)
