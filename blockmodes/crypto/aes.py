"""AES-128 single-block primitive (use library) behind a small protocol."""
from __future__ import annotations

from typing import Protocol

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from blockmodes.common.errors import InvalidLengthError, KeyLengthError
from blockmodes.common.utils import ensure_bytes

BLOCK_SIZE = 16  # bytes
KEY_SIZE = 16  # bytes


class BlockCipher(Protocol):
    """Encrypts or decrypts exactly one block under a caller-held key."""

    block_size: int
    key_size: int

    def encrypt_block(self, block: bytes, key: bytes) -> bytes: ...

    def decrypt_block(self, block: bytes, key: bytes) -> bytes: ...


def check_key(key: bytes, cipher: BlockCipher) -> bytes:
    key = ensure_bytes("key", key)
    if len(key) != cipher.key_size:
        raise KeyLengthError(
            f"key must be {cipher.key_size} bytes, got {len(key)}"
        )
    return key


class Aes128:
    block_size = BLOCK_SIZE
    key_size = KEY_SIZE

    def _check(self, block: bytes, key: bytes) -> None:
        if len(key) != self.key_size:
            raise KeyLengthError("AES-128 key must be 16 bytes")
        if len(block) != self.block_size:
            raise InvalidLengthError(f"AES block must be 16 bytes, got {len(block)}")

    def encrypt_block(self, block: bytes, key: bytes) -> bytes:
        self._check(block, key)
        encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
        return encryptor.update(block) + encryptor.finalize()

    def decrypt_block(self, block: bytes, key: bytes) -> bytes:
        self._check(block, key)
        decryptor = Cipher(algorithms.AES(key), modes.ECB()).decryptor()
        return decryptor.update(block) + decryptor.finalize()


AES128 = Aes128()


def aes_encrypt(block: bytes, key: bytes) -> bytes:
    return AES128.encrypt_block(block, key)


def aes_decrypt(block: bytes, key: bytes) -> bytes:
    return AES128.decrypt_block(block, key)
