import os

import pytest

BLOCK_SIZE = 16


class IncrementCipher:
    """Toy invertible cipher: adds the key bytewise, mod 256."""

    block_size = BLOCK_SIZE
    key_size = BLOCK_SIZE

    def __init__(self):
        self.calls = 0

    def encrypt_block(self, block: bytes, key: bytes) -> bytes:
        assert len(block) == self.block_size
        self.calls += 1
        return bytes((b + k) % 256 for b, k in zip(block, key))

    def decrypt_block(self, block: bytes, key: bytes) -> bytes:
        assert len(block) == self.block_size
        self.calls += 1
        return bytes((b - k) % 256 for b, k in zip(block, key))


class FixedRandom:
    """Entropy source replaying a fixed byte string, cycling if needed."""

    def __init__(self, seed: bytes):
        self.seed = seed
        self.requests = []

    def __call__(self, n: int) -> bytes:
        self.requests.append(n)
        reps = n // len(self.seed) + 1
        return (self.seed * reps)[:n]


@pytest.fixture
def key() -> bytes:
    return os.urandom(16)


@pytest.fixture
def fake_cipher() -> IncrementCipher:
    return IncrementCipher()


@pytest.fixture
def fixed_random() -> FixedRandom:
    return FixedRandom(bytes(range(0xA0, 0xB0)))


# plaintext lengths around the block boundary, plus several blocks
EDGE_LENGTHS = [0, 1, BLOCK_SIZE - 1, BLOCK_SIZE, BLOCK_SIZE + 1, 3 * BLOCK_SIZE, 100]
