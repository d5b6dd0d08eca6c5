"""Helper signatures: b64e, b64d, RandomBytes, take_random."""
from __future__ import annotations

import base64
import os
from typing import Callable

# n -> n cryptographically secure bytes
RandomBytes = Callable[[int], bytes]

default_random_bytes: RandomBytes = os.urandom


def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")


def b64d(s: str) -> bytes:
    return base64.b64decode(s.encode("ascii"), validate=True)


def take_random(n: int, random_bytes: RandomBytes | None = None) -> bytes:
    """Draw exactly ``n`` bytes from ``random_bytes`` (``os.urandom`` if None)."""
    if random_bytes is None:
        random_bytes = default_random_bytes
    out = bytes(random_bytes(n))
    if len(out) != n:
        raise ValueError(f"entropy source returned {len(out)} bytes, expected {n}")
    return out


def ensure_bytes(name: str, value) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes, got {type(value).__name__}")
    return bytes(value)
