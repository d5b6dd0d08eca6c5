from __future__ import annotations
"""Pydantic models: envelope carrying a mode name and base64 ciphertext."""

from typing import Literal

from pydantic import BaseModel, field_validator

from blockmodes.common.utils import b64d, b64e

PROTO = "blockmodes/1"


class Envelope(BaseModel):
    proto: str = PROTO
    # ecb | cbc | ctr
    mode: Literal["ecb", "cbc", "ctr"]
    # IV / nonce header (if any) is part of the ciphertext
    ct_b64: str

    @field_validator("mode", mode="before")
    @classmethod
    def _lower_mode(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("proto")
    @classmethod
    def _check_proto(cls, v: str) -> str:
        if v != PROTO:
            raise ValueError(f"unsupported envelope proto {v!r}")
        return v

    @classmethod
    def wrap(cls, mode: str, cipher_text: bytes) -> "Envelope":
        return cls(mode=mode, ct_b64=b64e(cipher_text))

    def cipher_text(self) -> bytes:
        return b64d(self.ct_b64)
