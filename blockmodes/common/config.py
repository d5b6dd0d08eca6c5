from __future__ import annotations
"""Runtime knobs read from the environment."""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() not in ("0", "false", "no", "off")


@dataclass
class ModeConfig:
    workers: int = int(os.getenv("BLOCKMODES_WORKERS", "1"))
    strict_padding: bool = _env_flag("BLOCKMODES_STRICT_PADDING", "1")
    log_level: str = os.getenv("BLOCKMODES_LOG_LEVEL", "WARNING")

    def __post_init__(self):
        if self.workers < 1:
            raise ValueError("workers must be >= 1")


def resolve_config(cfg: ModeConfig | None = None) -> ModeConfig:
    if cfg is None:
        cfg = ModeConfig()
    return cfg
