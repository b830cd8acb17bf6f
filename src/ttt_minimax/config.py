"""Engine defaults, environment-first.

``TTT_DEPTH`` and ``TTT_SIDE`` override the built-in defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_DEPTH = 9
DEFAULT_SIDE = 3


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class EngineConfig:
    depth: int = DEFAULT_DEPTH
    side: int = DEFAULT_SIDE

    @classmethod
    def from_env(cls) -> "EngineConfig":
        return cls(
            depth=_env_int("TTT_DEPTH", DEFAULT_DEPTH),
            side=_env_int("TTT_SIDE", DEFAULT_SIDE),
        )
