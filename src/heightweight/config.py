"""Centralised settings resolved from environment variables.

All values have defaults, so nothing needs to be set for local use.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _optional_int(name: str) -> int | None:
    raw = os.environ.get(name, "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class Settings:
    sample_count: int = field(
        default_factory=lambda: int(os.environ.get("HEIGHTWEIGHT_SAMPLE_COUNT", "100"))
    )
    # None means a fresh, unseeded random stream on every run
    random_seed: int | None = field(
        default_factory=lambda: _optional_int("HEIGHTWEIGHT_SEED")
    )
    domain_padding: float = field(
        default_factory=lambda: float(os.environ.get("HEIGHTWEIGHT_DOMAIN_PADDING", "0.1"))
    )


settings = Settings()
