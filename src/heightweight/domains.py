"""Axis ranges for the chart: the data extent rounded outwards, plus padding."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from heightweight.config import settings


@dataclass(frozen=True)
class AxisDomain:
    min: float = 0.0
    max: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.min, self.max))


def domain_for(values: Iterable[float], padding: float | None = None) -> AxisDomain:
    """Return ``(floor(min) - pad, ceil(max) + pad)`` with pad a share of the range.

    ``padding`` defaults to ``settings.domain_padding`` (10%).
    """
    values = list(values)
    if not values:
        raise ValueError("Cannot compute an axis domain for an empty series")
    if padding is None:
        padding = settings.domain_padding

    raw_min = math.floor(min(values))
    raw_max = math.ceil(max(values))
    pad = (raw_max - raw_min) * padding
    return AxisDomain(raw_min - pad, raw_max + pad)
