"""Sample generator: a 50/50 mixture of two Gaussian sub-populations.

Normal deviates come from the Box-Muller transform driven by an explicit
random source, so a seeded ``numpy.random.Generator`` (or any object with a
``random()`` method returning floats in [0, 1)) makes a run reproducible.

Draw order per observation: group choice, height ``u``, height ``v``,
weight ``u``, weight ``v``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Protocol

import numpy as np
import pandas as pd

from heightweight.config import settings
from heightweight.population import DEFAULT_POPULATIONS, Population

logger = logging.getLogger(__name__)

COLUMNS = ["height", "weight", "bmi", "group"]


class RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass(frozen=True)
class Observation:
    height: float
    weight: float
    bmi: float
    group: str = ""

    @classmethod
    def from_measurements(cls, height: float, weight: float, group: str = "") -> Observation:
        """Build an observation with its BMI derived from height and weight."""
        return cls(height=height, weight=weight, bmi=calculate_bmi(height, weight), group=group)


def calculate_bmi(height: float, weight: float) -> float:
    """BMI in kg/m² from height in cm and weight in kg."""
    return weight / (height / 100) ** 2


def normal_random(mean: float, std_dev: float, rng: RandomSource) -> float:
    """One normal deviate via Box-Muller (the paired sine deviate is dropped)."""
    # 1 - random() lies in (0, 1], so log(u) is always defined
    u = 1.0 - rng.random()
    v = rng.random()
    z = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
    return z * std_dev + mean


def default_rng() -> np.random.Generator:
    return np.random.default_rng(settings.random_seed)


def generate(
    count: int,
    rng: RandomSource | None = None,
    populations: tuple[Population, Population] = DEFAULT_POPULATIONS,
) -> list[Observation]:
    """Draw ``count`` observations, picking either population with equal odds."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = rng if rng is not None else default_rng()
    first, second = populations

    samples: list[Observation] = []
    for _ in range(count):
        group = first if rng.random() > 0.5 else second
        height = normal_random(group.height_mean, group.height_sd, rng)
        weight = normal_random(group.weight_mean, group.weight_sd, rng)
        samples.append(Observation.from_measurements(height, weight, group.name))

    logger.debug("Generated %d observations", len(samples))
    return samples


def to_frame(samples: list[Observation]) -> pd.DataFrame:
    """Tabulate a sample collection, one row per observation."""
    return pd.DataFrame([asdict(o) for o in samples], columns=COLUMNS)


def series(samples: list[Observation]) -> tuple[np.ndarray, np.ndarray]:
    """Return the (heights, weights) series as float arrays."""
    heights = np.fromiter((o.height for o in samples), dtype=float, count=len(samples))
    weights = np.fromiter((o.weight for o in samples), dtype=float, count=len(samples))
    return heights, weights
