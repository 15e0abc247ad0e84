"""Shared test fixtures — deterministic random sources and known samples."""

from __future__ import annotations

import numpy as np
import pytest

from heightweight.generator import Observation
from heightweight.population import Population


class ScriptedSource:
    """Random source that replays a fixed list of uniform draws."""

    def __init__(self, draws):
        self._draws = iter(draws)

    def random(self) -> float:
        return next(self._draws)


# Two groups whose means are the target points; a u-draw of 0.0 gives u = 1,
# so the Box-Muller deviate is exactly 0 and each value equals its mean.
POINT_A = Population("a", height_mean=170.0, height_sd=5.0, weight_mean=70.0, weight_sd=5.0)
POINT_B = Population("b", height_mean=180.0, height_sd=5.0, weight_mean=90.0, weight_sd=5.0)

TWO_POINT_DRAWS = [
    0.9, 0.0, 0.25, 0.0, 0.25,  # > 0.5 picks POINT_A
    0.1, 0.0, 0.25, 0.0, 0.25,  # <= 0.5 picks POINT_B
]


@pytest.fixture()
def rng():
    """Seeded numpy generator."""
    return np.random.default_rng(42)


@pytest.fixture()
def scripted_source():
    """Factory for a random source replaying the given uniform draws."""
    return ScriptedSource


@pytest.fixture()
def two_point_source():
    return ScriptedSource(TWO_POINT_DRAWS)


@pytest.fixture()
def two_point_populations():
    """Groups whose means are the points (170, 70) and (180, 90)."""
    return POINT_A, POINT_B


@pytest.fixture()
def exact_line_samples():
    """Noise-free samples on weight = 2.0 * height + 1.5."""
    return [Observation.from_measurements(h, 2.0 * h + 1.5) for h in np.linspace(150, 200, 51)]


@pytest.fixture()
def noisy_line_samples():
    """100 points on weight = 0.9 * height + 3 with small Gaussian noise."""
    g = np.random.default_rng(7)
    heights = g.uniform(150, 200, size=100)
    weights = 0.9 * heights + 3 + g.normal(0, 0.5, size=100)
    return [Observation.from_measurements(float(h), float(w)) for h, w in zip(heights, weights)]
