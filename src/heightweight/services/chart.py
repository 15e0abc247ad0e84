"""Chart service: turn a sample collection into everything the chart draws.

Replaces a render-triggered recomputation with an explicit pipeline::

    samples = generate(n)
    regression = fit(samples)
    domain_x, domain_y = domain_for(heights), domain_for(weights)

``ChartState`` keeps the latest values.  Derived values are recomputed
wholesale whenever the samples change, with two guards:

- an empty collection leaves both domains as they were
- fewer than two observations skip the fit, so the previous regression
  (``(0, 0)`` before the first successful fit) stays in place
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from heightweight.config import settings
from heightweight.domains import AxisDomain, domain_for
from heightweight.generator import Observation, RandomSource, generate, series
from heightweight.model import RegressionResult, fit

logger = logging.getLogger(__name__)

MIN_FIT_SAMPLES = 2

# Chart colours handed to the front end
THEME = {
    "primary": "#0066cc",
    "secondary": "#5ac8fa",
    "background": "#f5f5f5",
    "text": "#1c3f60",
    "grid": "#e0e0e0",
}


@dataclass
class ChartState:
    samples: list[Observation] = field(default_factory=list)
    regression: RegressionResult = field(default_factory=RegressionResult)
    domain_x: AxisDomain = field(default_factory=AxisDomain)
    domain_y: AxisDomain = field(default_factory=AxisDomain)
    fitted: bool = False

    def update(self, samples: Sequence[Observation]) -> None:
        """Replace the samples and recompute the derived values.

        Raises ``DegenerateInputError`` before touching any state.
        """
        samples = list(samples)
        domain_x, domain_y = self.domain_x, self.domain_y
        regression, fitted = self.regression, self.fitted

        if samples:
            heights, weights = series(samples)
            domain_x = domain_for(heights)
            domain_y = domain_for(weights)

        if len(samples) >= MIN_FIT_SAMPLES:
            regression = fit(samples)
            fitted = True
        else:
            logger.debug("Skipping fit: %d observation(s)", len(samples))

        self.samples = samples
        self.domain_x, self.domain_y = domain_x, domain_y
        self.regression, self.fitted = regression, fitted

    def refresh(self, count: int | None = None, rng: RandomSource | None = None) -> None:
        """Draw a new sample collection and recompute everything from it."""
        count = settings.sample_count if count is None else count
        self.update(generate(count, rng))
        logger.info("Refreshed chart with %d samples", len(self.samples))

    def refreshed(self, count: int | None = None, rng: RandomSource | None = None) -> ChartState:
        """Return a refreshed copy, leaving this state untouched.

        Readers holding the old state never see a half-updated one.
        """
        state = replace(self)
        state.refresh(count, rng)
        return state

    def regression_line(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """End points of the regression line across the full x-axis domain."""
        x0, x1 = self.domain_x
        return (x0, self.regression.predict(x0)), (x1, self.regression.predict(x1))


def build_chart(count: int | None = None, rng: RandomSource | None = None) -> ChartState:
    """Return a fresh chart state for ``count`` newly generated samples."""
    state = ChartState()
    state.refresh(count, rng)
    return state
