"""Closed-form simple linear regression: weight = slope * height + intercept.

Height is the independent variable, weight the dependent one.  The line is
the ordinary least-squares solution computed from running sums:

    slope     = (n*Σxy - Σx*Σy) / (n*Σxx - (Σx)²)
    intercept = (Σy - slope*Σx) / n

Two conditions make the solution undefined and are raised rather than
returned as non-finite numbers:

- fewer than two observations (``InsufficientDataError``)
- all heights identical, i.e. a zero denominator (``DegenerateInputError``)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np

from heightweight.generator import Observation, series

logger = logging.getLogger(__name__)


class InsufficientDataError(ValueError):
    """Raised when a fit is requested for fewer than two observations."""


class DegenerateInputError(ValueError):
    """Raised when every height is the same and the slope is undefined."""


@dataclass(frozen=True)
class RegressionResult:
    slope: float = 0.0
    intercept: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.slope, self.intercept))

    def predict(self, height: float) -> float:
        return self.slope * height + self.intercept


def fit(samples: Sequence[Observation]) -> RegressionResult:
    """Fit the least-squares line through (height, weight) pairs."""
    n = len(samples)
    if n < 2:
        raise InsufficientDataError(f"Need at least 2 observations to fit, got {n}")

    x, y = series(samples)
    if np.all(x == x[0]):
        raise DegenerateInputError("All heights are identical; slope is undefined")

    sum_x = float(x.sum())
    sum_y = float(y.sum())
    sum_xy = float((x * y).sum())
    sum_xx = float((x * x).sum())

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        raise DegenerateInputError("Zero variance in heights; slope is undefined")

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n

    logger.info("Fitted line: slope=%.4f intercept=%.4f (n=%d)", slope, intercept, n)
    return RegressionResult(slope=slope, intercept=intercept)
