"""Sub-population parameters for the synthetic sample.

Each sub-population is described by independent normal distributions for
height (cm) and weight (kg).  The defaults are rough UK adult figures:

- men:   height N(175, 7),  weight N(84, 13)
- women: height N(162, 6),  weight N(70, 12)

Height and weight are drawn independently within a group.  Any correlation
in the combined sample comes only from mixing the two groups.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Population:
    name: str
    height_mean: float
    height_sd: float
    weight_mean: float
    weight_sd: float

    def __post_init__(self) -> None:
        if self.height_sd <= 0 or self.weight_sd <= 0:
            raise ValueError(
                f"Standard deviations must be positive for population {self.name!r}"
            )


MALE = Population("male", height_mean=175.0, height_sd=7.0, weight_mean=84.0, weight_sd=13.0)
FEMALE = Population("female", height_mean=162.0, height_sd=6.0, weight_mean=70.0, weight_sd=12.0)

DEFAULT_POPULATIONS: tuple[Population, Population] = (MALE, FEMALE)
