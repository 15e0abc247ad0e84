"""Optional Prefect flow definitions.

Only imported when the user passes --orchestrate to the CLI.
Requires: pip install heightweight[orchestration]
"""

from __future__ import annotations

import numpy as np
from prefect import flow, task

from heightweight.domains import domain_for
from heightweight.generator import Observation, generate, series
from heightweight.model import fit
from heightweight.services.chart import MIN_FIT_SAMPLES


@task
def generate_task(count: int, seed: int | None) -> list[Observation]:
    return generate(count, np.random.default_rng(seed))


@task
def fit_task(samples: list[Observation]) -> dict | None:
    if len(samples) < MIN_FIT_SAMPLES:
        return None
    result = fit(samples)
    return {"slope": result.slope, "intercept": result.intercept}


@task
def domains_task(samples: list[Observation]) -> dict | None:
    if not samples:
        return None
    heights, weights = series(samples)
    return {"x": tuple(domain_for(heights)), "y": tuple(domain_for(weights))}


# Every flow returns its samples so the CLI can print the same output
# whether or not it runs through Prefect.

@flow(name="heightweight-generate")
def generate_flow(count: int, seed: int | None = None) -> dict:
    return {"samples": generate_task(count, seed)}


@flow(name="heightweight-fit")
def fit_flow(count: int, seed: int | None = None) -> dict:
    samples = generate_task(count, seed)
    return {"samples": samples, "regression": fit_task(samples)}


@flow(name="heightweight-domains")
def domains_flow(count: int, seed: int | None = None) -> dict:
    samples = generate_task(count, seed)
    return {"samples": samples, "domains": domains_task(samples)}


@flow(name="heightweight-full")
def full_flow(count: int, seed: int | None = None) -> dict:
    samples = generate_task(count, seed)
    return {
        "samples": samples,
        "regression": fit_task(samples),
        "domains": domains_task(samples),
    }
