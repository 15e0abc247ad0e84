"""Pydantic models for API request/response validation."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ObservationOut(BaseModel):
    height: float
    weight: float
    bmi: float
    group: str


class RegressionOut(BaseModel):
    slope: float
    intercept: float
    equation: str
    n_samples: int


class DomainOut(BaseModel):
    min: float
    max: float


class DomainsOut(BaseModel):
    x: DomainOut
    y: DomainOut


class PointOut(BaseModel):
    x: float
    y: float


class ChartOut(BaseModel):
    samples: list[ObservationOut]
    regression: RegressionOut
    domains: DomainsOut
    regression_line: list[PointOut]
    theme: dict[str, str]


class RefreshRequest(BaseModel):
    count: int | None = Field(default=None, ge=0, description="Number of samples to draw")
    seed: int | None = Field(default=None, ge=0, description="Seed for a reproducible sample")
