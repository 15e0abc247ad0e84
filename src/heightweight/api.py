"""FastAPI service exposing the chart data contract.

Endpoints:
  GET  /health      — liveness check
  GET  /samples     — current sample collection
  GET  /regression  — slope, intercept and equation of the fitted line
  GET  /domains     — padded x (height) and y (weight) axis ranges
  GET  /chart       — everything above plus the regression line and colours
  POST /refresh     — draw a new sample collection and recompute
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import asdict

import numpy as np
from fastapi import FastAPI, HTTPException, Request

from heightweight import __version__
from heightweight.formatting import equation
from heightweight.model import DegenerateInputError
from heightweight.schemas import (
    ChartOut,
    DomainOut,
    DomainsOut,
    ObservationOut,
    PointOut,
    RefreshRequest,
    RegressionOut,
)
from heightweight.services.chart import THEME, ChartState, build_chart


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The sample collection is generated once at startup
    app.state.chart = build_chart()
    yield


app = FastAPI(title="Height/Weight Regression API", version=__version__, lifespan=lifespan)


def _chart(request: Request) -> ChartState:
    return request.app.state.chart


def _regression_out(state: ChartState) -> RegressionOut:
    return RegressionOut(
        slope=state.regression.slope,
        intercept=state.regression.intercept,
        equation=equation(state.regression),
        n_samples=len(state.samples),
    )


def _domains_out(state: ChartState) -> DomainsOut:
    return DomainsOut(
        x=DomainOut(min=state.domain_x.min, max=state.domain_x.max),
        y=DomainOut(min=state.domain_y.min, max=state.domain_y.max),
    )


def _chart_out(state: ChartState) -> ChartOut:
    return ChartOut(
        samples=[ObservationOut(**asdict(o)) for o in state.samples],
        regression=_regression_out(state),
        domains=_domains_out(state),
        regression_line=[PointOut(x=x, y=y) for x, y in state.regression_line()],
        theme=THEME,
    )


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/samples", response_model=list[ObservationOut])
def samples(request: Request):
    """Return the current sample collection in insertion order."""
    return [asdict(o) for o in _chart(request).samples]


@app.get("/regression", response_model=RegressionOut)
def regression(request: Request):
    """Return the fitted regression line."""
    state = _chart(request)
    if not state.fitted:
        raise HTTPException(404, "No regression yet. Refresh with at least 2 samples.")
    return _regression_out(state)


@app.get("/domains", response_model=DomainsOut)
def domains(request: Request):
    return _domains_out(_chart(request))


@app.get("/chart", response_model=ChartOut)
def chart(request: Request):
    """Return the full payload a chart front end needs to render."""
    return _chart_out(_chart(request))


@app.post("/refresh", response_model=ChartOut)
def refresh(req: RefreshRequest, request: Request):
    """Draw a new sample collection and recompute the regression and domains."""
    rng = np.random.default_rng(req.seed) if req.seed is not None else None
    try:
        state = _chart(request).refreshed(req.count, rng)
    except DegenerateInputError as exc:
        raise HTTPException(422, str(exc)) from exc
    # Swapped in as a whole so concurrent readers see either the old or new chart
    request.app.state.chart = state
    return _chart_out(state)
