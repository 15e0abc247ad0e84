"""API tests using FastAPI's TestClient; the app builds its chart at startup."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from heightweight.api import app
from heightweight.config import settings
from heightweight.generator import Observation
from heightweight.services import chart as chart_service
from heightweight.services.chart import THEME, ChartState


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_startup_generates_default_sample(client):
    body = client.get("/samples").json()
    assert len(body) == settings.sample_count
    assert set(body[0]) == {"height", "weight", "bmi", "group"}


def test_chart_payload(client):
    body = client.get("/chart").json()
    assert body["theme"] == THEME
    assert body["regression"]["equation"].startswith("Weight = ")
    assert len(body["regression_line"]) == 2
    assert body["regression_line"][0]["x"] == body["domains"]["x"]["min"]
    assert body["regression_line"][1]["x"] == body["domains"]["x"]["max"]


def test_refresh_with_seed_is_reproducible(client):
    first = client.post("/refresh", json={"count": 30, "seed": 11}).json()
    second = client.post("/refresh", json={"count": 30, "seed": 11}).json()
    assert len(first["samples"]) == 30
    assert first == second


def test_refresh_updates_regression_and_domains(client):
    chart = client.post("/refresh", json={"count": 40, "seed": 3}).json()
    assert client.get("/regression").json() == chart["regression"]
    assert client.get("/domains").json() == chart["domains"]
    assert chart["regression"]["n_samples"] == 40


def test_refresh_single_sample_keeps_previous_regression(client):
    before = client.post("/refresh", json={"count": 20, "seed": 5}).json()["regression"]
    after = client.post("/refresh", json={"count": 1, "seed": 6}).json()["regression"]
    assert after["slope"] == before["slope"]
    assert after["intercept"] == before["intercept"]
    assert after["n_samples"] == 1


def test_refresh_rejects_negative_count(client):
    assert client.post("/refresh", json={"count": -1}).status_code == 422


def test_refresh_degenerate_input_returns_422(client, monkeypatch):
    def _same_height(count, rng=None):
        return [Observation.from_measurements(170.0, 60.0 + i) for i in range(count)]

    monkeypatch.setattr(chart_service, "generate", _same_height)
    resp = client.post("/refresh", json={"count": 5})
    assert resp.status_code == 422
    assert "identical" in resp.json()["detail"]


def test_regression_404_before_first_fit(client):
    app.state.chart = ChartState()
    assert client.get("/regression").status_code == 404
    assert client.get("/domains").json() == {"x": {"min": 0.0, "max": 0.0}, "y": {"min": 0.0, "max": 0.0}}


def test_refresh_rejects_negative_seed(client):
    assert client.post("/refresh", json={"count": 10, "seed": -1}).status_code == 422


def test_refresh_swaps_in_a_new_chart(client):
    """Readers holding the old chart keep a consistent snapshot."""
    old = app.state.chart
    old_samples, old_regression = old.samples, old.regression

    client.post("/refresh", json={"count": 30, "seed": 2})

    assert app.state.chart is not old
    assert old.samples is old_samples and old.regression is old_regression
    assert len(app.state.chart.samples) == 30
