"""Display formatting shared by the CLI and the API.

Heights and weights are shown to 2 decimals with their units, BMI to 2
decimals without one, and regression coefficients to 4 decimals.
"""

from __future__ import annotations

from heightweight.domains import AxisDomain
from heightweight.generator import Observation
from heightweight.model import RegressionResult

RESULTS_HEADING = "Linear Regression Results:"


def format_height(value: float) -> str:
    return f"{value:.2f} cm"


def format_weight(value: float) -> str:
    return f"{value:.2f} kg"


def format_bmi(value: float) -> str:
    return f"{value:.2f}"


def format_coefficient(value: float) -> str:
    return f"{value:.4f}"


def equation(result: RegressionResult) -> str:
    return (
        f"Weight = {format_coefficient(result.slope)} * Height"
        f" + {format_coefficient(result.intercept)}"
    )


def tooltip_lines(obs: Observation) -> list[str]:
    """Rows shown when hovering a single data point."""
    return [
        f"Height: {format_height(obs.height)}",
        f"Weight: {format_weight(obs.weight)}",
        f"BMI: {format_bmi(obs.bmi)}",
    ]


def results_panel(result: RegressionResult) -> list[str]:
    return [
        RESULTS_HEADING,
        f"Slope (m): {format_coefficient(result.slope)}",
        f"Intercept (b): {format_coefficient(result.intercept)}",
        "Equation:",
        f"  {equation(result)}",
    ]


def format_domain(label: str, domain: AxisDomain) -> str:
    return f"{label}: [{domain.min:.2f}, {domain.max:.2f}]"
