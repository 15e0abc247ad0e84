"""CLI with subcommands.  Works locally without Prefect; pass --orchestrate
to route execution through Prefect flows (requires heightweight[orchestration]).

Subcommands:
  generate   Draw a sample and print it as a table
  fit        Fit the regression line and print the results panel
  domains    Print the padded height and weight axis ranges
  run-all    All of the above for one sample (default)
"""

from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

from heightweight.config import settings
from heightweight.domains import AxisDomain
from heightweight.formatting import format_domain, results_panel
from heightweight.generator import to_frame
from heightweight.model import DegenerateInputError, RegressionResult
from heightweight.services.chart import ChartState, build_chart

logger = logging.getLogger(__name__)

COMMANDS = ("generate", "fit", "domains", "run-all")


def _build_parser() -> argparse.ArgumentParser:
    # Shared flags available to every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true")

    p = argparse.ArgumentParser(description="heightweight CLI", parents=[common])
    sub = p.add_subparsers(dest="command")

    for name in COMMANDS:
        sp = sub.add_parser(name, parents=[common])
        sp.add_argument(
            "-n", "--count", type=int, default=settings.sample_count,
            help="Number of observations to generate",
        )
        sp.add_argument(
            "--seed", type=int, default=settings.random_seed,
            help="Seed for a reproducible sample",
        )
        sp.add_argument(
            "--orchestrate", action="store_true",
            help="Route through Prefect flows (requires heightweight[orchestration])",
        )
    return p


# ---- local execution (no Prefect) ----

def _print_samples(state: ChartState) -> None:
    print(to_frame(state.samples).to_string(float_format="{:.2f}".format))


def _print_regression(state: ChartState) -> None:
    if not state.fitted:
        print(f"Not enough data to fit a line ({len(state.samples)} sample(s))")
        return
    print("\n".join(results_panel(state.regression)))


def _print_domains(state: ChartState) -> None:
    print(format_domain("Height", state.domain_x))
    print(format_domain("Weight", state.domain_y))


def _state_from_flow(result: dict) -> ChartState:
    """Rebuild a chart state from the pieces a Prefect flow returned."""
    state = ChartState(samples=list(result["samples"]))
    if result.get("regression"):
        state.regression = RegressionResult(**result["regression"])
        state.fitted = True
    if result.get("domains"):
        state.domain_x = AxisDomain(*result["domains"]["x"])
        state.domain_y = AxisDomain(*result["domains"]["y"])
    return state


def _run_flow(cmd: str, count: int, seed: int | None) -> ChartState:
    from heightweight.pipelines import domains_flow, fit_flow, full_flow, generate_flow

    flows = {
        "generate": generate_flow,
        "fit": fit_flow,
        "domains": domains_flow,
        "run-all": full_flow,
    }
    return _state_from_flow(flows[cmd](count, seed))


def _run_all(state: ChartState) -> None:
    _print_samples(state)
    print()
    _print_regression(state)
    print()
    _print_domains(state)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    cmd = args.command or "run-all"
    count = getattr(args, "count", settings.sample_count)
    seed = getattr(args, "seed", settings.random_seed)
    if count < 0:
        parser.error("--count must be non-negative")
    if seed is not None and seed < 0:
        parser.error("--seed must be non-negative")

    try:
        if getattr(args, "orchestrate", False):
            state = _run_flow(cmd, count, seed)
        else:
            state = build_chart(count, np.random.default_rng(seed))
    except DegenerateInputError as exc:
        logger.error("Cannot fit regression: %s", exc)
        return 1

    runners = {
        "generate": _print_samples,
        "fit": _print_regression,
        "domains": _print_domains,
        "run-all": _run_all,
    }
    runners[cmd](state)
    return 0


if __name__ == "__main__":
    sys.exit(main())
