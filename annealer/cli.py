from __future__ import annotations

"""Command line demo running the reference problems."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .constants import (
    DEFAULT_LIMIT_TEMP,
    DEFAULT_RESTART,
    DEFAULT_STEPS,
    DEFAULT_THREADS,
)
from .options import AnnealingOptions
from .parallel import annealing
from .problems import Point, QuadraticWalk, TourProblem


def _parse_cli(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="annealer",
        description="Run simulated annealing on a built-in example problem",
    )
    parser.add_argument("--steps", type=int, default=DEFAULT_STEPS, help="Temperature steps per cooling pass")
    parser.add_argument("--limit-temp", type=float, default=DEFAULT_LIMIT_TEMP, help="Terminal temperature")
    parser.add_argument("--restart", type=int, default=DEFAULT_RESTART, help="Cooling passes per run")
    parser.add_argument("--threads", type=int, default=DEFAULT_THREADS, help="Independent parallel runs")
    parser.add_argument("--seed", type=int, default=0, help="Top-level random seed")
    parser.add_argument("--silent", action="store_true", help="Suppress progress messages")
    parser.add_argument(
        "--log-level",
        choices=["WARNING", "INFO", "DEBUG"],
        default=None,
        help="Logging level for annealer (INFO unless --silent)",
    )
    parser.add_argument("--out", help="Write JSON result to file")

    sub = parser.add_subparsers(dest="problem", required=True)

    quad = sub.add_parser("quadratic", help="Minimise x**2 with fixed-size steps")
    quad.add_argument("--start", type=float, default=3.0)
    quad.add_argument("--step", type=float, default=0.1)
    quad.add_argument("--spread", type=float, default=0.0, help="Randomise the start within +/- spread")
    quad.add_argument("--temp", type=float, default=1.0, help="Start temperature")

    tour = sub.add_parser("tour", help="Shortest round trip through random cities")
    tour.add_argument("--cities", type=int, default=30)
    tour.add_argument("--city-seed", type=int, default=0, help="Seed for the city layout")
    tour.add_argument("--points", help="JSON file with a list of [x, y] pairs (overrides --cities)")
    tour.add_argument("--temp-factor", type=float, default=1.0)
    tour.add_argument("--target", type=float, default=None, help="Stop once a tour this short is found")

    return parser.parse_args(argv)


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(level=logging.WARNING)
    level = getattr(logging, level_name)
    pkg_logger = logging.getLogger("annealer")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    handler.setLevel(level)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)


def _build_problem(ns: argparse.Namespace) -> Any:
    if ns.problem == "quadratic":
        return QuadraticWalk(start=ns.start, step=ns.step, spread=ns.spread, temp=ns.temp)
    if ns.points:
        try:
            points = json.loads(Path(ns.points).read_text("utf-8"))
        except Exception as exc:
            sys.exit(f"Error reading --points: {exc}")
        return TourProblem(points, temp_factor=ns.temp_factor, target=ns.target)
    return TourProblem.random(
        ns.cities, ns.city_seed, temp_factor=ns.temp_factor, target=ns.target
    )


def _state_to_json(state: Any) -> Any:
    if isinstance(state, Point):
        return state.x
    return state


def main(argv: list[str] | None = None) -> int:
    ns = _parse_cli(argv)
    _configure_logging(ns.log_level or ("WARNING" if ns.silent else "INFO"))

    try:
        options = AnnealingOptions(
            steps=ns.steps,
            limit_temp=ns.limit_temp,
            restart=ns.restart,
            threads=ns.threads,
            silent=ns.silent,
        )
        problem = _build_problem(ns)
        result = annealing(problem, options, ns.seed)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    json_out = json.dumps({"score": result.score, "state": _state_to_json(result.state)})
    if ns.out:
        Path(ns.out).write_text(json_out, "utf-8")
        print(f"✔ Result JSON written to {ns.out}")
    else:
        print(json_out)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
