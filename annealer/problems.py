from __future__ import annotations

"""Reference problems used by the command line demo and the tests."""

from dataclasses import dataclass
from typing import Any, NamedTuple

import numpy as np

from .problem import Annealer


@dataclass
class Point:
    """Mutable one-dimensional position."""

    x: float


class Shift(NamedTuple):
    before: float
    after: float


@dataclass
class QuadraticWalk(Annealer):
    """Minimise ``x**2`` by stepping ``x`` left or right by ``step``.

    Moves remember the previous position so that ``unapply`` restores it
    exactly instead of subtracting the step again.
    """

    start: float = 3.0
    step: float = 0.1
    spread: float = 0.0
    temp: float = 1.0
    tolerance: float | None = None

    def init_state(self, rng: np.random.Generator) -> Point:
        if self.spread:
            return Point(self.start + float(rng.uniform(-self.spread, self.spread)))
        return Point(self.start)

    def start_temp(self, init_score: float) -> float:
        return self.temp

    def eval(self, state: Point) -> float:
        return state.x * state.x

    def neighbour(self, state: Point, rng: np.random.Generator) -> Shift:
        delta = self.step if rng.integers(2) else -self.step
        return Shift(state.x, state.x + delta)

    def apply(self, state: Point, move: Shift) -> None:
        state.x = move.after

    def unapply(self, state: Point, move: Shift) -> None:
        state.x = move.before

    def is_done(self, score: float) -> bool:
        return self.tolerance is not None and score <= self.tolerance


class TourProblem(Annealer):
    """Travelling salesman tour over 2-D points using segment reversals.

    A state is a list of city indices with city ``0`` kept in front.  A move
    ``(i, j)`` reverses ``tour[i:j + 1]``; reversing twice is the identity, so
    ``unapply`` is ``apply``.  ``apply_and_eval`` only looks at the two edges
    that change.
    """

    def __init__(
        self,
        points: Any,
        *,
        temp_factor: float = 1.0,
        target: float | None = None,
    ) -> None:
        pts = np.asarray(points, dtype=float)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError("points must be an (n, 2) array")
        if len(pts) < 4:
            raise ValueError("a tour needs at least 4 points")
        self.points = pts
        diff = pts[:, None, :] - pts[None, :, :]
        self.dist = np.sqrt((diff**2).sum(axis=-1))
        self.temp_factor = float(temp_factor)
        self.target = target

    @classmethod
    def random(cls, n: int, seed: int | None = None, **kwargs: Any) -> TourProblem:
        """Cities drawn uniformly from the unit square."""
        rng = np.random.default_rng(seed)
        return cls(rng.random((n, 2)), **kwargs)

    def __len__(self) -> int:
        return len(self.points)

    def init_state(self, rng: np.random.Generator) -> list[int]:
        rest = rng.permutation(np.arange(1, len(self))).tolist()
        return [0, *rest]

    def start_temp(self, init_score: float) -> float:
        # mean edge length of the initial tour
        return self.temp_factor * init_score / len(self)

    def eval(self, state: list[int]) -> float:
        d = self.dist
        return float(sum(d[state[k - 1], state[k]] for k in range(len(state))))

    def neighbour(self, state: list[int], rng: np.random.Generator) -> tuple[int, int]:
        n = len(state)
        i = int(rng.integers(1, n - 1))
        j = int(rng.integers(i + 1, n))
        return i, j

    def apply(self, state: list[int], move: tuple[int, int]) -> None:
        i, j = move
        state[i : j + 1] = state[i : j + 1][::-1]

    def unapply(self, state: list[int], move: tuple[int, int]) -> None:
        self.apply(state, move)

    def apply_and_eval(self, state: list[int], move: tuple[int, int], prev_score: float) -> float:
        i, j = move
        n = len(state)
        a, b = state[i - 1], state[i]
        c, e = state[j], state[(j + 1) % n]
        d = self.dist
        delta = d[a, c] + d[b, e] - d[a, b] - d[c, e]
        self.apply(state, move)
        return float(prev_score + delta)

    def clone_state(self, state: list[int]) -> list[int]:
        return list(state)

    def is_done(self, score: float) -> bool:
        return self.target is not None and score <= self.target


__all__ = ["Point", "Shift", "QuadraticWalk", "TourProblem"]
