from __future__ import annotations

import copy
import logging
import re
import threading
from types import SimpleNamespace

import pytest

from annealer.constants import MAX_SEED
from annealer.options import AnnealingOptions
from annealer.parallel import annealing, derive_seeds
from annealer.problems import QuadraticWalk, TourProblem
from annealer.solver import run_annealing


class TouchCounter(QuadraticWalk):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.touched = 0
        self.threads: set[str] = set()

    def init_state(self, rng):
        self.touched += 1
        self.threads.add(threading.current_thread().name)
        return super().init_state(rng)


class Exploding(QuadraticWalk):
    def neighbour(self, state, rng):
        raise RuntimeError("boom")


def test_derive_seeds_is_deterministic() -> None:
    seeds = derive_seeds(42, 6)
    assert seeds == derive_seeds(42, 6)
    assert len(seeds) == 6
    assert len(set(seeds)) == 6
    assert all(0 <= s <= MAX_SEED for s in seeds)
    assert derive_seeds(42, 3) != derive_seeds(43, 3)


def test_single_thread_uses_seed_directly() -> None:
    problem = TourProblem.random(10, seed=1)
    opt = AnnealingOptions(steps=800, limit_temp=1e-4, silent=True)
    assert annealing(problem, opt, 99) == run_annealing(problem, opt, 99)


def test_single_thread_runs_in_caller_without_copy() -> None:
    problem = TouchCounter()
    opt = AnnealingOptions(steps=50, limit_temp=1e-3, silent=True)
    annealing(problem, opt, 0)
    assert problem.touched == 1
    assert problem.threads == {threading.current_thread().name}


def test_parallel_result_is_minimum_of_worker_results() -> None:
    problem = TourProblem.random(14, seed=2)
    opt = AnnealingOptions(steps=1500, limit_temp=1e-4, threads=4, silent=True)
    seed = 2024
    result = annealing(problem, opt, seed)

    single = opt.replace(threads=1)
    worker_scores = [
        run_annealing(copy.deepcopy(problem), single, s, i).score
        for i, s in enumerate(derive_seeds(seed, 4))
    ]
    assert result.score == min(worker_scores)
    assert result.score == pytest.approx(problem.eval(result.state))


def test_parallel_quadratic_not_worse_than_best_single_run() -> None:
    problem = QuadraticWalk()
    opt = AnnealingOptions(steps=1000, limit_temp=1e-3, threads=4, silent=True)
    seed = 5
    result = annealing(problem, opt, seed)
    singles = [
        run_annealing(problem, opt.replace(threads=1), s).score
        for s in derive_seeds(seed, 4)
    ]
    assert result.score <= min(singles)
    assert result.score < 1e-2


def test_parallel_runs_are_reproducible() -> None:
    problem = TourProblem.random(12, seed=8)
    opt = AnnealingOptions(steps=1000, limit_temp=1e-4, threads=3, silent=True)
    first = annealing(problem, opt, 7)
    second = annealing(problem, opt, 7)
    assert first.score == second.score
    assert first.state == second.state


def test_workers_get_private_problem_copies() -> None:
    problem = TouchCounter()
    opt = AnnealingOptions(steps=50, limit_temp=1e-3, threads=3, silent=True)
    annealing(problem, opt, 0)
    assert problem.touched == 0


def test_zero_threads_aborts_before_work() -> None:
    problem = TouchCounter()
    opt = SimpleNamespace(steps=10, limit_temp=1e-3, restart=1, threads=0, silent=True)
    with pytest.raises(ValueError, match="threads"):
        annealing(problem, opt, 0)  # type: ignore[arg-type]
    assert problem.touched == 0


def test_worker_failure_aborts_the_call() -> None:
    opt = AnnealingOptions(steps=50, limit_temp=1e-3, threads=3, silent=True)
    with pytest.raises(RuntimeError, match="boom"):
        annealing(Exploding(), opt, 0)


def test_invalid_seed_is_rejected() -> None:
    opt = AnnealingOptions(steps=10, silent=True)
    with pytest.raises(ValueError):
        annealing(QuadraticWalk(), opt, -1)
    with pytest.raises(ValueError):
        annealing(QuadraticWalk(), opt, MAX_SEED + 1)


def test_incomplete_problem_is_rejected() -> None:
    opt = AnnealingOptions(steps=10, silent=True)
    with pytest.raises(TypeError):
        annealing(object(), opt, 0)


def test_worker_messages_are_tagged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="annealer.solver")
    opt = AnnealingOptions(steps=100, limit_temp=1e-3, threads=3)
    annealing(QuadraticWalk(), opt, 1)
    messages = [r.getMessage() for r in caplog.records if r.name == "annealer.solver"]
    tags = {re.match(r"\[(\d\d)\] ", m).group(1) for m in messages}
    assert tags == {"00", "01", "02"}
    initial = [m for m in messages if "Initial score" in m]
    assert sorted(initial) == [f"[{i:02d}] Initial score: 9.0" for i in range(3)]
