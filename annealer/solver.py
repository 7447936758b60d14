from __future__ import annotations

"""Single annealing run with geometric cooling and reheats."""

import math
from typing import Any, NamedTuple

import numpy as np

from .constants import BEST_EPSILON
from .options import AnnealingOptions
from .problem import resolve_hooks
from .progress import ProgressLog


class RunResult(NamedTuple):
    """Best score found by a run and the state achieving it."""

    score: float
    state: Any


def cooling_rate(t_max: float, t_min: float, steps: int) -> float:
    """Return the factor that takes ``t_max`` to ``t_min`` in ``steps`` multiplications.

    Raises ``ValueError`` unless ``0 < t_min < t_max`` and both are finite;
    any other pair gives a factor of at least one (the schedule would never
    reach ``t_min``) or no factor at all.
    """
    if not (math.isfinite(t_max) and math.isfinite(t_min)):
        raise ValueError(f"temperatures must be finite (t_max={t_max}, t_min={t_min})")
    if not 0 < t_min < t_max:
        raise ValueError(
            f"start temperature {t_max} must be greater than limit_temp {t_min} > 0"
        )
    return math.exp(math.log(t_min / t_max) / steps)


def run_annealing(
    problem: Any,
    options: AnnealingOptions,
    seed: int,
    thread_id: int | None = None,
) -> RunResult:
    """Anneal ``problem`` once from a fresh initial state.

    The temperature starts at ``problem.start_temp(initial score)`` and is
    multiplied by :func:`cooling_rate` after every proposal.  Once it drops
    below ``options.limit_temp`` the run is reheated to the start temperature
    without resetting the state, until ``options.restart`` cooling passes have
    been made or the problem's ``is_done`` hook fires.
    """
    rng = np.random.default_rng(seed)
    hooks = resolve_hooks(problem)
    progress = ProgressLog(thread_id, silent=options.silent)

    state = problem.init_state(rng)
    cur_score = float(problem.eval(state))
    best_score = cur_score
    best_state = hooks.clone_state(state)

    progress.info("Initial score: %s", cur_score)

    t_max = float(problem.start_temp(cur_score))
    t_min = float(options.limit_temp)
    decay = cooling_rate(t_max, t_min, options.steps)

    progress.info("Temperature decay: %s", decay)

    restart_cnt = 0
    temp = t_max
    while True:
        if temp < t_min:
            restart_cnt += 1
            if restart_cnt >= options.restart:
                break
            progress.info("Restarting... %d/%d", restart_cnt, options.restart)
            temp = t_max

        move = problem.neighbour(state, rng)
        new_score = float(hooks.apply_and_eval(state, move, cur_score))

        # the uniform draw is only spent on uphill moves
        if new_score <= cur_score or rng.random() <= math.exp((cur_score - new_score) / temp):
            cur_score = new_score
            if cur_score < best_score:
                if best_score - cur_score > BEST_EPSILON:
                    progress.info("Best: score = %.3f, temp = %.9f", cur_score, temp)
                best_score = cur_score
                best_state = hooks.clone_state(state)
            if hooks.is_done(cur_score):
                break
        else:
            problem.unapply(state, move)

        temp *= decay

    return RunResult(best_score, best_state)


__all__ = ["RunResult", "cooling_rate", "run_annealing"]
