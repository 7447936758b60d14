from __future__ import annotations

"""Independent parallel annealing runs reduced to the best result."""

import copy
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import numpy as np

from .constants import MAX_SEED
from .options import AnnealingOptions
from .problem import check_problem
from .solver import RunResult, run_annealing

logger = logging.getLogger("annealer.parallel")


def derive_seeds(seed: int, count: int) -> list[int]:
    """Return ``count`` unsigned 64-bit worker seeds derived from ``seed``.

    Worker ``i`` always receives the ``i``-th seed, so a run can be replayed
    on its own with ``run_annealing(problem, options, derive_seeds(seed, n)[i])``.
    """
    rng = np.random.default_rng(seed)
    draws = rng.integers(0, MAX_SEED, size=count, dtype=np.uint64, endpoint=True)
    return [int(s) for s in draws]


def _check_seed(seed: int) -> int:
    seed = int(seed)
    if not 0 <= seed <= MAX_SEED:
        raise ValueError(f"seed must be an unsigned 64-bit integer, got {seed}")
    return seed


def annealing(problem: Any, options: AnnealingOptions, seed: int) -> RunResult:
    """Anneal ``problem`` and return the best ``RunResult`` over all runs.

    With ``options.threads == 1`` a single run is made in the calling thread
    using ``seed`` directly.  Otherwise one worker thread per run anneals a
    private deep copy of ``problem`` with a seed from :func:`derive_seeds`.
    An exception in any worker is re-raised once the workers are joined.

    Among runs with exactly equal best scores the one with the lowest worker
    index is returned; callers should not rely on which of them wins.
    """
    if options.threads < 1:
        raise ValueError(f"threads must be at least 1, got {options.threads}")
    check_problem(problem)
    seed = _check_seed(seed)

    if options.threads == 1:
        return run_annealing(problem, options, seed)

    seeds = derive_seeds(seed, options.threads)
    logger.debug("Starting %d workers with seeds %s", options.threads, seeds)

    with ThreadPoolExecutor(
        max_workers=options.threads, thread_name_prefix="annealer"
    ) as executor:
        futures = [
            executor.submit(run_annealing, copy.deepcopy(problem), options, s, i)
            for i, s in enumerate(seeds)
        ]
        results = [f.result() for f in futures]

    best = min(results, key=lambda r: r.score)
    logger.debug(
        "Worker scores: %s; best %s",
        [r.score for r in results],
        best.score,
    )
    return best


__all__ = ["annealing", "derive_seeds"]
