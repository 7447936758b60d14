from __future__ import annotations

"""Generic simulated annealing engine.

A caller describes its optimisation problem through the :class:`Annealer`
interface (initial state, start temperature, objective, reversible moves) and
hands it to :func:`annealing` together with :class:`AnnealingOptions` and a
seed.  The engine minimises the objective with a geometric cooling schedule
and Metropolis acceptance, optionally running several independent seeded
runs in parallel threads and returning the best one.
"""

from .options import AnnealingOptions  # noqa: F401
from .problem import Annealer, ProblemHooks, check_problem, resolve_hooks  # noqa: F401
from .progress import ProgressLog  # noqa: F401
from .solver import RunResult, cooling_rate, run_annealing  # noqa: F401
from .parallel import annealing, derive_seeds  # noqa: F401

__all__ = [
    "AnnealingOptions",
    "Annealer",
    "ProblemHooks",
    "check_problem",
    "resolve_hooks",
    "ProgressLog",
    "RunResult",
    "cooling_rate",
    "run_annealing",
    "annealing",
    "derive_seeds",
]
