from __future__ import annotations

"""Problem interface for the annealing engine.

A problem describes its search space through six required methods.  The
engine never inspects states or moves; it only hands them back to the
problem.  Three further hooks are optional and looked up by name:

``apply_and_eval(state, move, prev_score)``
    Apply ``move`` and return the new score.  Override it with a delta
    computation when a full :meth:`Annealer.eval` is expensive.  The result
    must equal what ``apply`` followed by ``eval`` would produce.
``is_done(score)``
    Return ``True`` to stop a run early after an accepted move.
``clone_state(state)``
    Return an independent copy of ``state`` for the best-so-far snapshot.

Objects do not have to subclass :class:`Annealer`; anything providing the
required methods is accepted.
"""

import copy
from dataclasses import dataclass
from typing import Any, Callable

REQUIRED_METHODS = (
    "init_state",
    "start_temp",
    "eval",
    "neighbour",
    "apply",
    "unapply",
)


class Annealer:
    """Protocol for problems optimised by simulated annealing (minimisation)."""

    def init_state(self, rng: Any) -> Any:  # pragma: no cover - interface
        raise NotImplementedError

    def start_temp(self, init_score: float) -> float:  # pragma: no cover - interface
        raise NotImplementedError

    def eval(self, state: Any) -> float:  # pragma: no cover - interface
        raise NotImplementedError

    def neighbour(self, state: Any, rng: Any) -> Any:  # pragma: no cover - interface
        raise NotImplementedError

    def apply(self, state: Any, move: Any) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def unapply(self, state: Any, move: Any) -> None:  # pragma: no cover - interface
        raise NotImplementedError


@dataclass(frozen=True)
class ProblemHooks:
    """Optional hooks of one problem, bound to callables once per run."""

    apply_and_eval: Callable[[Any, Any, float], float]
    is_done: Callable[[float], bool]
    clone_state: Callable[[Any], Any]


def check_problem(problem: Any) -> None:
    """Raise ``TypeError`` when ``problem`` lacks a required method."""
    missing = [name for name in REQUIRED_METHODS if not callable(getattr(problem, name, None))]
    if missing:
        raise TypeError(
            f"{type(problem).__name__} does not implement: {', '.join(missing)}"
        )


def _never_done(score: float) -> bool:
    return False


def resolve_hooks(problem: Any) -> ProblemHooks:
    """Bind ``problem``'s optional hooks, falling back to the defaults."""

    hook = getattr(problem, "apply_and_eval", None)
    if callable(hook):
        apply_and_eval = hook
    else:
        apply_fn = problem.apply
        eval_fn = problem.eval

        def apply_and_eval(state: Any, move: Any, prev_score: float) -> float:
            apply_fn(state, move)
            return eval_fn(state)

    is_done = getattr(problem, "is_done", None)
    if not callable(is_done):
        is_done = _never_done

    clone_state = getattr(problem, "clone_state", None)
    if not callable(clone_state):
        clone_state = copy.deepcopy

    return ProblemHooks(
        apply_and_eval=apply_and_eval,
        is_done=is_done,
        clone_state=clone_state,
    )


__all__ = ["Annealer", "ProblemHooks", "REQUIRED_METHODS", "check_problem", "resolve_hooks"]
