from __future__ import annotations

"""Run parameters for the annealing engine."""

import math
from dataclasses import dataclass, fields, replace as _replace
from typing import Any, Mapping

from .constants import (
    DEFAULT_LIMIT_TEMP,
    DEFAULT_RESTART,
    DEFAULT_STEPS,
    DEFAULT_THREADS,
)


@dataclass(frozen=True)
class AnnealingOptions:
    """Immutable configuration shared by every run of one ``annealing`` call.

    ``steps`` is the number of temperature updates in one cooling pass,
    ``limit_temp`` the terminal temperature, ``restart`` the number of cooling
    passes before a run gives up (the first pass counts), ``threads`` the
    number of independent runs and ``silent`` turns progress messages off.
    """

    steps: int = DEFAULT_STEPS
    limit_temp: float = DEFAULT_LIMIT_TEMP
    restart: int = DEFAULT_RESTART
    threads: int = DEFAULT_THREADS
    silent: bool = False

    def __post_init__(self) -> None:
        if self.threads < 1:
            raise ValueError(f"threads must be at least 1, got {self.threads}")
        if self.steps < 1:
            raise ValueError(f"steps must be at least 1, got {self.steps}")
        if self.restart < 1:
            raise ValueError(f"restart must be at least 1, got {self.restart}")
        if not (math.isfinite(self.limit_temp) and self.limit_temp > 0):
            raise ValueError(
                f"limit_temp must be a positive finite number, got {self.limit_temp}"
            )

    @classmethod
    def from_dict(cls, d: Mapping[str, Any] | None) -> AnnealingOptions:
        """Build options from ``d``, ignoring keys that are not fields."""
        if not d:
            return cls()
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in names})

    def replace(self, **changes: Any) -> AnnealingOptions:
        return _replace(self, **changes)
