from __future__ import annotations

"""Progress messages emitted by annealing runs."""

import logging
from typing import Any, MutableMapping

logger = logging.getLogger("annealer.solver")


class ProgressLog(logging.LoggerAdapter):
    """Logger adapter that tags messages with the worker index.

    Messages are dropped entirely when ``silent`` is set.  In multi-threaded
    runs every message is prefixed with ``[NN] `` so interleaved lines from
    different workers can be told apart.
    """

    def __init__(
        self,
        thread_id: int | None = None,
        *,
        silent: bool = False,
        base: logging.Logger | None = None,
    ) -> None:
        super().__init__(base or logger, {"thread_id": thread_id})
        self.thread_id = thread_id
        self.silent = silent

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        if self.thread_id is not None:
            msg = f"[{self.thread_id:02d}] {msg}"
        kwargs.setdefault("extra", {}).update(self.extra)
        return msg, kwargs

    def isEnabledFor(self, level: int) -> bool:
        if self.silent:
            return False
        return super().isEnabledFor(level)


__all__ = ["ProgressLog", "logger"]
