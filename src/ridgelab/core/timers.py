from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator, Optional

from .log import get_logger


class Timer:
    def __init__(self):
        self.reset()

    def reset(self):
        self._t0 = time.perf_counter()

    @property
    def elapsed(self) -> float:
        return time.perf_counter() - self._t0


@contextmanager
def timed(label: str, log: Optional[logging.Logger] = None) -> Iterator[Timer]:
    """Log `[timer] <label>: <seconds>s` at INFO when the block exits."""
    t = Timer()
    yield t
    (log or get_logger("ridgelab")).info("[timer] %s: %.3fs", label, t.elapsed)
