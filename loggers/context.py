# -*- coding: utf-8 -*-
"""
Phase Tracking and Terminal Styling for decision-kit Logging
============================================================

The console prints one phase at a time ("Input Collection", "Dominance
Analysis", ...).  The name of the running phase is kept per thread so
that diagnostic records emitted deep inside the core can be tagged with
it, and each phase's timing and outcome is recorded in a
:class:`PhaseMetrics`.
"""

import logging
import os
import sys
import threading
import time
from dataclasses import dataclass
from typing import List, Optional


class Colors:
    """ANSI escape sequences used by the console."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"

    BRIGHT_GREEN = "\033[92m"
    BRIGHT_WHITE = "\033[97m"

    @staticmethod
    def style(text: str, *codes: str) -> str:
        return ''.join(codes) + text + Colors.RESET if codes else text

    @staticmethod
    def supports_color(stream=None) -> bool:
        """Colour only on a terminal; ``NO_COLOR`` and ``FORCE_COLOR`` override."""
        if os.getenv("NO_COLOR"):
            return False
        if os.getenv("FORCE_COLOR"):
            return True
        isatty = getattr(stream or sys.stdout, "isatty", None)
        return bool(isatty and isatty())


class LogContext:
    """Per-thread stack of the console phases currently running."""

    _local = threading.local()

    @classmethod
    def _stack(cls) -> List[str]:
        if not hasattr(cls._local, 'phases'):
            cls._local.phases = []
        return cls._local.phases

    @classmethod
    def push_phase(cls, name: str) -> None:
        cls._stack().append(name)

    @classmethod
    def pop_phase(cls) -> Optional[str]:
        stack = cls._stack()
        return stack.pop() if stack else None

    @classmethod
    def current_phase(cls) -> Optional[str]:
        stack = cls._stack()
        return stack[-1] if stack else None


class PhaseFilter(logging.Filter):
    """Expose the running phase to formatters as ``%(phase)s``."""

    def filter(self, record: logging.LogRecord) -> bool:
        phase = LogContext.current_phase()
        record.phase = f'[{phase}] ' if phase else ''
        return True


@dataclass
class PhaseMetrics:
    """Timing and outcome of one console phase.

    ``status`` moves from ``"running"`` to ``"completed"`` or ``"failed"``.
    """

    name: str
    number: int
    total: int
    start_time: float
    end_time: Optional[float] = None
    status: str = "running"

    @property
    def label(self) -> str:
        return f'[{self.number}/{self.total}] {self.name}'

    @property
    def elapsed(self) -> float:
        end = self.end_time if self.end_time is not None else time.time()
        return end - self.start_time

    def finish(self, ok: bool) -> None:
        self.end_time = time.time()
        self.status = 'completed' if ok else 'failed'


__all__ = [
    'Colors',
    'LogContext',
    'PhaseFilter',
    'PhaseMetrics',
]
