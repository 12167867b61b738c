# -*- coding: utf-8 -*-
"""
Diagnostic Trail Helpers
========================

``log_execution`` wraps the core computations (dominance, Pareto
extraction, criteria evaluation, ranking) so each call leaves a DEBUG
record of what it was given and what it produced; ``timed_operation``
does the same for an arbitrary block such as interactive collection.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, Optional

LOGGER_NAME = 'decision_kit'


def _brief(value: Any, limit: int = 80) -> str:
    text = repr(value)
    return text if len(text) <= limit else text[:limit - 3] + '...'


def log_execution(
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
    describe: Optional[Callable[[Any], str]] = None,
) -> Callable:
    """Decorator logging the inputs, outcome and duration of a method.

    Parameters
    ----------
    logger : logging.Logger, optional
        Defaults to the ``decision_kit`` logger.
    level : int
        Level of the entry/exit records.
    describe : callable, optional
        Turns the return value into a short summary; by default the
        result type is logged.

    Input errors propagate unchanged and are logged at WARNING.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or logging.getLogger(LOGGER_NAME)
            name = func.__qualname__
            if log.isEnabledFor(level):
                shown = ', '.join(_brief(a) for a in args[1:])
                log.log(level, f'{name}({shown})')

            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except ValueError as exc:
                log.warning(f'{name} rejected its input: {exc}')
                raise
            ms = (time.perf_counter() - start) * 1000.0

            if log.isEnabledFor(level):
                outcome = describe(result) if describe else type(result).__name__
                log.log(level, f'{name} -> {outcome} in {ms:.2f} ms')
            return result

        return wrapper
    return decorator


@contextmanager
def timed_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.INFO,
) -> Generator[None, None, None]:
    """Log how long the enclosed block took, even when it raises."""
    start = time.perf_counter()
    try:
        yield
    finally:
        ms = (time.perf_counter() - start) * 1000.0
        logger.log(level, f'{operation} took {ms:.1f} ms')


__all__ = [
    'LOGGER_NAME',
    'log_execution',
    'timed_operation',
]
