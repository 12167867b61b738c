# -*- coding: utf-8 -*-
"""
decision-kit Logging Package
============================

Two channels:
  * **ConsoleLogger** — user-facing banners, phases and result tables
  * stdlib ``logging.getLogger('decision_kit')`` — diagnostic trail of the
    core computations, written to stderr and tagged with the current phase

Usage::

    from loggers import setup_logging
    console = setup_logging(level='DEBUG')
"""

import logging
import sys
from typing import Optional, TextIO

from .context import Colors, LogContext, PhaseFilter, PhaseMetrics
from .console_logger import ConsoleLogger
from .decorators import LOGGER_NAME, log_execution, timed_operation

_LOG_FORMAT = '%(asctime)s %(levelname)-7s %(phase)s%(name)s: %(message)s'


def setup_logging(
    level: str = 'WARNING',
    use_color: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> ConsoleLogger:
    """Configure the stdlib logger and return the console logger.

    Parameters
    ----------
    level : str
        Level name for the ``decision_kit`` logger (``'DEBUG'``, ``'INFO'``, ...).
    use_color : bool, optional
        Force colour on/off for the console; ``None`` autodetects.
    stream : TextIO, optional
        Destination of diagnostic records (default ``sys.stderr``).

    Returns
    -------
    ConsoleLogger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False

    for handler in list(logger.handlers):
        if getattr(handler, '_decision_kit', False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler._decision_kit = True
    handler.addFilter(PhaseFilter())
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(handler)

    return ConsoleLogger(use_color=use_color)


__all__ = [
    # Primary API
    'setup_logging',
    'ConsoleLogger',

    # Context & metrics
    'Colors',
    'LogContext',
    'PhaseFilter',
    'PhaseMetrics',

    # Decorators & context managers
    'LOGGER_NAME',
    'log_execution',
    'timed_operation',
]
