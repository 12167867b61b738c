# -*- coding: utf-8 -*-
"""
Console Logger for decision-kit
===============================

Everything the user sees (banners, numbered phases, prompts' companion
tables, the final status line) goes through :class:`ConsoleLogger`, so
the group and uncertainty programs share one look.

A run prints as::

    ======================================================================
      Group Ranking
      Pareto dominance analysis
    ======================================================================

    >> [1/3] Input Collection
         Alternatives: 3
       OK    [1/3] Input Collection  (0.00s)
"""

from __future__ import annotations

import sys
import time
from contextlib import contextmanager
from typing import Any, Generator, List, Optional, Sequence, TextIO

from .context import Colors, LogContext, PhaseMetrics

_RULE = '=' * 70


class ConsoleLogger:
    """User-facing output for the interactive pipelines.

    Parameters
    ----------
    use_color : bool, optional
        ``None`` asks :meth:`Colors.supports_color` about the stream.
    stream : TextIO, optional
        Defaults to whatever ``sys.stdout`` is at write time.
    """

    def __init__(self, use_color: Optional[bool] = None,
                 stream: Optional[TextIO] = None):
        self._stream = stream
        self._color = (Colors.supports_color(self.stream)
                       if use_color is None else use_color)
        self._phases: List[PhaseMetrics] = []

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def phases(self) -> List[PhaseMetrics]:
        """Every phase started so far, in order."""
        return list(self._phases)

    def _emit(self, text: str, *codes: str) -> None:
        line = Colors.style(text, *codes) if self._color else text
        self.stream.write(line + '\n')
        self.stream.flush()

    # ------------------------------------------------------------------
    # Headings
    # ------------------------------------------------------------------

    def banner(self, title: str, subtitle: str = '') -> None:
        self._emit('')
        self._emit(_RULE, Colors.BOLD, Colors.BLUE)
        self._emit(f'  {title}', Colors.BOLD, Colors.BRIGHT_WHITE)
        if subtitle:
            self._emit(f'  {subtitle}', Colors.DIM)
        self._emit(_RULE, Colors.BOLD, Colors.BLUE)

    def section(self, title: str) -> None:
        self._emit('')
        self._emit(f'  {title}', Colors.BOLD)

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    @contextmanager
    def phase(self, name: str, number: Optional[int] = None,
              total_phases: int = 3) -> Generator[_PhaseCtx, None, None]:
        """Announce a numbered phase and report how it ended.

        The phase name tags diagnostic records while the block runs.
        Exceptions are reported as ``FAIL`` and re-raised.

        Example::

            with console.phase('Dominance Analysis') as p:
                relation = analyzer.analyze(matrix)
                p.metric('Dominance pairs', len(relation.pairs()))
        """
        metrics = PhaseMetrics(
            name=name,
            number=number if number is not None else len(self._phases) + 1,
            total=total_phases,
            start_time=time.time(),
        )
        self._phases.append(metrics)
        self._emit('')
        self._emit(f'>> {metrics.label}', Colors.BOLD, Colors.CYAN)

        LogContext.push_phase(name)
        try:
            yield _PhaseCtx(self)
        except Exception as exc:
            metrics.finish(ok=False)
            self._emit(f'   FAIL  {metrics.label}  ({metrics.elapsed:.2f}s): '
                       f'{type(exc).__name__}: {exc}', Colors.RED, Colors.BOLD)
            raise
        else:
            metrics.finish(ok=True)
            self._emit(f'   OK    {metrics.label}  ({metrics.elapsed:.2f}s)',
                       Colors.GREEN)
        finally:
            LogContext.pop_phase()

    # ------------------------------------------------------------------
    # Lines and tables
    # ------------------------------------------------------------------

    def step(self, message: str) -> None:
        self._emit(f'   . {message}', Colors.WHITE)

    def metric(self, label: str, value: Any) -> None:
        shown = f'{value:.4f}' if isinstance(value, float) else str(value)
        self._emit(f'     {label}: {shown}')

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[Any]],
              col_widths: Optional[Sequence[int]] = None, indent: int = 4,
              label_cols: Sequence[int] = (0,)) -> None:
        """Fixed-width table.

        Columns listed in *label_cols* hold names and are left-aligned;
        every other column holds values and is right-aligned.  Without
        *col_widths* each column is as wide as its longest cell plus two.
        """
        if col_widths is None:
            col_widths = [max(len(str(cell)) for cell in [h] + [r[j] for r in rows]) + 2
                          for j, h in enumerate(headers)]
        pad = ' ' * indent

        head = '  '.join(str(h).ljust(w) for h, w in zip(headers, col_widths))
        self._emit((pad + head).rstrip(), Colors.BOLD)
        self._emit(pad + '  '.join('-' * w for w in col_widths))
        for row in rows:
            cells = [str(c).ljust(w) if j in label_cols else str(c).rjust(w)
                     for j, (c, w) in enumerate(zip(row, col_widths))]
            self._emit((pad + '  '.join(cells)).rstrip())

    # ------------------------------------------------------------------
    # Status lines
    # ------------------------------------------------------------------

    def info(self, message: str) -> None:
        self._emit(f'  i {message}', Colors.GREEN)

    def success(self, message: str) -> None:
        self._emit(f'  OK {message}', Colors.BRIGHT_GREEN, Colors.BOLD)

    def warning(self, message: str) -> None:
        self._emit(f'  ! {message}', Colors.YELLOW)

    def error(self, message: str) -> None:
        self._emit(f'  X {message}', Colors.RED, Colors.BOLD)


class _PhaseCtx:
    """Handle yielded by :meth:`ConsoleLogger.phase`."""

    def __init__(self, console: ConsoleLogger):
        self._console = console

    def detail(self, message: str) -> None:
        self._console.step(message)

    def metric(self, label: str, value: Any) -> None:
        self._console.metric(label, value)


__all__ = ['ConsoleLogger']
