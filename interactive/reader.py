# -*- coding: utf-8 -*-
"""
Prompting Input Reader
======================

Line-oriented prompts with validation/retry loops.  Every ``read_*``
method keeps asking until the answer is acceptable, so the matrices it
feeds to the core are always well-formed.
"""

import logging
import sys
from typing import Callable, List, Optional, TextIO, TypeVar

logger = logging.getLogger('decision_kit')

T = TypeVar('T')

MSG_INVALID_NUMBER = "Invalid number, please try again."
MSG_RANGE_INT = "Enter a number from {low} to {high}."
MSG_INVALID_VALUE = "Invalid value. Please try again."
MSG_EMPTY_NAME = "Name must not be empty."
MSG_DUPLICATE_NAME = "Name {name!r} is already used."


class InputReader:
    """
    Read and validate answers typed at a prompt.

    Parameters
    ----------
    stdin : TextIO, optional
        Source of answers (default ``sys.stdin``).
    stdout : TextIO, optional
        Destination of prompts and retry messages (default ``sys.stdout``).
    max_retries : int, optional
        Give up with :class:`ValueError` after this many rejected answers
        to one prompt; ``None`` retries forever.

    Raises
    ------
    EOFError
        When the input stream is exhausted.
    """

    def __init__(self, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None,
                 max_retries: Optional[int] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.max_retries = max_retries

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def read_string(self, prompt: str) -> str:
        self.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("Input ended before all values were entered")
        return line.strip()

    def _retry(self, prompt: str, parse: Callable[[str], Optional[T]],
               message: str) -> T:
        attempts = 0
        while True:
            raw = self.read_string(prompt)
            value = parse(raw)
            if value is not None:
                return value
            attempts += 1
            logger.debug(f"Rejected input {raw!r} for prompt {prompt.strip()!r}")
            if self.max_retries is not None and attempts >= self.max_retries:
                raise ValueError(f"No valid answer after {attempts} attempt(s): "
                                 f"{prompt.strip()}")
            self.write(message + "\n")

    def read_positive_int(self, prompt: str) -> int:
        def parse(raw):
            try:
                v = int(raw)
            except ValueError:
                return None
            return v if v > 0 else None
        return self._retry(prompt, parse, MSG_INVALID_NUMBER)

    def read_int_in_range(self, prompt: str, low: int, high: int) -> int:
        def parse(raw):
            try:
                v = int(raw)
            except ValueError:
                return None
            return v if low <= v <= high else None
        return self._retry(prompt, parse, MSG_RANGE_INT.format(low=low, high=high))

    def read_float_in_range(self, prompt: str, low: float, high: float) -> float:
        def parse(raw):
            try:
                v = float(raw)
            except ValueError:
                return None
            # NaN fails both comparisons
            return v if low <= v <= high else None
        return self._retry(prompt, parse, MSG_INVALID_VALUE)

    def read_names(self, count: int, template: str) -> List[str]:
        """Read *count* distinct, non-empty names.

        *template* is formatted with the 1-based position, e.g.
        ``"Enter the name of alternative {}: "``.
        """
        names: List[str] = []
        for i in range(count):
            prompt = template.format(i + 1)
            attempts = 0
            while True:
                raw = self.read_string(prompt)
                if raw and raw not in names:
                    names.append(raw)
                    break
                attempts += 1
                if self.max_retries is not None and attempts >= self.max_retries:
                    raise ValueError(f"No valid name after {attempts} attempt(s)")
                if raw:
                    self.write(MSG_DUPLICATE_NAME.format(name=raw) + "\n")
                else:
                    self.write(MSG_EMPTY_NAME + "\n")
        return names
