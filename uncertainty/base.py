# -*- coding: utf-8 -*-
"""Base types for decision making under uncertainty."""

import numpy as np
import pandas as pd
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Sequence

from errors import EmptyStateSetError


class Criterion(Enum):
    """Supported decision criteria under uncertainty."""
    SAVAGE = "savage"
    LAPLACE = "laplace"
    WALD = "wald"
    MAXIMAX = "maximax"
    HURWICZ = "hurwicz"

    @property
    def ascending(self) -> bool:
        """True when a lower score is better (regret)."""
        return self is Criterion.SAVAGE

    @property
    def title(self) -> str:
        return _TITLES[self]

    @property
    def value_label(self) -> str:
        return _VALUE_LABELS[self]

    @classmethod
    def parse(cls, name: str) -> 'Criterion':
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ', '.join(c.value for c in cls)
            raise ValueError(f"Unknown criterion: {name!r}. Choose from: {choices}") from None


_TITLES = {
    Criterion.SAVAGE: "Savage",
    Criterion.LAPLACE: "Laplace",
    Criterion.WALD: "Wald",
    Criterion.MAXIMAX: "MaxiMax",
    Criterion.HURWICZ: "Hurwicz",
}

_VALUE_LABELS = {
    Criterion.SAVAGE: "Max regret",
    Criterion.LAPLACE: "Mean utility",
    Criterion.WALD: "Min utility",
    Criterion.MAXIMAX: "Max utility",
    Criterion.HURWICZ: "Hurwicz score",
}


class UtilityMatrix:
    """
    Utility of every alternative under every state of nature.

    Parameters
    ----------
    alternatives : Sequence[str]
        Alternative names in declaration order (unique).
    values : array-like, shape (n_alternatives, n_states)
        Utility values, expected in [1, max_score].
    max_score : float
        Positive upper bound of the scoring scale.

    Raises
    ------
    EmptyStateSetError
        If the matrix has zero state columns.
    ValueError
        On no alternatives, duplicate names, shape mismatch or
        non-positive *max_score*.

    Notes
    -----
    The [1, max_score] range is enforced by whoever collects the values,
    not re-checked here.
    """

    def __init__(self, alternatives: Sequence[str], values, max_score: float):
        self._alternatives = list(alternatives)
        self._index: Dict[str, int] = {}
        for i, name in enumerate(self._alternatives):
            if name in self._index:
                raise ValueError(f"Duplicate alternative name: {name!r}")
            self._index[name] = i
        if not self._alternatives:
            raise ValueError("Utility matrix needs at least one alternative")

        arr = np.array(values, dtype=float)
        if arr.ndim == 1 and arr.size == 0:
            arr = arr.reshape(len(self._alternatives), 0)
        if arr.ndim != 2 or arr.shape[0] != len(self._alternatives):
            raise ValueError(
                f"Expected {len(self._alternatives)} rows of utilities, "
                f"got array of shape {arr.shape}")
        if arr.shape[1] < 1:
            raise EmptyStateSetError()
        if max_score <= 0:
            raise ValueError(f"max_score must be positive, got {max_score}")

        arr.setflags(write=False)
        self._values = arr
        self.max_score = max_score

    @classmethod
    def from_mapping(cls, outcomes: Mapping[str, Sequence[float]],
                     max_score: float) -> 'UtilityMatrix':
        """Build from ``{alternative: [u_1, ..., u_n]}`` (insertion order kept)."""
        lengths = {len(v) for v in outcomes.values()}
        if len(lengths) > 1:
            raise ValueError(f"Ragged utility rows: lengths {sorted(lengths)}")
        return cls(list(outcomes.keys()), [list(v) for v in outcomes.values()],
                   max_score)

    @property
    def alternatives(self) -> List[str]:
        return list(self._alternatives)

    @property
    def n_alternatives(self) -> int:
        return len(self._alternatives)

    @property
    def n_states(self) -> int:
        return self._values.shape[1]

    @property
    def states(self) -> List[str]:
        return [f"State {j + 1}" for j in range(self.n_states)]

    @property
    def values(self) -> np.ndarray:
        """Read-only (n_alternatives, n_states) utility array."""
        return self._values

    def utility(self, alternative: str, state: int) -> float:
        """Utility of *alternative* in the 0-based *state* column."""
        return float(self._values[self._index[alternative], state])

    def row(self, alternative: str) -> List[float]:
        return self._values[self._index[alternative]].tolist()

    def as_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self._values, index=self._alternatives,
                            columns=self.states)

    def __repr__(self) -> str:
        return (f"UtilityMatrix(alternatives={self.n_alternatives}, "
                f"states={self.n_states}, max_score={self.max_score})")


@dataclass
class CriterionScores:
    """
    Score per alternative for one criterion.

    Attributes
    ----------
    scores : Dict[str, float]
        Alternative → score, in declaration order.
    criterion : Criterion
        Criterion that produced the scores.
    details : Dict[str, Any]
        Criterion-specific intermediates (regret matrix, alpha, ...).
    """
    scores: Dict[str, float]
    criterion: Criterion
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def as_array(self) -> np.ndarray:
        return np.array(list(self.scores.values()), dtype=float)

    @property
    def as_series(self) -> pd.Series:
        return pd.Series(self.scores, name=self.criterion.value, dtype=float)

    @property
    def ascending(self) -> bool:
        return self.criterion.ascending

    @property
    def best(self) -> str:
        """Best alternative; first declared wins ties."""
        arr = self.as_array
        names = list(self.scores)
        idx = int(np.argmin(arr)) if self.ascending else int(np.argmax(arr))
        return names[idx]

    def __getitem__(self, alternative: str) -> float:
        return self.scores[alternative]

    def __len__(self) -> int:
        return len(self.scores)


def scores_from_array(matrix: UtilityMatrix, values: np.ndarray,
                      criterion: Criterion, **details: Any) -> CriterionScores:
    """Wrap a per-alternative array into :class:`CriterionScores`."""
    scores = {alt: float(values[i]) for i, alt in enumerate(matrix.alternatives)}
    return CriterionScores(scores=scores, criterion=criterion, details=details)
