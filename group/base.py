# -*- coding: utf-8 -*-
"""
Rank Matrix

Multi-expert rank data for the group ranking pipeline.

Storage is a fixed 2-D integer array indexed by stable positions
(alternative row, expert column) plus name → index lookups, so every
iteration follows declaration order.

    R[i, k] = rank given by expert k to alternative i   (1 = best)

A value of 0 marks a cell that was never supplied.
"""

import numpy as np
import pandas as pd
from typing import Dict, List, Mapping, Sequence, Tuple

from errors import IncompleteMatrixError


def _index_of(names: Sequence[str], kind: str) -> Dict[str, int]:
    lookup: Dict[str, int] = {}
    for i, name in enumerate(names):
        if name in lookup:
            raise ValueError(f"Duplicate {kind} name: {name!r}")
        lookup[name] = i
    return lookup


class RankMatrix:
    """
    Ranks given by every expert to every alternative.

    Parameters
    ----------
    alternatives : Sequence[str]
        Alternative names in declaration order.
    experts : Sequence[str]
        Expert names in declaration order.
    ranks : array-like, shape (n_alternatives, n_experts)
        Whole-number ranks in [1, n_alternatives]; 0 marks a missing cell.
        Fractional values raise ValueError rather than being truncated.

    Notes
    -----
    Ranks are not required to form a permutation per expert: ties and
    duplicates are accepted as given.  The matrix is read-only once built.

    Examples
    --------
    >>> m = RankMatrix.from_mapping(
    ...     ['A', 'B', 'C'], ['E1', 'E2'],
    ...     {'E1': {'A': 1, 'B': 2, 'C': 3},
    ...      'E2': {'A': 1, 'B': 3, 'C': 2}})
    >>> m.rank('E2', 'C')
    2
    """

    def __init__(self, alternatives: Sequence[str], experts: Sequence[str],
                 ranks):
        self._alternatives = list(alternatives)
        self._experts = list(experts)
        self._alt_index = _index_of(self._alternatives, 'alternative')
        self._expert_index = _index_of(self._experts, 'expert')

        raw = np.array(ranks, dtype=float).reshape(
            len(self._alternatives), len(self._experts))
        if not np.array_equal(raw, np.round(raw)):
            raise ValueError("Ranks must be whole numbers")
        values = raw.astype(int)
        values.setflags(write=False)
        self._ranks = values

    @classmethod
    def from_mapping(cls, alternatives: Sequence[str], experts: Sequence[str],
                     rankings: Mapping[str, Mapping[str, int]]) -> 'RankMatrix':
        """Build from ``rankings[expert][alternative] = rank``.

        Cells absent from *rankings* are zero-filled; use
        :meth:`missing_cells` or :meth:`require_complete` to detect them.
        """
        alternatives = list(alternatives)
        experts = list(experts)
        values = np.zeros((len(alternatives), len(experts)), dtype=float)
        for k, expert in enumerate(experts):
            row = rankings.get(expert, {})
            for i, alt in enumerate(alternatives):
                values[i, k] = row.get(alt, 0)
        return cls(alternatives, experts, values)

    # ------------------------------------------------------------------
    # Shape & names
    # ------------------------------------------------------------------

    @property
    def alternatives(self) -> List[str]:
        return list(self._alternatives)

    @property
    def experts(self) -> List[str]:
        return list(self._experts)

    @property
    def n_alternatives(self) -> int:
        return len(self._alternatives)

    @property
    def n_experts(self) -> int:
        return len(self._experts)

    @property
    def values(self) -> np.ndarray:
        """Read-only (n_alternatives, n_experts) rank array."""
        return self._ranks

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def rank(self, expert: str, alternative: str) -> int:
        return int(self._ranks[self._alt_index[alternative],
                               self._expert_index[expert]])

    def expert_ranks(self, expert: str) -> Dict[str, int]:
        col = self._ranks[:, self._expert_index[expert]]
        return {alt: int(col[i]) for i, alt in enumerate(self._alternatives)}

    def alternative_ranks(self, alternative: str) -> Dict[str, int]:
        row = self._ranks[self._alt_index[alternative]]
        return {e: int(row[k]) for k, e in enumerate(self._experts)}

    def as_frame(self) -> pd.DataFrame:
        """Alternatives as rows, experts as columns."""
        return pd.DataFrame(self._ranks, index=self._alternatives,
                            columns=self._experts)

    # ------------------------------------------------------------------
    # Completeness
    # ------------------------------------------------------------------

    def missing_cells(self) -> List[Tuple[str, str]]:
        """(expert, alternative) pairs with no rank, expert-major order."""
        missing = []
        for k, expert in enumerate(self._experts):
            for i, alt in enumerate(self._alternatives):
                if self._ranks[i, k] == 0:
                    missing.append((expert, alt))
        return missing

    @property
    def is_complete(self) -> bool:
        return bool((self._ranks != 0).all())

    def require_complete(self) -> 'RankMatrix':
        missing = self.missing_cells()
        if missing:
            raise IncompleteMatrixError(missing)
        return self

    def __repr__(self) -> str:
        return (f"RankMatrix(alternatives={self.n_alternatives}, "
                f"experts={self.n_experts})")
