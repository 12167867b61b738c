# -*- coding: utf-8 -*-
"""
Pairwise Dominance Analysis

Componentwise dominance over multi-expert ranks ("at least as good
everywhere, strictly better somewhere").

Mathematical Formula:
    D(i, j) = [∀k: R(i, k) ≤ R(j, k)] ∧ [∃k: R(i, k) < R(j, k)]

where:
    R(i, k) = rank given by expert k to alternative i  (lower is better)
    D(i, i) = False
"""

import logging
import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import List, Tuple

from loggers import log_execution
from .base import RankMatrix

logger = logging.getLogger('decision_kit')


@dataclass(frozen=True, eq=False)
class DominanceRelation:
    """
    Result container for dominance analysis.

    Attributes
    ----------
    alternatives : List[str]
        Alternative names in declaration order.
    matrix : np.ndarray
        Boolean (n × n) matrix, ``matrix[i, j]`` is True when alternative
        *i* dominates alternative *j*.  The diagonal is always False.
    """
    alternatives: List[str]
    matrix: np.ndarray

    def _pos(self, alternative: str) -> int:
        try:
            return self.alternatives.index(alternative)
        except ValueError:
            raise KeyError(alternative) from None

    def dominates(self, a1: str, a2: str) -> bool:
        """True when *a1* dominates *a2*."""
        if a1 == a2:
            raise ValueError("Dominance is only defined for distinct alternatives")
        return bool(self.matrix[self._pos(a1), self._pos(a2)])

    def dominated_by(self, alternative: str) -> List[str]:
        """Alternatives that dominate *alternative*."""
        col = self.matrix[:, self._pos(alternative)]
        return [a for a, flag in zip(self.alternatives, col) if flag]

    def dominated(self, alternative: str) -> List[str]:
        """Alternatives that *alternative* dominates."""
        row = self.matrix[self._pos(alternative)]
        return [a for a, flag in zip(self.alternatives, row) if flag]

    def pairs(self) -> List[Tuple[str, str]]:
        """All (dominant, dominated) pairs in declaration order."""
        rows, cols = np.nonzero(self.matrix)
        return [(self.alternatives[i], self.alternatives[j])
                for i, j in zip(rows, cols)]

    def as_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.matrix, index=self.alternatives,
                            columns=self.alternatives)


class DominanceAnalyzer:
    """
    Builds the pairwise dominance relation from a :class:`RankMatrix`.

    No validation is performed here: a matrix with missing (zero) cells is
    compared as given, so callers should run
    :meth:`RankMatrix.require_complete` first.

    Examples
    --------
    >>> relation = DominanceAnalyzer().analyze(matrix)
    >>> relation.dominates('A', 'B')
    True
    """

    @log_execution(describe=lambda rel: f'{len(rel.pairs())} dominance pair(s)')
    def analyze(self, matrix: RankMatrix) -> DominanceRelation:
        """
        Compute dominance for every ordered pair of distinct alternatives.

        Parameters
        ----------
        matrix : RankMatrix
            Complete rank data (alternatives × experts).

        Returns
        -------
        DominanceRelation
        """
        R = matrix.values                      # (n, m)
        left = R[:, None, :]                   # alternative i
        right = R[None, :, :]                  # alternative j

        not_worse = (left <= right).all(axis=2)
        better = (left < right).any(axis=2)
        dominance = not_worse & better
        np.fill_diagonal(dominance, False)
        dominance.setflags(write=False)

        logger.debug(
            f"Dominance over {matrix.n_alternatives} alternatives × "
            f"{matrix.n_experts} experts: {int(dominance.sum())} pair(s)"
        )
        return DominanceRelation(alternatives=matrix.alternatives,
                                 matrix=dominance)
