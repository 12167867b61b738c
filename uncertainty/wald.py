# -*- coding: utf-8 -*-
"""
Wald (Maximin) Criterion

Pessimistic evaluation by worst-case outcome:

    W(a) = min_j U(a, j)               [higher is better]
"""

from .base import Criterion, CriterionScores, UtilityMatrix, scores_from_array


class WaldCalculator:
    """Maximin: pick the alternative whose worst case is best."""

    criterion = Criterion.WALD

    def calculate(self, matrix: UtilityMatrix) -> CriterionScores:
        return scores_from_array(matrix, matrix.values.min(axis=1), self.criterion)
