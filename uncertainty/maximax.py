# -*- coding: utf-8 -*-
"""
MaxiMax Criterion

Optimistic evaluation by best-case outcome:

    X(a) = max_j U(a, j)               [higher is better]
"""

from .base import Criterion, CriterionScores, UtilityMatrix, scores_from_array


class MaxiMaxCalculator:
    criterion = Criterion.MAXIMAX

    def calculate(self, matrix: UtilityMatrix) -> CriterionScores:
        return scores_from_array(matrix, matrix.values.max(axis=1), self.criterion)
