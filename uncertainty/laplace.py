# -*- coding: utf-8 -*-
"""
Laplace Criterion

Every state is assumed equally likely, so the expected utility is the
plain row mean:

    L(a) = (1 / n) × Σ_j U(a, j)       [higher is better]
"""

from .base import Criterion, CriterionScores, UtilityMatrix, scores_from_array


class LaplaceCalculator:
    """Expected utility under equal state likelihood."""

    criterion = Criterion.LAPLACE

    def calculate(self, matrix: UtilityMatrix) -> CriterionScores:
        # UtilityMatrix guarantees n_states >= 1
        means = matrix.values.sum(axis=1) / matrix.n_states
        return scores_from_array(matrix, means, self.criterion,
                                 n_states=matrix.n_states)
