# -*- coding: utf-8 -*-
"""
Hurwicz Criterion

Blends the best and worst outcome of each alternative with an optimism
coefficient α:

    H(a) = α × max_j U(a, j) + (1 - α) × min_j U(a, j)

α = 0 reduces to Wald (maximin), α = 1 to MaxiMax.
"""

from errors import OutOfRangeCoefficientError
from .base import Criterion, CriterionScores, UtilityMatrix, scores_from_array


class HurwiczCalculator:
    """
    Optimism-weighted criterion (Hurwicz, 1951).

    Parameters
    ----------
    alpha : float
        Optimism coefficient in [0, 1], applied uniformly to all
        alternatives.

    Raises
    ------
    OutOfRangeCoefficientError
        If *alpha* lies outside [0, 1].
    """

    criterion = Criterion.HURWICZ

    def __init__(self, alpha: float):
        if not 0.0 <= alpha <= 1.0:
            raise OutOfRangeCoefficientError(alpha)
        self.alpha = float(alpha)

    def calculate(self, matrix: UtilityMatrix) -> CriterionScores:
        U = matrix.values
        blend = self.alpha * U.max(axis=1) + (1.0 - self.alpha) * U.min(axis=1)
        return scores_from_array(matrix, blend, self.criterion, alpha=self.alpha)
