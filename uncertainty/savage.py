# -*- coding: utf-8 -*-
"""
Savage (Minimax Regret) Criterion

Scores each alternative by its worst regret across states; the best
alternative minimises that regret.

Mathematical Formula:
    M_j = max(0, max_a U(a, j))        [best utility in state j]
    r(a, j) = M_j - U(a, j)            [regret]
    S(a) = max_j r(a, j)               [lower is better]

The running maximum of each state starts at 0, so negative utilities
never register as a state best.
"""

import numpy as np
import pandas as pd

from .base import Criterion, CriterionScores, UtilityMatrix, scores_from_array


class SavageCalculator:
    """
    Minimax regret (Savage, 1951).

    Examples
    --------
    >>> m = UtilityMatrix(['A', 'B'], [[10, 2], [6, 6]], max_score=10)
    >>> SavageCalculator().calculate(m).scores
    {'A': 4.0, 'B': 4.0}
    """

    criterion = Criterion.SAVAGE

    def calculate(self, matrix: UtilityMatrix) -> CriterionScores:
        """
        Parameters
        ----------
        matrix : UtilityMatrix
            Alternatives × states utilities.

        Returns
        -------
        CriterionScores
            Max regret per alternative, with ``state_maxima`` and
            ``regret_matrix`` in details.
        """
        U = matrix.values
        state_max = np.maximum(U.max(axis=0), 0.0)
        regret = state_max[None, :] - U
        max_regret = np.maximum(regret.max(axis=1), 0.0)

        return scores_from_array(
            matrix, max_regret, self.criterion,
            state_maxima=dict(zip(matrix.states, state_max.tolist())),
            regret_matrix=pd.DataFrame(regret, index=matrix.alternatives,
                                       columns=matrix.states),
        )
