# -*- coding: utf-8 -*-
"""
Criteria Engine
===============

Runs any subset of the five uncertainty criteria over one
:class:`UtilityMatrix`.  Each :class:`Criterion` maps to a calculator
class; the sort direction lives on the enum itself
(:attr:`Criterion.ascending`).
"""

import logging
from typing import Dict, Optional, Sequence

from loggers import log_execution
from .base import Criterion, CriterionScores, UtilityMatrix
from .savage import SavageCalculator
from .laplace import LaplaceCalculator
from .wald import WaldCalculator
from .maximax import MaxiMaxCalculator
from .hurwicz import HurwiczCalculator

logger = logging.getLogger('decision_kit')

# Display and evaluation order
ALL_CRITERIA = (
    Criterion.SAVAGE,
    Criterion.LAPLACE,
    Criterion.WALD,
    Criterion.MAXIMAX,
    Criterion.HURWICZ,
)


def get_all_calculators() -> Dict[Criterion, type]:
    """
    Get dictionary of all criterion calculators.

    Returns
    -------
    Dict[Criterion, class]
        Calculator classes keyed by criterion.
    """
    return {
        Criterion.SAVAGE: SavageCalculator,
        Criterion.LAPLACE: LaplaceCalculator,
        Criterion.WALD: WaldCalculator,
        Criterion.MAXIMAX: MaxiMaxCalculator,
        Criterion.HURWICZ: HurwiczCalculator,
    }


class CriteriaEngine:
    """
    Evaluate decision criteria under uncertainty.

    Parameters
    ----------
    alpha : float, optional
        Hurwicz optimism coefficient; required only when Hurwicz is
        among *criteria*.
    criteria : Sequence[Criterion], optional
        Criteria to evaluate (default: all five, in :data:`ALL_CRITERIA`
        order).

    Raises
    ------
    ValueError
        If Hurwicz is requested without *alpha*.
    OutOfRangeCoefficientError
        If *alpha* lies outside [0, 1].

    Examples
    --------
    >>> engine = CriteriaEngine(alpha=0.5)
    >>> scores = engine.evaluate(matrix)
    >>> scores[Criterion.WALD].best
    'B'
    """

    def __init__(self, alpha: Optional[float] = None,
                 criteria: Optional[Sequence[Criterion]] = None):
        self.criteria = list(dict.fromkeys(criteria or ALL_CRITERIA))
        self.alpha = alpha

        classes = get_all_calculators()
        self._calculators = {}
        for criterion in self.criteria:
            if criterion is Criterion.HURWICZ:
                if alpha is None:
                    raise ValueError("Hurwicz criterion requires an alpha coefficient")
                self._calculators[criterion] = classes[criterion](alpha)
            else:
                self._calculators[criterion] = classes[criterion]()

    def score(self, matrix: UtilityMatrix, criterion: Criterion) -> CriterionScores:
        """Scores for a single configured criterion."""
        try:
            calc = self._calculators[criterion]
        except KeyError:
            raise ValueError(f"Criterion {criterion.value!r} is not configured") from None
        return calc.calculate(matrix)

    @log_execution(describe=lambda res: ', '.join(c.value for c in res))
    def evaluate(self, matrix: UtilityMatrix) -> Dict[Criterion, CriterionScores]:
        """
        Scores for every configured criterion.

        Returns
        -------
        Dict[Criterion, CriterionScores]
            Keyed in configured order.
        """
        results: Dict[Criterion, CriterionScores] = {}
        for criterion in self.criteria:
            result = self.score(matrix, criterion)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"{criterion.title}: best={result.best} "
                             f"scores={result.scores}")
            results[criterion] = result
        return results
