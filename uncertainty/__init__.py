# -*- coding: utf-8 -*-
"""
Decision Making Under Uncertainty
=================================

Single-decision-maker criteria over an alternative × state utility matrix.

Criteria
--------
- SavageCalculator: minimax regret (lower is better)
- LaplaceCalculator: mean utility, states equally likely
- WaldCalculator: maximin, pessimistic
- MaxiMaxCalculator: best case, optimistic
- HurwiczCalculator: α-blend of best and worst case

Usage
-----
>>> from uncertainty import UtilityMatrix, CriteriaEngine, Criterion
>>> m = UtilityMatrix(['A', 'B'], [[10, 2], [6, 6]], max_score=10)
>>> CriteriaEngine(alpha=0.5).evaluate(m)[Criterion.MAXIMAX].best
'A'
"""

from .base import Criterion, CriterionScores, UtilityMatrix
from .savage import SavageCalculator
from .laplace import LaplaceCalculator
from .wald import WaldCalculator
from .maximax import MaxiMaxCalculator
from .hurwicz import HurwiczCalculator
from .engine import ALL_CRITERIA, CriteriaEngine, get_all_calculators

__all__ = [
    # Data
    'UtilityMatrix',
    'Criterion',
    'CriterionScores',

    # Calculators
    'SavageCalculator',
    'LaplaceCalculator',
    'WaldCalculator',
    'MaxiMaxCalculator',
    'HurwiczCalculator',

    # Engine
    'ALL_CRITERIA',
    'CriteriaEngine',
    'get_all_calculators',
]
