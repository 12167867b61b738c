# -*- coding: utf-8 -*-
"""
Group Ranking Module

Multi-expert ranking with Pareto dominance analysis:

- RankMatrix: ranks per (expert, alternative), declaration order preserved
- DominanceAnalyzer: componentwise dominance relation over all pairs
- ParetoSetExtractor: alphabetically sorted non-dominated alternatives
"""

from .base import RankMatrix
from .dominance import DominanceAnalyzer, DominanceRelation
from .pareto import ParetoSetExtractor

__all__ = [
    'RankMatrix',
    'DominanceAnalyzer',
    'DominanceRelation',
    'ParetoSetExtractor',
]
