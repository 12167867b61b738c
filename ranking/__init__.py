# -*- coding: utf-8 -*-
"""
Ranking
=======

Stable, direction-aware ordering of per-alternative scores.
"""

from .ranker import Ranker, RankedEntry, RankedResult

__all__ = [
    'Ranker',
    'RankedEntry',
    'RankedResult',
]
