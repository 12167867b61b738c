# -*- coding: utf-8 -*-
"""
Interactive Input
=================

Prompting and validation loops that turn typed answers into the
matrices consumed by the group and uncertainty pipelines.

Usage::

    from interactive import InputReader, collect_rank_matrix
    matrix = collect_rank_matrix(InputReader())
"""

from .reader import InputReader
from .collectors import collect_alpha, collect_rank_matrix, collect_utility_matrix

__all__ = [
    'InputReader',
    'collect_rank_matrix',
    'collect_utility_matrix',
    'collect_alpha',
]
