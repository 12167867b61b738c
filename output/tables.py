# -*- coding: utf-8 -*-
"""
Table Row Builders
==================

Pure functions turning core results into ``(headers, rows)`` pairs of
strings.  :class:`output.ConsoleReport` prints them; tests inspect them
directly.
"""

from typing import List, Sequence, Tuple

from group.base import RankMatrix
from group.dominance import DominanceRelation
from ranking.ranker import RankedResult
from uncertainty.base import CriterionScores, UtilityMatrix

Table = Tuple[List[str], List[List[str]]]


def rank_matrix_rows(matrix: RankMatrix) -> Table:
    """Alternatives as rows, one rank column per expert."""
    headers = ['Alternative'] + matrix.experts
    values = matrix.values
    rows = [[alt] + [str(int(v)) for v in values[i]]
            for i, alt in enumerate(matrix.alternatives)]
    return headers, rows


def dominance_rows(relation: DominanceRelation) -> Table:
    """``1`` where the row alternative dominates the column one, ``-`` on the diagonal."""
    names = relation.alternatives
    headers = [''] + names
    rows = []
    for i, a1 in enumerate(names):
        cells = [a1]
        for j in range(len(names)):
            if i == j:
                cells.append('-')
            else:
                cells.append('1' if relation.matrix[i, j] else '0')
        rows.append(cells)
    return headers, rows


def pareto_rows(pareto_set: Sequence[str]) -> List[str]:
    return [f"{i}) {name}" for i, name in enumerate(pareto_set, start=1)]


def utility_matrix_rows(matrix: UtilityMatrix, precision: int = 2) -> Table:
    headers = ['Alternative'] + matrix.states
    rows = [[alt] + [f"{v:.{precision}f}" for v in matrix.values[i]]
            for i, alt in enumerate(matrix.alternatives)]
    return headers, rows


def regret_matrix_rows(scores: CriterionScores, precision: int = 2) -> Table:
    """Savage regret table with the per-alternative maximum as last column."""
    regret = scores.details['regret_matrix']
    headers = ['Alternative'] + list(regret.columns) + ['Max regret']
    rows = []
    for alt, row in regret.iterrows():
        rows.append([str(alt)] + [f"{v:.{precision}f}" for v in row.values]
                    + [f"{scores.scores[alt]:.{precision}f}"])
    return headers, rows


def ranking_rows(result: RankedResult, precision: int = 4) -> Table:
    label = result.criterion.value_label if result.criterion else 'Score'
    headers = ['Rank', 'Alternative', label]
    rows = [[str(e.position), e.alternative, f"{e.score:.{precision}f}"]
            for e in result.entries]
    return headers, rows
