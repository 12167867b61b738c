# -*- coding: utf-8 -*-
"""
Console Report
==============

Prints matrices and rankings as fixed-width tables through the
:class:`ConsoleLogger`, using the widths and precisions of
:class:`config.DisplayConfig`.
"""

from __future__ import annotations

from typing import Optional, Sequence

from config import DisplayConfig
from group.base import RankMatrix
from group.dominance import DominanceRelation
from loggers import ConsoleLogger
from ranking.ranker import RankedResult
from uncertainty.base import CriterionScores, UtilityMatrix

from . import tables


class ConsoleReport:
    """Render pipeline inputs and results to the console."""

    def __init__(self, console: ConsoleLogger,
                 display: Optional[DisplayConfig] = None):
        self.console = console
        self.display = display or DisplayConfig()

    def _widths(self, first: int, other: int, n_other: int) -> list:
        return [first] + [other] * n_other

    # ------------------------------------------------------------------
    # Group ranking
    # ------------------------------------------------------------------

    def show_rank_matrix(self, matrix: RankMatrix) -> None:
        headers, rows = tables.rank_matrix_rows(matrix)
        self.console.section('Ranking table (rows: alternatives, columns: experts)')
        self.console.table(headers, rows, self._widths(
            self.display.alternative_width,
            max([self.display.expert_width] + [len(e) for e in matrix.experts]),
            matrix.n_experts))

    def show_dominance(self, relation: DominanceRelation) -> None:
        headers, rows = tables.dominance_rows(relation)
        width = max([self.display.expert_width]
                    + [len(a) for a in relation.alternatives])
        self.console.section('Dominance matrix (1: row dominates column)')
        self.console.table(headers, rows, self._widths(
            self.display.alternative_width, width, len(relation.alternatives)))

    def show_pareto_set(self, pareto_set: Sequence[str]) -> None:
        self.console.section('Pareto-optimal alternatives')
        for line in tables.pareto_rows(pareto_set):
            self.console.step(line)

    # ------------------------------------------------------------------
    # Uncertainty
    # ------------------------------------------------------------------

    def show_utility_matrix(self, matrix: UtilityMatrix) -> None:
        headers, rows = tables.utility_matrix_rows(
            matrix, self.display.matrix_precision)
        self.console.section('Utility matrix (rows: alternatives, columns: states)')
        self.console.table(headers, rows, self._widths(
            self.display.alternative_width, self.display.state_width,
            matrix.n_states))

    def show_regret_matrix(self, scores: CriterionScores) -> None:
        headers, rows = tables.regret_matrix_rows(
            scores, self.display.matrix_precision)
        self.console.section('Regret matrix (Savage)')
        self.console.table(headers, rows, self._widths(
            self.display.alternative_width, self.display.state_width,
            len(headers) - 1))

    def show_ranking(self, result: RankedResult) -> None:
        headers, rows = tables.ranking_rows(result, self.display.result_precision)
        title = result.criterion.title if result.criterion else 'Ranking'
        self.console.section(f'Results by the {title} criterion')
        self.console.table(headers, rows, [
            self.display.rank_width,
            self.display.alternative_width,
            self.display.score_width,
        ], label_cols=(1,))
