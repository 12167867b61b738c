# -*- coding: utf-8 -*-
"""
decision-kit Pipeline Orchestrator
==================================

Two independent three-phase pipelines:

Group ranking
  Phase 1  Input Collection     (alternatives, experts, ranks)
  Phase 2  Dominance Analysis   (pairwise componentwise dominance)
  Phase 3  Pareto Set           (non-dominated alternatives)

Decision under uncertainty
  Phase 1  Input Collection     (utility matrix, optional α)
  Phase 2  Criteria Evaluation  (Savage, Laplace, Wald, MaxiMax, Hurwicz)
  Phase 3  Ranking              (stable sort per criterion direction)
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from config import Config, get_config
from group import DominanceAnalyzer, DominanceRelation, ParetoSetExtractor, RankMatrix
from interactive import InputReader, collect_alpha, collect_rank_matrix, collect_utility_matrix
from loggers import ConsoleLogger, setup_logging, timed_operation
from output import ConsoleReport
from ranking import Ranker, RankedResult
from uncertainty import CriteriaEngine, Criterion, CriterionScores, UtilityMatrix

logger = logging.getLogger('decision_kit')


# =========================================================================
# Result containers
# =========================================================================

@dataclass
class GroupAnalysisResult:
    """Output of :class:`GroupRankingPipeline`."""
    rank_matrix: RankMatrix
    dominance: DominanceRelation
    pareto_set: List[str]


@dataclass
class UncertaintyAnalysisResult:
    """Output of :class:`UncertaintyPipeline`.

    Attributes
    ----------
    utility_matrix : UtilityMatrix
    alpha : float or None
        Hurwicz coefficient used (``None`` when Hurwicz was not run).
    scores : Dict[Criterion, CriterionScores]
    rankings : Dict[Criterion, RankedResult]
    """
    utility_matrix: UtilityMatrix
    alpha: Optional[float]
    scores: Dict[Criterion, CriterionScores]
    rankings: Dict[Criterion, RankedResult]

    def winners(self) -> Dict[Criterion, str]:
        return {c: r.best for c, r in self.rankings.items()}


# =========================================================================
# Shared base
# =========================================================================

class _BasePipeline:

    def __init__(self, config: Optional[Config] = None,
                 console: Optional[ConsoleLogger] = None):
        self.config = config or get_config()
        self.console = console or setup_logging(
            self.config.logging.level, use_color=self.config.display.use_color)
        self.report = ConsoleReport(self.console, self.config.display)

    def _reader(self, reader: Optional[InputReader]) -> InputReader:
        return reader or InputReader(max_retries=self.config.input.max_retries)


# =========================================================================
# Group ranking
# =========================================================================

class GroupRankingPipeline(_BasePipeline):
    """
    Multi-expert ranking → dominance relation → Pareto set.

    Parameters
    ----------
    config : Config, optional
        Defaults to the global config.
    console : ConsoleLogger, optional
        Defaults to one built by :func:`loggers.setup_logging`.
    """

    def run(self, rank_matrix: Optional[RankMatrix] = None,
            reader: Optional[InputReader] = None) -> GroupAnalysisResult:
        """Collect (unless *rank_matrix* is given), analyse and print."""
        self.console.banner('Group Ranking', subtitle='Pareto dominance analysis')

        with self.console.phase('Input Collection', total_phases=3) as ph:
            if rank_matrix is None:
                with timed_operation(logger, 'rank collection', logging.DEBUG):
                    rank_matrix = collect_rank_matrix(self._reader(reader))
            rank_matrix.require_complete()
            ph.metric('Alternatives', rank_matrix.n_alternatives)
            ph.metric('Experts', rank_matrix.n_experts)
        self.report.show_rank_matrix(rank_matrix)

        with self.console.phase('Dominance Analysis', total_phases=3) as ph:
            relation = DominanceAnalyzer().analyze(rank_matrix)
            ph.metric('Dominance pairs', len(relation.pairs()))
        self.report.show_dominance(relation)

        with self.console.phase('Pareto Set', total_phases=3) as ph:
            pareto = ParetoSetExtractor().extract(relation)
            ph.metric('Non-dominated', len(pareto))
        self.report.show_pareto_set(pareto)

        return GroupAnalysisResult(rank_matrix=rank_matrix, dominance=relation,
                                   pareto_set=pareto)


# =========================================================================
# Decision under uncertainty
# =========================================================================

class UncertaintyPipeline(_BasePipeline):
    """
    Utility matrix → criterion scores → per-criterion rankings.

    Criteria and an optional preset α come from
    :class:`config.UncertaintyConfig`; α is prompted for only when
    Hurwicz is selected and neither the config nor the caller supplies it.
    """

    def run(self, utility_matrix: Optional[UtilityMatrix] = None,
            alpha: Optional[float] = None,
            reader: Optional[InputReader] = None) -> UncertaintyAnalysisResult:
        ucfg = self.config.uncertainty
        criteria = list(ucfg.criteria)
        self.console.banner('Decision Under Uncertainty',
                            subtitle=', '.join(c.title for c in criteria))

        with self.console.phase('Input Collection', total_phases=3) as ph:
            if utility_matrix is None:
                reader = self._reader(reader)
                with timed_operation(logger, 'utility collection', logging.DEBUG):
                    utility_matrix = collect_utility_matrix(reader, self.config.input)
            ph.metric('Alternatives', utility_matrix.n_alternatives)
            ph.metric('States', utility_matrix.n_states)
        self.report.show_utility_matrix(utility_matrix)

        if alpha is None:
            alpha = ucfg.alpha
        if alpha is None and ucfg.needs_alpha:
            alpha = collect_alpha(self._reader(reader), self.config.input)
        if not ucfg.needs_alpha:
            alpha = None

        with self.console.phase('Criteria Evaluation', total_phases=3) as ph:
            scores = CriteriaEngine(alpha=alpha, criteria=criteria).evaluate(utility_matrix)
            if alpha is not None:
                ph.metric('Hurwicz alpha', float(alpha))
        if Criterion.SAVAGE in scores:
            self.report.show_regret_matrix(scores[Criterion.SAVAGE])

        with self.console.phase('Ranking', total_phases=3) as ph:
            rankings = Ranker().rank_all(scores, order=utility_matrix.alternatives)
            for criterion, ranked in rankings.items():
                ph.detail(f'{criterion.title}: {ranked.best}')
        for ranked in rankings.values():
            self.report.show_ranking(ranked)

        return UncertaintyAnalysisResult(utility_matrix=utility_matrix,
                                         alpha=alpha, scores=scores,
                                         rankings=rankings)


# =========================================================================
# Convenience functions
# =========================================================================

def run_group_pipeline(rank_matrix: Optional[RankMatrix] = None,
                       config: Optional[Config] = None) -> GroupAnalysisResult:
    """Run the group ranking pipeline. Returns GroupAnalysisResult."""
    return GroupRankingPipeline(config).run(rank_matrix)


def run_uncertainty_pipeline(utility_matrix: Optional[UtilityMatrix] = None,
                             alpha: Optional[float] = None,
                             config: Optional[Config] = None) -> UncertaintyAnalysisResult:
    """Run the uncertainty pipeline. Returns UncertaintyAnalysisResult."""
    return UncertaintyPipeline(config).run(utility_matrix, alpha)
