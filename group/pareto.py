# -*- coding: utf-8 -*-
"""Pareto (non-dominated) set extraction."""

import logging
from typing import List, Optional, Sequence

from loggers import log_execution
from .dominance import DominanceRelation

logger = logging.getLogger('decision_kit')


class ParetoSetExtractor:
    """
    Non-dominated subset of a :class:`DominanceRelation`.

    An alternative *a* belongs to the Pareto set iff no *b* dominates it.
    The result is sorted alphabetically for presentation, independent of
    declaration order.
    """

    @log_execution(describe=lambda names: f'{len(names)} non-dominated')
    def extract(self, relation: DominanceRelation,
                alternatives: Optional[Sequence[str]] = None) -> List[str]:
        """
        Parameters
        ----------
        relation : DominanceRelation
            Output of :meth:`DominanceAnalyzer.analyze`.
        alternatives : Sequence[str], optional
            Candidates to test (default: every alternative in *relation*).

        Returns
        -------
        List[str]
            Lexicographically sorted non-dominated alternatives.
        """
        if alternatives is None:
            alternatives = relation.alternatives

        dominated_cols = relation.matrix.any(axis=0)
        position = {a: i for i, a in enumerate(relation.alternatives)}
        pareto = sorted(a for a in alternatives if not dominated_cols[position[a]])

        logger.debug(f"Pareto set: {len(pareto)} of {len(alternatives)} alternatives")
        return pareto
