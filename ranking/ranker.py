# -*- coding: utf-8 -*-
"""Ordering of criterion scores into ranked results."""

import logging
import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, NamedTuple, Optional, Sequence

from loggers import log_execution
from uncertainty.base import Criterion, CriterionScores

logger = logging.getLogger('decision_kit')


class RankedEntry(NamedTuple):
    position: int
    alternative: str
    score: float


@dataclass
class RankedResult:
    """Result container for a ranking.

    Attributes
    ----------
    entries : List[RankedEntry]
        Entries in rank order, positions 1..N.
    ascending : bool
        True when lower scores rank first.
    criterion : Criterion, optional
        Criterion the scores came from, if any.
    """
    entries: List[RankedEntry]
    ascending: bool
    criterion: Optional[Criterion] = None

    @property
    def positions(self) -> Dict[str, int]:
        return {e.alternative: e.position for e in self.entries}

    @property
    def order(self) -> List[str]:
        return [e.alternative for e in self.entries]

    @property
    def best(self) -> Optional[str]:
        return self.entries[0].alternative if self.entries else None

    def as_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.entries, columns=['Rank', 'Alternative', 'Score'])

    def __iter__(self) -> Iterator[RankedEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def summary(self) -> str:
        """Generate summary string of the ranking."""
        title = self.criterion.title if self.criterion else 'Ranking'
        direction = 'ascending' if self.ascending else 'descending'
        lines = [f"{title} ({direction}):"]
        for e in self.entries:
            lines.append(f"  {e.position}. {e.alternative} ({e.score:.4f})")
        return "\n".join(lines)


class Ranker:
    """
    Stable ranking of alternative scores.

    Ties keep the order in which alternatives were declared, so the
    same input always produces the same ranking.
    """

    @staticmethod
    def sort_order(scores: np.ndarray, ascending: bool) -> np.ndarray:
        """Indices that stably sort *scores* best-first.

        Parameters
        ----------
        scores : np.ndarray
            Raw scores
        ascending : bool
            If True, lower scores come first

        Returns
        -------
        np.ndarray
            Positional indices into *scores*
        """
        keys = scores if ascending else -scores
        return np.argsort(keys, kind='stable')

    @log_execution(describe=lambda res: f'order {res.order}')
    def rank(self, scores: Mapping[str, float], ascending: bool,
             order: Optional[Sequence[str]] = None,
             criterion: Optional[Criterion] = None) -> RankedResult:
        """
        Rank alternatives by score.

        Parameters
        ----------
        scores : Mapping[str, float]
            Alternative → score.
        ascending : bool
            True when lower is better.
        order : Sequence[str], optional
            Declaration order used before sorting (default: mapping order).
        criterion : Criterion, optional
            Stored on the result for display.

        Returns
        -------
        RankedResult

        Raises
        ------
        ValueError
            If *order* does not list every scored alternative exactly once.
        """
        names = list(order) if order is not None else list(scores)
        if len(names) != len(scores) or set(names) != set(scores):
            raise ValueError(f"Ranking order {names} does not match the "
                             f"scored alternatives {list(scores)}")
        values = np.array([scores[n] for n in names], dtype=float)
        idx = self.sort_order(values, ascending)

        entries = [RankedEntry(pos, names[i], float(values[i]))
                   for pos, i in enumerate(idx, start=1)]
        return RankedResult(entries=entries, ascending=ascending,
                            criterion=criterion)

    def rank_criterion(self, result: CriterionScores,
                       order: Optional[Sequence[str]] = None) -> RankedResult:
        """Rank in the criterion's own direction."""
        ranked = self.rank(result.scores, result.criterion.ascending,
                           order=order, criterion=result.criterion)
        logger.debug(f"{result.criterion.title} ranking: {ranked.order}")
        return ranked

    def rank_all(self, results: Mapping[Criterion, CriterionScores],
                 order: Optional[Sequence[str]] = None) -> Dict[Criterion, RankedResult]:
        return {c: self.rank_criterion(r, order) for c, r in results.items()}
