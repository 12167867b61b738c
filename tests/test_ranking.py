# -*- coding: utf-8 -*-
"""
Unit tests for the Ranker.

Covers:
  - positions form a permutation of 1..N
  - monotonic scores in the requested direction
  - stable tie-breaks by declaration order
  - criterion-aware ranking and RankedResult views
"""

import numpy as np
import pytest

from ranking import Ranker, RankedEntry, RankedResult
from uncertainty import CriteriaEngine, Criterion, UtilityMatrix


@pytest.fixture()
def scores():
    return {"A": 3.0, "B": 7.5, "C": 3.0, "D": 1.0}


class TestRanker:
    def test_descending(self, scores):
        res = Ranker().rank(scores, ascending=False)
        assert res.order == ["B", "A", "C", "D"]

    def test_ascending(self, scores):
        res = Ranker().rank(scores, ascending=True)
        assert res.order == ["D", "A", "C", "B"]

    @pytest.mark.parametrize("ascending", [True, False])
    def test_positions_are_permutation(self, scores, ascending):
        res = Ranker().rank(scores, ascending=ascending)
        assert [e.position for e in res] == [1, 2, 3, 4]
        assert sorted(res.positions) == sorted(scores)

    @pytest.mark.parametrize("ascending", [True, False])
    def test_monotonic_scores(self, ascending):
        rng = np.random.RandomState(11)
        data = {f"X{i}": float(v) for i, v in enumerate(rng.randint(0, 5, 20))}
        values = [e.score for e in Ranker().rank(data, ascending=ascending)]
        expected = sorted(values) if ascending else sorted(values, reverse=True)
        assert values == expected

    def test_ties_keep_declaration_order(self, scores):
        """A and C tie at 3.0; A was declared first in both directions."""
        for ascending in (True, False):
            order = Ranker().rank(scores, ascending=ascending).order
            assert order.index("A") < order.index("C")

    def test_explicit_order_overrides_mapping_order(self, scores):
        res = Ranker().rank(scores, ascending=False, order=["C", "B", "A", "D"])
        assert res.order == ["B", "C", "A", "D"]

    def test_entries_are_named_tuples(self, scores):
        first = Ranker().rank(scores, ascending=False).entries[0]
        assert isinstance(first, RankedEntry)
        assert first == (1, "B", 7.5)

    @pytest.mark.parametrize("order", [
        ["A", "B", "C"],            # D missing
        ["A", "B", "C", "D", "E"],  # E not scored
        ["A", "A", "B", "C", "D"],  # A twice
    ])
    def test_order_must_cover_every_alternative(self, scores, order):
        with pytest.raises(ValueError, match="does not match"):
            Ranker().rank(scores, ascending=True, order=order)

    def test_empty_mapping(self):
        res = Ranker().rank({}, ascending=True)
        assert len(res) == 0
        assert res.best is None


class TestCriterionRanking:
    @pytest.fixture()
    def results(self):
        m = UtilityMatrix(["A", "B"], [[10, 2], [6, 6]], max_score=10)
        return CriteriaEngine(alpha=0.5).evaluate(m)

    def test_direction_follows_criterion(self, results):
        ranked = Ranker().rank_all(results)
        assert ranked[Criterion.SAVAGE].ascending
        assert not ranked[Criterion.WALD].ascending

    def test_winners(self, results):
        ranked = Ranker().rank_all(results)
        assert ranked[Criterion.WALD].best == "B"
        assert ranked[Criterion.MAXIMAX].best == "A"
        # ties resolved by declaration order
        assert ranked[Criterion.SAVAGE].order == ["A", "B"]
        assert ranked[Criterion.LAPLACE].order == ["A", "B"]
        assert ranked[Criterion.HURWICZ].order == ["A", "B"]

    def test_frame_and_summary(self, results):
        ranked = Ranker().rank_criterion(results[Criterion.WALD])
        assert isinstance(ranked, RankedResult)
        df = ranked.as_frame()
        assert list(df.columns) == ["Rank", "Alternative", "Score"]
        assert df.iloc[0]["Alternative"] == "B"
        assert ranked.summary().startswith("Wald (descending):")
