# -*- coding: utf-8 -*-
"""
Unit tests for the group ranking pipeline.

Covers:
  - RankMatrix — lookups, declaration order, completeness, immutability
  - DominanceAnalyzer — known scenario, antisymmetry, ties, missing cells
  - ParetoSetExtractor — alphabetical order, non-emptiness, incomparable sets
"""

import itertools

import numpy as np
import pytest

from errors import IncompleteMatrixError
from group import DominanceAnalyzer, ParetoSetExtractor, RankMatrix


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def abc_matrix():
    """3 alternatives × 2 experts: A is best for both experts."""
    return RankMatrix.from_mapping(
        ["A", "B", "C"], ["E1", "E2"],
        {"E1": {"A": 1, "B": 2, "C": 3},
         "E2": {"A": 1, "B": 3, "C": 2}},
    )


@pytest.fixture()
def random_matrix():
    """6 alternatives × 4 experts, each expert a random permutation."""
    rng = np.random.RandomState(7)
    ranks = np.column_stack([rng.permutation(6) + 1 for _ in range(4)])
    return RankMatrix(list("UVWXYZ"), ["E1", "E2", "E3", "E4"], ranks)


# ---------------------------------------------------------------------------
# TestRankMatrix
# ---------------------------------------------------------------------------

class TestRankMatrix:
    def test_lookup_by_expert_and_alternative(self, abc_matrix):
        assert abc_matrix.rank("E2", "B") == 3
        assert abc_matrix.rank("E1", "C") == 3

    def test_declaration_order_preserved(self):
        m = RankMatrix.from_mapping(["Zeta", "Alpha"], ["X"],
                                    {"X": {"Alpha": 1, "Zeta": 2}})
        assert m.alternatives == ["Zeta", "Alpha"]
        assert list(m.as_frame().index) == ["Zeta", "Alpha"]

    def test_expert_and_alternative_views(self, abc_matrix):
        assert abc_matrix.expert_ranks("E2") == {"A": 1, "B": 3, "C": 2}
        assert abc_matrix.alternative_ranks("C") == {"E1": 3, "E2": 2}

    def test_frame_shape(self, abc_matrix):
        df = abc_matrix.as_frame()
        assert df.shape == (3, 2)
        assert list(df.columns) == ["E1", "E2"]

    def test_complete_matrix(self, abc_matrix):
        assert abc_matrix.is_complete
        assert abc_matrix.missing_cells() == []
        assert abc_matrix.require_complete() is abc_matrix

    def test_missing_cells_zero_filled(self):
        m = RankMatrix.from_mapping(["A", "B"], ["E1", "E2"],
                                    {"E1": {"A": 1, "B": 2}, "E2": {"A": 2}})
        assert not m.is_complete
        assert m.rank("E2", "B") == 0
        assert m.missing_cells() == [("E2", "B")]

    def test_require_complete_raises(self):
        m = RankMatrix.from_mapping(["A", "B"], ["E1"], {"E1": {"A": 1}})
        with pytest.raises(IncompleteMatrixError) as info:
            m.require_complete()
        assert info.value.missing == [("E1", "B")]
        assert isinstance(info.value, ValueError)

    def test_duplicate_ranks_accepted(self):
        """Ranks need not form a permutation."""
        m = RankMatrix.from_mapping(["A", "B", "C"], ["E1"],
                                    {"E1": {"A": 1, "B": 1, "C": 1}})
        assert m.is_complete

    def test_fractional_ranks_rejected(self):
        with pytest.raises(ValueError, match="whole numbers"):
            RankMatrix(["A", "B"], ["E1"], [[1.9], [2]])
        with pytest.raises(ValueError, match="whole numbers"):
            RankMatrix.from_mapping(["A", "B"], ["E1"],
                                    {"E1": {"A": 1, "B": 2.5}})

    def test_whole_float_ranks_accepted(self):
        m = RankMatrix(["A", "B"], ["E1"], [[1.0], [2.0]])
        assert m.rank("E1", "B") == 2

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError):
            RankMatrix(["A", "A"], ["E1"], [[1], [2]])
        with pytest.raises(ValueError):
            RankMatrix(["A", "B"], ["E1", "E1"], [[1, 1], [2, 2]])

    def test_values_read_only(self, abc_matrix):
        with pytest.raises(ValueError):
            abc_matrix.values[0, 0] = 5

    def test_unknown_name_raises_key_error(self, abc_matrix):
        with pytest.raises(KeyError):
            abc_matrix.rank("E9", "A")


# ---------------------------------------------------------------------------
# TestDominanceAnalyzer
# ---------------------------------------------------------------------------

class TestDominanceAnalyzer:
    def test_known_scenario(self, abc_matrix):
        rel = DominanceAnalyzer().analyze(abc_matrix)
        assert rel.dominates("A", "B")
        assert rel.dominates("A", "C")
        assert not rel.dominates("B", "C")
        assert not rel.dominates("C", "B")
        assert not rel.dominates("B", "A")
        assert not rel.dominates("C", "A")

    def test_pairs_in_declaration_order(self, abc_matrix):
        rel = DominanceAnalyzer().analyze(abc_matrix)
        assert rel.pairs() == [("A", "B"), ("A", "C")]

    def test_dominated_and_dominated_by(self, abc_matrix):
        rel = DominanceAnalyzer().analyze(abc_matrix)
        assert rel.dominated("A") == ["B", "C"]
        assert rel.dominated_by("B") == ["A"]
        assert rel.dominated_by("A") == []

    def test_diagonal_false(self, random_matrix):
        rel = DominanceAnalyzer().analyze(random_matrix)
        assert not np.diag(rel.matrix).any()

    def test_self_comparison_rejected(self, abc_matrix):
        rel = DominanceAnalyzer().analyze(abc_matrix)
        with pytest.raises(ValueError):
            rel.dominates("A", "A")

    def test_antisymmetry(self, random_matrix):
        rel = DominanceAnalyzer().analyze(random_matrix)
        for a, b in itertools.permutations(random_matrix.alternatives, 2):
            assert not (rel.dominates(a, b) and rel.dominates(b, a))

    def test_full_tie_no_dominance(self):
        """Identical ranks from every expert → neither dominates."""
        m = RankMatrix.from_mapping(["A", "B"], ["E1", "E2"],
                                    {"E1": {"A": 1, "B": 1},
                                     "E2": {"A": 2, "B": 2}})
        rel = DominanceAnalyzer().analyze(m)
        assert not rel.dominates("A", "B")
        assert not rel.dominates("B", "A")

    def test_one_worse_expert_blocks_dominance(self):
        m = RankMatrix.from_mapping(["A", "B"], ["E1", "E2", "E3"],
                                    {"E1": {"A": 1, "B": 2},
                                     "E2": {"A": 1, "B": 2},
                                     "E3": {"A": 2, "B": 1}})
        rel = DominanceAnalyzer().analyze(m)
        assert not rel.dominates("A", "B")
        assert not rel.dominates("B", "A")

    def test_weak_dominance_with_tie(self):
        """Equal for one expert, strictly better for another → dominates."""
        m = RankMatrix.from_mapping(["A", "B"], ["E1", "E2"],
                                    {"E1": {"A": 1, "B": 1},
                                     "E2": {"A": 1, "B": 2}})
        rel = DominanceAnalyzer().analyze(m)
        assert rel.dominates("A", "B")

    def test_missing_cell_compares_as_zero(self):
        """Incomplete input is not rejected: the zero rank looks 'best'."""
        m = RankMatrix.from_mapping(["A", "B"], ["E1"],
                                    {"E1": {"B": 2}})
        rel = DominanceAnalyzer().analyze(m)
        assert rel.dominates("A", "B")

    def test_frame_matches_matrix(self, abc_matrix):
        df = DominanceAnalyzer().analyze(abc_matrix).as_frame()
        assert bool(df.loc["A", "C"])
        assert not bool(df.loc["C", "A"])


# ---------------------------------------------------------------------------
# TestParetoSetExtractor
# ---------------------------------------------------------------------------

class TestParetoSetExtractor:
    def test_known_scenario(self, abc_matrix):
        rel = DominanceAnalyzer().analyze(abc_matrix)
        assert ParetoSetExtractor().extract(rel) == ["A"]

    def test_sorted_alphabetically(self):
        """Declared Z, M, A; all incomparable → returned A, M, Z."""
        m = RankMatrix.from_mapping(
            ["Z", "M", "A"], ["E1", "E2"],
            {"E1": {"Z": 1, "M": 2, "A": 3},
             "E2": {"Z": 3, "M": 2, "A": 1}})
        rel = DominanceAnalyzer().analyze(m)
        assert ParetoSetExtractor().extract(rel) == ["A", "M", "Z"]

    def test_all_incomparable_returns_everything(self):
        m = RankMatrix(["P", "Q"], ["E1", "E2"], [[1, 2], [2, 1]])
        rel = DominanceAnalyzer().analyze(m)
        assert ParetoSetExtractor().extract(rel) == ["P", "Q"]

    def test_matches_empty_dominated_by(self, random_matrix):
        rel = DominanceAnalyzer().analyze(random_matrix)
        pareto = ParetoSetExtractor().extract(rel)
        expected = sorted(a for a in random_matrix.alternatives
                          if not rel.dominated_by(a))
        assert pareto == expected

    def test_non_empty(self, random_matrix):
        rel = DominanceAnalyzer().analyze(random_matrix)
        assert len(ParetoSetExtractor().extract(rel)) >= 1

    def test_single_alternative(self):
        m = RankMatrix(["Only"], ["E1"], [[1]])
        rel = DominanceAnalyzer().analyze(m)
        assert ParetoSetExtractor().extract(rel) == ["Only"]

    def test_candidate_subset(self, abc_matrix):
        rel = DominanceAnalyzer().analyze(abc_matrix)
        assert ParetoSetExtractor().extract(rel, ["C", "B"]) == []
