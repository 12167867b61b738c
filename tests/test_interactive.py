# -*- coding: utf-8 -*-
"""
Unit tests for interactive input.

Covers:
  - InputReader retry loops (ints, ranges, floats, names)
  - max_retries and end-of-input behaviour
  - collectors building RankMatrix / UtilityMatrix / alpha from scripted answers
"""

import io

import pytest

from config import InputConfig
from interactive import (
    InputReader, collect_alpha, collect_rank_matrix, collect_utility_matrix,
)


def make_reader(*lines, max_retries=None):
    stdin = io.StringIO("".join(f"{line}\n" for line in lines))
    stdout = io.StringIO()
    return InputReader(stdin, stdout, max_retries=max_retries), stdout


class TestInputReader:
    def test_read_string_strips(self):
        reader, out = make_reader("  hello  ")
        assert reader.read_string("Say: ") == "hello"
        assert out.getvalue() == "Say: "

    def test_positive_int_retries(self):
        reader, out = make_reader("abc", "0", "-2", "3")
        assert reader.read_positive_int("N: ") == 3
        assert out.getvalue().count("Invalid number, please try again.") == 3

    def test_int_in_range_retries(self):
        reader, out = make_reader("5", "x", "2")
        assert reader.read_int_in_range("Rank: ", 1, 3) == 2
        assert "Enter a number from 1 to 3." in out.getvalue()

    def test_float_in_range(self):
        reader, out = make_reader("11", "nan", "0.5", "7.25")
        assert reader.read_float_in_range("U: ", 1, 10) == 7.25
        assert out.getvalue().count("Invalid value. Please try again.") == 3

    def test_float_bounds_inclusive(self):
        reader, _ = make_reader("0", "1")
        assert reader.read_float_in_range("a: ", 0, 1) == 0.0
        assert reader.read_float_in_range("a: ", 0, 1) == 1.0

    def test_names_unique_and_non_empty(self):
        reader, out = make_reader("A", "", "A", "B")
        assert reader.read_names(2, "Name {}: ") == ["A", "B"]
        text = out.getvalue()
        assert "Name must not be empty." in text
        assert "Name 'A' is already used." in text
        assert "Name 2: " in text

    def test_end_of_input_raises(self):
        reader, _ = make_reader()
        with pytest.raises(EOFError):
            reader.read_positive_int("N: ")

    def test_max_retries_exhausted(self):
        reader, _ = make_reader("x", "y", "z", max_retries=2)
        with pytest.raises(ValueError):
            reader.read_positive_int("N: ")


class TestCollectors:
    def test_collect_rank_matrix(self):
        reader, out = make_reader(
            "3", "A", "B", "C",     # alternatives
            "2", "E1", "E2",        # experts
            "1", "2", "3",          # E1
            "1", "4", "3", "2",     # E2 (4 rejected)
        )
        m = collect_rank_matrix(reader)
        assert m.alternatives == ["A", "B", "C"]
        assert m.experts == ["E1", "E2"]
        assert m.expert_ranks("E2") == {"A": 1, "B": 3, "C": 2}
        assert m.is_complete
        assert "--- Ranking by expert E2 ---" in out.getvalue()

    def test_collect_utility_matrix(self):
        reader, _ = make_reader(
            "2", "A", "B",          # alternatives
            "2",                    # states
            "10",                   # max score
            "10", "2",              # A
            "0", "6", "6",          # B (0 rejected: below min utility)
        )
        m = collect_utility_matrix(reader)
        assert m.row("A") == [10.0, 2.0]
        assert m.row("B") == [6.0, 6.0]
        assert m.max_score == 10

    def test_collect_utility_respects_min_utility(self):
        reader, _ = make_reader("1", "A", "1", "5", "0", "0")
        m = collect_utility_matrix(reader, InputConfig(min_utility=0.0))
        assert m.row("A") == [0.0]

    def test_collect_alpha(self):
        reader, out = make_reader("1.2", "0.3")
        assert collect_alpha(reader) == pytest.approx(0.3)
        assert "alpha (0 to 1)" in out.getvalue()
