# -*- coding: utf-8 -*-
"""
Interactive Matrix Collection
=============================

Builds the core input tables from answers typed at the prompt:

* ``collect_rank_matrix``    — alternatives, experts, rank per (expert, alternative)
* ``collect_utility_matrix`` — alternatives, states, max score, utility per cell
* ``collect_alpha``          — Hurwicz optimism coefficient
"""

import logging
from typing import Dict, Optional

from config import InputConfig
from group.base import RankMatrix
from uncertainty.base import UtilityMatrix
from .reader import InputReader

logger = logging.getLogger('decision_kit')

PROMPT_ALT_COUNT = "Enter the number of alternatives: "
PROMPT_ALT_NAME = "Enter the name of alternative {}: "
PROMPT_EXPERT_COUNT = "Enter the number of experts: "
PROMPT_EXPERT_NAME = "Enter the name of expert {}: "
PROMPT_EXPERT_HEADER = "\n--- Ranking by expert {expert} ---\n"
PROMPT_RANK = "Rank for alternative '{alt}' from expert '{expert}' (1..{n}): "
PROMPT_STATE_COUNT = "Enter the number of states of nature: "
PROMPT_MAX_SCORE = "Enter the maximum value of the scoring scale (e.g. 10): "
PROMPT_ALT_VALUES = "\nEnter utility values for alternative '{alt}':\n"
PROMPT_STATE_VALUE = ("Utility of alternative '{alt}' in state {state} "
                      "({low:g} to {high:g}): ")
PROMPT_ALPHA = "Enter the optimism coefficient alpha ({low:g} to {high:g}): "


def collect_rank_matrix(reader: InputReader) -> RankMatrix:
    """Prompt for alternatives, experts and every expert's ranks."""
    n_alts = reader.read_positive_int(PROMPT_ALT_COUNT)
    alternatives = reader.read_names(n_alts, PROMPT_ALT_NAME)

    n_experts = reader.read_positive_int(PROMPT_EXPERT_COUNT)
    experts = reader.read_names(n_experts, PROMPT_EXPERT_NAME)

    rankings: Dict[str, Dict[str, int]] = {}
    for expert in experts:
        reader.write(PROMPT_EXPERT_HEADER.format(expert=expert))
        rankings[expert] = {
            alt: reader.read_int_in_range(
                PROMPT_RANK.format(alt=alt, expert=expert, n=n_alts), 1, n_alts)
            for alt in alternatives
        }

    matrix = RankMatrix.from_mapping(alternatives, experts, rankings)
    logger.info(f"Collected ranks: {matrix.n_alternatives} alternatives, "
                f"{matrix.n_experts} experts")
    return matrix


def collect_utility_matrix(reader: InputReader,
                           input_config: Optional[InputConfig] = None) -> UtilityMatrix:
    """Prompt for alternatives, states, scale and every utility value."""
    cfg = input_config or InputConfig()

    n_alts = reader.read_positive_int(PROMPT_ALT_COUNT)
    alternatives = reader.read_names(n_alts, PROMPT_ALT_NAME)
    n_states = reader.read_positive_int(PROMPT_STATE_COUNT)
    max_score = reader.read_positive_int(PROMPT_MAX_SCORE)

    outcomes = {}
    for alt in alternatives:
        reader.write(PROMPT_ALT_VALUES.format(alt=alt))
        outcomes[alt] = [
            reader.read_float_in_range(
                PROMPT_STATE_VALUE.format(alt=alt, state=j + 1,
                                          low=cfg.min_utility, high=max_score),
                cfg.min_utility, float(max_score))
            for j in range(n_states)
        ]

    matrix = UtilityMatrix.from_mapping(outcomes, max_score=max_score)
    logger.info(f"Collected utilities: {matrix.n_alternatives} alternatives, "
                f"{matrix.n_states} states, max score {max_score}")
    return matrix


def collect_alpha(reader: InputReader,
                  input_config: Optional[InputConfig] = None) -> float:
    cfg = input_config or InputConfig()
    return reader.read_float_in_range(
        PROMPT_ALPHA.format(low=cfg.alpha_min, high=cfg.alpha_max),
        cfg.alpha_min, cfg.alpha_max)
