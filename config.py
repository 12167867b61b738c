# -*- coding: utf-8 -*-
"""
Centralised Configuration for decision-kit
==========================================

Display widths, input bounds, criteria selection and log level live in
small dataclasses composed by :class:`Config`.  The CLI adjusts a fresh
default instance from its flags; library callers can share one through
:func:`get_config`.  Nothing is read from or written to files.

Groups
------
- DisplayConfig       — table widths and number formatting
- InputConfig         — bounds and retry policy for interactive input
- UncertaintyConfig   — criteria to run and optional preset α
- LoggingConfig       — diagnostic log level
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from uncertainty.base import Criterion
from uncertainty.engine import ALL_CRITERIA


# =========================================================================
# Display
# =========================================================================

@dataclass
class DisplayConfig:
    """Fixed-width table layout used by the console report."""
    alternative_width: int = 20
    expert_width: int = 8
    state_width: int = 10
    rank_width: int = 5
    score_width: int = 15
    matrix_precision: int = 2     # utility / regret cells
    result_precision: int = 4     # criterion scores
    use_color: Optional[bool] = None   # None → autodetect


# =========================================================================
# Interactive Input
# =========================================================================

@dataclass
class InputConfig:
    """Bounds for values typed at the prompt."""
    min_utility: float = 1.0
    alpha_min: float = 0.0
    alpha_max: float = 1.0
    max_retries: Optional[int] = None   # None → re-prompt forever


# =========================================================================
# Uncertainty Pipeline
# =========================================================================

@dataclass
class UncertaintyConfig:
    """Criteria selection for the uncertainty pipeline.

    Parameters
    ----------
    criteria : list of Criterion
        Criteria evaluated and printed, in this order.
    alpha : float, optional
        Preset Hurwicz coefficient; when ``None`` it is prompted for.
    """
    criteria: List[Criterion] = field(default_factory=lambda: list(ALL_CRITERIA))
    alpha: Optional[float] = None

    @property
    def needs_alpha(self) -> bool:
        return Criterion.HURWICZ in self.criteria


# =========================================================================
# Logging
# =========================================================================

@dataclass
class LoggingConfig:
    level: str = "WARNING"


def _plain_dict(pairs) -> Dict:
    def plain(value):
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, list):
            return [plain(v) for v in value]
        return value
    return {key: plain(value) for key, value in pairs}


# =========================================================================
# Master Configuration
# =========================================================================

@dataclass
class Config:
    """Master configuration composing every sub-config."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    input: InputConfig = field(default_factory=InputConfig)
    uncertainty: UncertaintyConfig = field(default_factory=UncertaintyConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict:
        """Plain nested dict; criteria are given by their names."""
        return asdict(self, dict_factory=_plain_dict)

    def summary(self) -> str:
        criteria = ', '.join(c.title for c in self.uncertainty.criteria)
        alpha = ('prompt' if self.uncertainty.alpha is None
                 else f'{self.uncertainty.alpha}')
        return (
            f"\n{'='*60}\n"
            f"  decision-kit Configuration Summary\n"
            f"{'='*60}\n\n"
            f"  UNCERTAINTY\n"
            f"    Criteria        : {criteria}\n"
            f"    Hurwicz alpha   : {alpha}\n\n"
            f"  INPUT\n"
            f"    Min utility     : {self.input.min_utility}\n"
            f"    Max retries     : {self.input.max_retries or 'unlimited'}\n\n"
            f"  DISPLAY\n"
            f"    Matrix decimals : {self.display.matrix_precision}\n"
            f"    Result decimals : {self.display.result_precision}\n\n"
            f"  LOGGING\n"
            f"    Level           : {self.logging.level}\n"
            f"{'='*60}\n"
        )


# =========================================================================
# Global Config Singleton
# =========================================================================

_config: Optional[Config] = None


def get_config() -> Config:
    """Shared configuration used by pipelines built without one."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def get_default_config() -> Config:
    """A new default Config, independent of the shared one."""
    return Config()


def set_config(config: Config) -> None:
    global _config
    _config = config


def reset_config() -> None:
    """Discard any changes made to the shared configuration."""
    set_config(Config())
