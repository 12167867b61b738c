# -*- coding: utf-8 -*-
"""
Error kinds for the decision-kit core.

All three derive from :class:`ValueError` so callers that already guard
numeric input with ``except ValueError`` keep working.  The core itself
only raises them at construction time; the computations assume their
preconditions hold.
"""


class DecisionKitError(ValueError):
    """Base class for decision-kit input errors."""


class IncompleteMatrixError(DecisionKitError):
    """A (expert, alternative) rank cell was never supplied."""

    def __init__(self, missing):
        self.missing = list(missing)
        preview = ', '.join(f'{e}/{a}' for e, a in self.missing[:5])
        more = f' (+{len(self.missing) - 5} more)' if len(self.missing) > 5 else ''
        super().__init__(
            f"Rank matrix is incomplete: {len(self.missing)} missing cell(s): "
            f"{preview}{more}"
        )


class EmptyStateSetError(DecisionKitError):
    """A utility matrix was declared with zero states."""

    def __init__(self):
        super().__init__("Utility matrix needs at least one state")


class OutOfRangeCoefficientError(DecisionKitError):
    """Hurwicz optimism coefficient outside [0, 1]."""

    def __init__(self, alpha: float):
        self.alpha = alpha
        super().__init__(f"Hurwicz coefficient must lie in [0, 1], got {alpha}")


__all__ = [
    'DecisionKitError',
    'IncompleteMatrixError',
    'EmptyStateSetError',
    'OutOfRangeCoefficientError',
]
