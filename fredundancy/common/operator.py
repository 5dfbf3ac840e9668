"""
Abstract divergence operator.

The single numeric collaborator of the redundancy measures: anything
that maps two equal-length non-negative vectors to a scalar.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class AbstractDivergenceOperator(ABC):
    """
    Abstract operator for the divergence D(p || q) of two discrete distributions.

    Implementations receive the two rows of a pair (function profile first,
    reference profile second) and return a single real number. The
    evaluator accepts any callable with this signature, so a test double
    can stand in for a concrete operator.
    """

    @abstractmethod
    def __call__(self, p: np.ndarray, q: np.ndarray) -> float:
        """
        Compute D(p || q).

        Args:
            p: Distribution being compared
            q: Reference distribution, same length as p

        Returns:
            Scalar divergence
        """
        pass
