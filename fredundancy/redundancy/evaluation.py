"""
Divergence evaluation with the per-measure sign convention.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from fredundancy.distributions import DistributionPair

Divergence = Callable[[np.ndarray, np.ndarray], float]


def evaluate(pair: DistributionPair, negate: bool, divergence: Divergence) -> float:
    """
    Compute divergence(pair.p, pair.q), negated if requested.

    Args:
        pair: Distribution pair to evaluate
        negate: Whether to report -D instead of D
        divergence: Any callable (p, q) -> scalar

    Returns:
        Coefficient as a Python float
    """
    value = float(np.asarray(divergence(pair.p, pair.q), dtype=float).item())
    return -value if negate else value
