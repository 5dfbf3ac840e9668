"""
Kullback-Leibler divergence operator.

D(p || q) = Σ_i p_i * log(p_i / q_i)

Zero handling follows the convention of the reference KL routine the
published coefficients were computed with:
- a term with p_i = 0 contributes nothing
- a term with p_i > 0 and q_i = 0 uses epsilon in place of q_i
- positions where either side is NaN are left out of the sum
"""

from __future__ import annotations

import logging

import numpy as np

from fredundancy.common import AbstractDivergenceOperator, InvalidInputError

logger = logging.getLogger(__name__)

LOG_UNITS = {
    "log": np.log,
    "log2": np.log2,
    "log10": np.log10,
}


def kl_divergence(
    p, q, epsilon: float = 1e-5, unit: str = "log"
) -> float:
    """
    Compute the smoothed discrete KL divergence D(p || q).

    Args:
        p: Distribution being compared
        q: Reference distribution, same length as p
        epsilon: Value substituted for q_i where q_i is zero
        unit: Logarithm to use: "log" (natural), "log2" or "log10"

    Returns:
        Divergence as a Python float
    """
    if unit not in LOG_UNITS:
        raise InvalidInputError(
            f"Unknown unit: {unit}. Must be one of {sorted(LOG_UNITS)}"
        )

    p = np.atleast_1d(np.asarray(p, dtype=float))
    q = np.atleast_1d(np.asarray(q, dtype=float))
    if p.shape != q.shape:
        raise InvalidInputError(
            f"Divergence inputs must have the same length, got {p.size} and {q.size}"
        )

    observed = ~(np.isnan(p) | np.isnan(q))
    if not observed.all():
        logger.debug("Skipping %d NaN position(s)", int((~observed).sum()))
    p = p[observed]
    q = q[observed]

    # Zero-mass terms of p contribute nothing
    support = p > 0
    p = p[support]
    q = np.where(q[support] == 0, epsilon, q[support])

    log = LOG_UNITS[unit]
    return float(np.sum(p * log(p / q)))


class KLDivergence(AbstractDivergenceOperator):
    """
    Kullback-Leibler divergence operator with epsilon smoothing.

    Holds its numeric settings explicitly so that two operators with
    different settings can be used side by side.
    """

    def __init__(self, epsilon: float = 1e-5, unit: str = "log"):
        """
        Initialize KL divergence operator.

        Args:
            epsilon: Substitute for zero reference probabilities (default 1e-5)
            unit: Logarithm base name (default natural log)
        """
        if unit not in LOG_UNITS:
            raise InvalidInputError(
                f"Unknown unit: {unit}. Must be one of {sorted(LOG_UNITS)}"
            )
        if not epsilon > 0:
            raise InvalidInputError(f"epsilon must be positive, got {epsilon}")
        self.epsilon = epsilon
        self.unit = unit

    def __call__(self, p: np.ndarray, q: np.ndarray) -> float:
        return kl_divergence(p, q, epsilon=self.epsilon, unit=self.unit)

    def __repr__(self) -> str:
        return f"KLDivergence(epsilon={self.epsilon}, unit={self.unit!r})"
