"""
Vector normalization.

Turns raw non-negative vectors into probability vectors: functions are
always rescaled, abundances are checked against a tolerance first.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from fredundancy.common import (
    DegenerateDistributionError,
    InvalidAbundanceError,
    InvalidInputError,
)

logger = logging.getLogger(__name__)


def as_vector(values, name: str = "vector") -> np.ndarray:
    """
    Coerce a numeric sequence to a 1-D float array.

    Args:
        values: List, tuple or array of numbers
        name: Name used in error messages

    Returns:
        New float64 array (never a view of the input)
    """
    try:
        vector = np.array(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be numeric: {exc}") from exc

    if vector.ndim != 1:
        raise InvalidInputError(f"{name} must be one-dimensional, got shape {vector.shape}")
    if not np.all(np.isfinite(vector)):
        raise InvalidInputError(f"{name} must only contain finite values")
    if np.any(vector < 0):
        raise InvalidInputError(f"{name} must not contain negative values")
    return vector


def normalize_functions(functions) -> np.ndarray:
    """
    Rescale a function vector so that it sums to 1.

    Always divides by the sum, so an already normalized vector comes back
    unchanged up to floating point.

    Raises:
        DegenerateDistributionError: if the vector sums to zero
    """
    functions = as_vector(functions, "functions")
    total = functions.sum()
    if total == 0:
        raise DegenerateDistributionError(
            "functions sum to zero; no species performs the function"
        )
    return functions / total


def validate_or_normalize_abundance(abundance, tolerance: float = 1e-5) -> np.ndarray:
    """
    Check that abundances sum to 1, rescaling small deviations.

    Args:
        abundance: Relative abundance per species
        tolerance: Largest accepted |sum - 1|

    Returns:
        The abundances, rescaled by their sum if it was not exactly 1

    Raises:
        InvalidAbundanceError: if |sum - 1| exceeds tolerance
    """
    abundance = as_vector(abundance, "abundance")
    total = abundance.sum()
    deviation = abs(total - 1)

    if deviation == 0:
        return abundance

    # Summation error can put an exact 1 ± tolerance a few ulps past the bound
    if deviation <= tolerance or math.isclose(deviation, tolerance, rel_tol=1e-9):
        logger.debug("Rescaling abundance summing to %r", float(total))
        return abundance / total

    raise InvalidAbundanceError(
        f"Abundances do not sum up to 1 within the allowed tolerance "
        f"(sum={float(total)!r}, tolerance={tolerance})"
    )
