"""
Functional redundancy and interdependency measures.

Four coefficients, each a KL divergence between the function profile of a
community and a reference profile:

- sample_based: uniform over species present in the sample (negated)
- reference_based: uniform over a larger reference pool (negated, optional)
- abundance_based: the abundance profile itself (negated)
- interdependency: abundances of functional species only (not negated)

Example:
    fredundancy([0.8, 0.1, 0.05, 0.05, 0], [0.2, 0.1, 0.05, 0.05, 0.6], 7)
    gives sample_based -0.901, reference_based -1.238,
    abundance_based -1.109 and interdependency 0.193.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from fredundancy.common import InvalidInputError
from fredundancy.distributions import (
    DistributionPair,
    as_vector,
    build_abundance_pair,
    build_interdependency_pair,
    build_reference_pair,
    build_sample_pair,
    normalize_functions,
    validate_or_normalize_abundance,
)
from fredundancy.operators import KLDivergence

from .data import RedundancyConfig, RedundancyResult
from .evaluation import Divergence, evaluate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Measure:
    """One row of the measure table."""

    name: str
    builder: Callable[..., DistributionPair]
    negate: bool
    needs_reference: bool = False

    def build(
        self, functions: np.ndarray, abundance: np.ndarray, n_reference=None
    ) -> DistributionPair:
        if self.needs_reference:
            return self.builder(functions, abundance, n_reference)
        return self.builder(functions, abundance)


MEASURES: Tuple[Measure, ...] = (
    Measure("sample_based", build_sample_pair, negate=True),
    Measure("reference_based", build_reference_pair, negate=True, needs_reference=True),
    Measure("abundance_based", build_abundance_pair, negate=True),
    Measure("interdependency", build_interdependency_pair, negate=False),
)


def compute_redundancy(
    functions,
    abundance,
    n_reference: Optional[int] = None,
    *,
    config: Optional[RedundancyConfig] = None,
    divergence: Optional[Divergence] = None,
) -> RedundancyResult:
    """
    Compute functional redundancy and interdependency of a community.

    Args:
        functions: Degree to which each species performs the function.
            Rescaled to sum to 1. May contain zeros.
        abundance: Relative abundance of each species, index-aligned with
            functions. Must sum to 1 within config.tolerance.
        n_reference: Number of species in the reference pool able to perform
            the function. reference_based is only computed when given.
        config: Numeric settings (defaults to RedundancyConfig())
        divergence: Divergence primitive (p, q) -> float. Defaults to
            KLDivergence built from config.

    Returns:
        RedundancyResult with all computed coefficients

    Raises:
        InvalidInputError: mismatched lengths or negative/non-finite values
        InvalidAbundanceError: abundances outside tolerance
        InvalidReferenceSizeError: n_reference below the number of
            functional species
        DegenerateDistributionError: all-zero functions, or functional
            species with zero total abundance
    """
    if config is None:
        config = RedundancyConfig()
    if divergence is None:
        divergence = KLDivergence(epsilon=config.epsilon, unit=config.unit)

    functions = as_vector(functions, "functions")
    abundance = as_vector(abundance, "abundance")
    if len(functions) != len(abundance):
        raise InvalidInputError(
            f"functions and abundance must have the same length, "
            f"got {len(functions)} and {len(abundance)}"
        )
    logger.debug("Computing redundancy of %d species with config %s", len(functions), config)

    functions = normalize_functions(functions)
    abundance = validate_or_normalize_abundance(abundance, tolerance=config.tolerance)

    values: Dict[str, float] = {}
    for measure in MEASURES:
        if measure.needs_reference and n_reference is None:
            continue
        pair = measure.build(functions, abundance, n_reference)
        values[measure.name] = evaluate(pair, measure.negate, divergence)
        logger.debug("%s: n=%d value=%r", measure.name, len(pair), values[measure.name])

    result = RedundancyResult(**values)
    logger.debug("Result %s", result)
    return result


def fredundancy(
    functions,
    abundance,
    n_reference: Optional[int] = None,
    **kwargs,
) -> Dict[str, float]:
    """
    Compute redundancy measures and return them as an ordered dict.

    Keys, in order: sample_based, reference_based (only if n_reference is
    given), abundance_based, interdependency. Keyword arguments are passed
    to compute_redundancy.
    """
    return compute_redundancy(functions, abundance, n_reference, **kwargs).to_dict()
