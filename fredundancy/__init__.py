"""
fredundancy: functional redundancy and interdependency of ecological communities

Relative-entropy coefficients computed from the relative abundance of each
species and the degree to which each species performs a function.
"""

__version__ = "0.1.0"

from .common import (
    AbstractDivergenceOperator,
    DegenerateDistributionError,
    InvalidAbundanceError,
    InvalidInputError,
    InvalidReferenceSizeError,
    RedundancyError,
    SchemaClass,
)
from .distributions import (
    DistributionPair,
    build_abundance_pair,
    build_interdependency_pair,
    build_reference_pair,
    build_sample_pair,
    normalize_functions,
    validate_or_normalize_abundance,
)
from .operators import KLDivergence, kl_divergence
from .redundancy import (
    MEASURES,
    RedundancyConfig,
    RedundancyResult,
    compute_redundancy,
    evaluate,
    fredundancy,
)

__all__ = [
    # Entry points
    "fredundancy",
    "compute_redundancy",
    "RedundancyConfig",
    "RedundancyResult",
    "MEASURES",
    "evaluate",
    # Divergence
    "AbstractDivergenceOperator",
    "KLDivergence",
    "kl_divergence",
    # Distributions
    "DistributionPair",
    "normalize_functions",
    "validate_or_normalize_abundance",
    "build_sample_pair",
    "build_reference_pair",
    "build_abundance_pair",
    "build_interdependency_pair",
    # Errors
    "RedundancyError",
    "InvalidInputError",
    "InvalidAbundanceError",
    "InvalidReferenceSizeError",
    "DegenerateDistributionError",
    "SchemaClass",
]
