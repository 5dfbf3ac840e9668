"""
Probability vectors and the distribution pairs built from them.
"""

from .builders import (
    DistributionPair,
    build_abundance_pair,
    build_interdependency_pair,
    build_reference_pair,
    build_sample_pair,
    check_reference_size,
    pad_to_length,
    positive_support,
    uniform,
)
from .normalization import (
    as_vector,
    normalize_functions,
    validate_or_normalize_abundance,
)

__all__ = [
    "DistributionPair",
    "as_vector",
    "build_abundance_pair",
    "build_interdependency_pair",
    "build_reference_pair",
    "build_sample_pair",
    "check_reference_size",
    "normalize_functions",
    "pad_to_length",
    "positive_support",
    "uniform",
    "validate_or_normalize_abundance",
]
