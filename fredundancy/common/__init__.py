"""
Shared building blocks.

- Error taxonomy
- SchemaClass base for configuration and result dataclasses
- Divergence operator interface
"""

from .errors import (
    DegenerateDistributionError,
    InvalidAbundanceError,
    InvalidInputError,
    InvalidReferenceSizeError,
    RedundancyError,
)
from .operator import AbstractDivergenceOperator
from .schema_utils import SchemaClass

__all__ = [
    "AbstractDivergenceOperator",
    "DegenerateDistributionError",
    "InvalidAbundanceError",
    "InvalidInputError",
    "InvalidReferenceSizeError",
    "RedundancyError",
    "SchemaClass",
]
