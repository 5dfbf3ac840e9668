"""
Error taxonomy for redundancy computations.

Every error is raised where it is detected; nothing is caught and
corrected internally apart from the abundance tolerance rescaling.
"""

from __future__ import annotations


class RedundancyError(ValueError):
    """Base class for all errors raised by fredundancy."""


class InvalidInputError(RedundancyError):
    """Malformed input: length mismatch, negative or non-finite entries."""


class InvalidAbundanceError(RedundancyError):
    """Abundances do not sum to 1 within the allowed tolerance."""


class InvalidReferenceSizeError(RedundancyError):
    """Reference pool smaller than the number of functional species."""


class DegenerateDistributionError(RedundancyError, ZeroDivisionError):
    """
    A vector cannot be turned into a probability distribution.

    Raised for an all-zero function vector and for an interdependency
    restriction whose abundances sum to zero.
    """
