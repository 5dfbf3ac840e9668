"""
Distribution pairs for the redundancy measures.

Each builder takes the normalized function vector F and abundance vector
A and returns the (p, q) pair the divergence is computed on. F+ denotes
the order-preserving restriction of F to its positive entries; k is its
length.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass

import numpy as np

from fredundancy.common import (
    DegenerateDistributionError,
    InvalidInputError,
    InvalidReferenceSizeError,
)


@dataclass
class DistributionPair:
    """
    Two same-length vectors handed to the divergence primitive.

    Attributes:
        measure: Name of the measure the pair was built for
        p: Function profile
        q: Reference profile
    """

    measure: str
    p: np.ndarray
    q: np.ndarray

    def __post_init__(self):
        self.p = np.asarray(self.p, dtype=float)
        self.q = np.asarray(self.q, dtype=float)
        if self.p.shape != self.q.shape:
            raise InvalidInputError(
                f"{self.measure}: pair sides differ in length "
                f"({self.p.size} vs {self.q.size})"
            )

    def __len__(self) -> int:
        return self.p.size


def positive_support(functions: np.ndarray) -> np.ndarray:
    """F+: entries of functions that are strictly positive, in order."""
    functions = np.asarray(functions, dtype=float)
    return functions[functions > 0]


def uniform(n: int) -> np.ndarray:
    """Uniform distribution over n outcomes."""
    return np.full(n, 1.0 / n)


def pad_to_length(vector: np.ndarray, length: int) -> np.ndarray:
    """
    Right-pad vector with zeros up to length.

    Raises:
        InvalidInputError: if vector is already longer than length
    """
    missing = length - len(vector)
    if missing < 0:
        raise InvalidInputError(
            f"Cannot pad a vector of length {len(vector)} to length {length}"
        )
    return np.concatenate([vector, np.zeros(missing)])


def build_sample_pair(functions: np.ndarray, abundance: np.ndarray) -> DistributionPair:
    """
    F+ padded to the number of present species m, against uniform(m).
    """
    functions_gz = positive_support(functions)
    m = int(np.count_nonzero(np.asarray(abundance) > 0))
    if len(functions_gz) > m:
        raise InvalidInputError(
            f"{len(functions_gz)} species perform the function but only {m} "
            "are present; every functional species needs positive abundance"
        )
    return DistributionPair(
        measure="sample_based",
        p=pad_to_length(functions_gz, m),
        q=uniform(m),
    )


def check_reference_size(n_reference) -> int:
    """Validate n_reference as a positive integer and return it as int."""
    if isinstance(n_reference, (bool, np.bool_)) or not isinstance(
        n_reference, numbers.Integral
    ):
        raise InvalidInputError(
            f"n_reference must be a positive integer, got {n_reference!r}"
        )
    if n_reference < 1:
        raise InvalidReferenceSizeError(
            f"n_reference must be a positive integer, got {n_reference}"
        )
    return int(n_reference)


def build_reference_pair(
    functions: np.ndarray, abundance: np.ndarray, n_reference: int
) -> DistributionPair:
    """
    F+ padded to the reference pool size, against uniform(n_reference).

    abundance is unused; it is accepted so every builder shares one signature.
    """
    n_reference = check_reference_size(n_reference)
    functions_gz = positive_support(functions)
    if n_reference < len(functions_gz):
        raise InvalidReferenceSizeError(
            f"n_reference={n_reference} is smaller than the "
            f"{len(functions_gz)} species performing the function"
        )
    return DistributionPair(
        measure="reference_based",
        p=pad_to_length(functions_gz, n_reference),
        q=uniform(n_reference),
    )


def build_abundance_pair(functions: np.ndarray, abundance: np.ndarray) -> DistributionPair:
    """F against A, both full length."""
    return DistributionPair(measure="abundance_based", p=functions, q=abundance)


def build_interdependency_pair(
    functions: np.ndarray, abundance: np.ndarray
) -> DistributionPair:
    """
    F+ against the abundances of the same species, renormalized to sum to 1.

    Raises:
        DegenerateDistributionError: if those abundances sum to zero
    """
    functions = np.asarray(functions, dtype=float)
    abundance = np.asarray(abundance, dtype=float)
    mask = functions > 0

    abundance_i = abundance[mask]
    total = abundance_i.sum()
    if total == 0:
        raise DegenerateDistributionError(
            "Species performing the function have zero total abundance"
        )
    return DistributionPair(
        measure="interdependency",
        p=functions[mask],
        q=abundance_i / total,
    )
