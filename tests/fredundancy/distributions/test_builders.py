"""
Tests for distribution pair builders.

Tests for fredundancy/distributions/builders.py
"""

from __future__ import annotations

import numpy as np
import pytest

from fredundancy.common import (
    DegenerateDistributionError,
    InvalidInputError,
    InvalidReferenceSizeError,
)
from fredundancy.distributions import (
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


class TestHelpers:
    """Test positive_support, uniform and pad_to_length."""

    def test_positive_support_keeps_order(self):
        result = positive_support(np.array([0.0, 0.3, 0.0, 0.7, 0.0]))
        np.testing.assert_array_equal(result, [0.3, 0.7])

    def test_uniform(self, assert_probability_distribution):
        result = uniform(4)
        np.testing.assert_allclose(result, [0.25] * 4)
        assert_probability_distribution(result)

    def test_pad_to_length(self):
        result = pad_to_length(np.array([0.6, 0.4]), 4)
        np.testing.assert_array_equal(result, [0.6, 0.4, 0.0, 0.0])

    def test_pad_to_same_length(self):
        result = pad_to_length(np.array([0.6, 0.4]), 2)
        np.testing.assert_array_equal(result, [0.6, 0.4])

    def test_pad_shorter_target_raises(self):
        with pytest.raises(InvalidInputError, match="Cannot pad"):
            pad_to_length(np.array([0.5, 0.5]), 1)


class TestDistributionPair:
    """Test the DistributionPair dataclass."""

    def test_length(self):
        pair = DistributionPair("x", [0.5, 0.5], [0.2, 0.8])
        assert len(pair) == 2

    def test_mismatched_lengths_rejected(self):
        with pytest.raises(InvalidInputError, match="differ in length"):
            DistributionPair("x", [0.5, 0.5], [1.0])


class TestSamplePair:
    """Test build_sample_pair."""

    def test_canonical(self, canonical_functions, canonical_abundance):
        pair = build_sample_pair(canonical_functions, canonical_abundance)
        assert pair.measure == "sample_based"
        np.testing.assert_allclose(pair.p, [0.8, 0.1, 0.05, 0.05, 0.0])
        np.testing.assert_allclose(pair.q, [0.2] * 5)

    def test_absent_species_shrink_support(self):
        functions = np.array([0.5, 0.5, 0.0, 0.0])
        abundance = np.array([0.4, 0.4, 0.2, 0.0])
        pair = build_sample_pair(functions, abundance)
        assert len(pair) == 3
        np.testing.assert_allclose(pair.p, [0.5, 0.5, 0.0])
        np.testing.assert_allclose(pair.q, [1 / 3] * 3)

    def test_functional_species_without_abundance(self):
        functions = np.array([0.5, 0.5])
        abundance = np.array([1.0, 0.0])
        with pytest.raises(InvalidInputError, match="positive abundance"):
            build_sample_pair(functions, abundance)


class TestReferencePair:
    """Test build_reference_pair."""

    def test_canonical(self, canonical_functions, canonical_abundance):
        pair = build_reference_pair(canonical_functions, canonical_abundance, 7)
        assert pair.measure == "reference_based"
        np.testing.assert_allclose(pair.p, [0.8, 0.1, 0.05, 0.05, 0.0, 0.0, 0.0])
        np.testing.assert_allclose(pair.q, [1 / 7] * 7)

    def test_reference_equal_to_functional_count(
        self, canonical_functions, canonical_abundance
    ):
        pair = build_reference_pair(canonical_functions, canonical_abundance, 4)
        np.testing.assert_allclose(pair.p, [0.8, 0.1, 0.05, 0.05])
        np.testing.assert_allclose(pair.q, [0.25] * 4)

    def test_reference_too_small(self, canonical_functions, canonical_abundance):
        with pytest.raises(InvalidReferenceSizeError, match="smaller than"):
            build_reference_pair(canonical_functions, canonical_abundance, 3)

    def test_numpy_integer_accepted(self, canonical_functions, canonical_abundance):
        pair = build_reference_pair(canonical_functions, canonical_abundance, np.int64(6))
        assert len(pair) == 6


class TestCheckReferenceSize:
    """Test check_reference_size."""

    @pytest.mark.parametrize("value", [7.0, "7", None, True])
    def test_rejects_non_integers(self, value):
        with pytest.raises(InvalidInputError, match="positive integer"):
            check_reference_size(value)

    @pytest.mark.parametrize("value", [0, -3])
    def test_rejects_non_positive(self, value):
        with pytest.raises(InvalidReferenceSizeError):
            check_reference_size(value)

    def test_returns_int(self):
        assert check_reference_size(np.int32(5)) == 5


class TestAbundancePair:
    """Test build_abundance_pair."""

    def test_pairs_full_vectors(self, canonical_functions, canonical_abundance):
        pair = build_abundance_pair(canonical_functions, canonical_abundance)
        assert pair.measure == "abundance_based"
        np.testing.assert_array_equal(pair.p, canonical_functions)
        np.testing.assert_array_equal(pair.q, canonical_abundance)


class TestInterdependencyPair:
    """Test build_interdependency_pair."""

    def test_canonical(
        self, canonical_functions, canonical_abundance, assert_probability_distribution
    ):
        pair = build_interdependency_pair(canonical_functions, canonical_abundance)
        assert pair.measure == "interdependency"
        np.testing.assert_allclose(pair.p, [0.8, 0.1, 0.05, 0.05])
        np.testing.assert_allclose(pair.q, [0.5, 0.25, 0.125, 0.125])
        assert_probability_distribution(pair.q)

    def test_zero_restricted_abundance(self):
        functions = np.array([1.0, 0.0])
        abundance = np.array([0.0, 1.0])
        with pytest.raises(DegenerateDistributionError):
            build_interdependency_pair(functions, abundance)
