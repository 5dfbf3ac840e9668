"""
Pytest configuration and shared fixtures for fredundancy tests.

Provides community fixtures, divergence test doubles and numpy helpers.
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import numpy as np
import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# =============================================================================
# Community Fixtures
# =============================================================================


@pytest.fixture
def canonical_functions() -> np.ndarray:
    """Function vector of the published example community."""
    return np.array([0.8, 0.1, 0.05, 0.05, 0.0])


@pytest.fixture
def canonical_abundance() -> np.ndarray:
    """Abundance vector of the published example community."""
    return np.array([0.2, 0.1, 0.05, 0.05, 0.6])


@pytest.fixture
def canonical_expected() -> dict:
    """Published coefficients for the example community with n_reference=7."""
    return {
        "sample_based": -0.901091330,
        "reference_based": -1.23756357,
        "abundance_based": -1.10903549,
        "interdependency": 0.192744760,
    }


@pytest.fixture
def even_community() -> tuple:
    """Every species equally abundant and equally functional."""
    n = 4
    return np.ones(n) / n, np.ones(n) / n


@pytest.fixture
def random_community() -> tuple:
    """Random community satisfying the absolute continuity invariant."""
    rng = np.random.default_rng(7)
    abundance = rng.dirichlet(np.ones(12))
    functions = rng.random(12)
    functions[rng.random(12) < 0.3] = 0.0
    functions[0] = 0.5
    return functions, abundance


# =============================================================================
# Divergence Test Doubles
# =============================================================================


@pytest.fixture
def mock_divergence():
    """Divergence primitive that records calls and returns a fixed value."""
    divergence = MagicMock()
    divergence.return_value = 0.25
    return divergence


# =============================================================================
# Numpy Test Utilities
# =============================================================================


@pytest.fixture
def assert_array_close():
    """Fixture for array comparison with tolerance."""

    def _assert_close(actual, expected, rtol=1e-7, atol=1e-12):
        np.testing.assert_allclose(actual, expected, rtol=rtol, atol=atol)

    return _assert_close


@pytest.fixture
def assert_probability_distribution():
    """Fixture to assert valid probability distribution."""

    def _assert_prob_dist(probs, atol=1e-9):
        assert np.all(probs >= 0), "Probabilities must be non-negative"
        assert np.abs(np.sum(probs) - 1.0) < atol, "Probabilities must sum to 1"

    return _assert_prob_dist


# =============================================================================
# Markers
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
