"""
Divergence operator implementations.

- divergence_operators: Kullback-Leibler divergence with epsilon smoothing
"""

from .divergence_operators import LOG_UNITS, KLDivergence, kl_divergence

__all__ = [
    "KLDivergence",
    "LOG_UNITS",
    "kl_divergence",
]
