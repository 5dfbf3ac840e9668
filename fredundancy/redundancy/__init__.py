"""
Redundancy measures: configuration, evaluation and the public entry point.
"""

from .data import RedundancyConfig, RedundancyResult
from .evaluation import evaluate
from .measures import MEASURES, Measure, compute_redundancy, fredundancy

__all__ = [
    "MEASURES",
    "Measure",
    "RedundancyConfig",
    "RedundancyResult",
    "compute_redundancy",
    "evaluate",
    "fredundancy",
]
