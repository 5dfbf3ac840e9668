"""
Configuration and result structures for redundancy measures.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from fredundancy.common import SchemaClass


@dataclass
class RedundancyConfig(SchemaClass):
    """
    Numeric settings for one redundancy computation.

    Attributes:
        tolerance: Largest accepted |sum(abundance) - 1|
        epsilon: Substitute for zero reference probabilities in the divergence
        unit: Logarithm used by the divergence ("log", "log2" or "log10")
    """

    tolerance: float = 1e-5
    epsilon: float = 1e-5
    unit: str = "log"


@dataclass
class RedundancyResult(SchemaClass):
    """
    Functional redundancy and interdependency coefficients.

    Attributes:
        sample_based: -D(F+ || uniform over sampled species)
        abundance_based: -D(F || A)
        interdependency: D(F+ || renormalized abundance of functional species)
        reference_based: -D(F+ || uniform over the reference pool), None if
            no reference pool size was given
    """

    sample_based: float
    abundance_based: float
    interdependency: float
    reference_based: Optional[float] = None

    def to_dict(self) -> Dict[str, float]:
        """Ordered mapping of the computed coefficients."""
        result = {"sample_based": self.sample_based}
        if self.reference_based is not None:
            result["reference_based"] = self.reference_based
        result["abundance_based"] = self.abundance_based
        result["interdependency"] = self.interdependency
        return result
