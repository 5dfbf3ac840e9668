"""
Dataclass base for configuration and result records.

Records render as JSON so they can be dropped straight into log lines.
"""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any

import numpy as np


def _jsonable(obj: Any, places: int = 10):
    if isinstance(obj, (float, np.floating)):
        value = float(obj)
        if math.isnan(value):
            return "NaN"
        # + 0.0 turns -0.0 into 0.0
        return round(value, places) + 0.0
    if isinstance(obj, np.ndarray):
        return _jsonable(obj.tolist(), places)
    if is_dataclass(obj):
        return _jsonable(asdict(obj), places)
    if isinstance(obj, dict):
        return {k: _jsonable(v, places) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_jsonable(v, places) for v in obj]
    return obj


@dataclass
class SchemaClass:
    def to_json(self, places: int = 10) -> str:
        return json.dumps(_jsonable(self, places))

    # For logging ease
    def __str__(self) -> str:
        return self.to_json()
