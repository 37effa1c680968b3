"""
Dimension weights for the aggregate match score.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

from scholarmatch.domain.scoring.interfaces import Dimension

WEIGHT_TOLERANCE = 1e-6


@dataclass(frozen=True, slots=True)
class ScoringWeights:
    academic: float
    demographic: float
    major_field: float
    experience: float
    financial: float
    special: float

    def __post_init__(self) -> None:
        for dimension in Dimension:
            value = float(getattr(self, dimension.value))
            if not math.isfinite(value):
                raise ValueError(f"Weight '{dimension.value}' must be finite.")
            if value < 0.0 or value > 1.0:
                raise ValueError(f"Weight '{dimension.value}' must be between 0.0 and 1.0.")

        total = sum(float(getattr(self, dimension.value)) for dimension in Dimension)
        if not math.isclose(total, 1.0, abs_tol=WEIGHT_TOLERANCE):
            raise ValueError(
                "Scoring weights must sum to 1.0 "
                f"(received {total:.6f}, tolerance={WEIGHT_TOLERANCE})."
            )

    @classmethod
    def baseline(cls) -> ScoringWeights:
        return cls(
            academic=0.30,
            demographic=0.15,
            major_field=0.20,
            experience=0.15,
            financial=0.10,
            special=0.10,
        )

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any] | None) -> ScoringWeights:
        values = payload or {}
        baseline = cls.baseline()
        return cls(**{
            dimension.value: float(values.get(dimension.value, baseline.weight_for(dimension)))
            for dimension in Dimension
        })

    def weight_for(self, dimension: Dimension) -> float:
        return float(getattr(self, dimension.value))

    def to_dict(self) -> dict[str, float]:
        return {dimension.value: self.weight_for(dimension) for dimension in Dimension}
