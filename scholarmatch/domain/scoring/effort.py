"""
Effort Estimator

Classifies the application effort of a scholarship from its requirement
counts and maps the level to a multiplier used by strategic value.
"""

from typing import Dict, Tuple

from scholarmatch.domain.scoring.interfaces import (
    EffortBreakdown,
    EffortEstimation,
    EffortLevel,
    ScholarshipData,
)


EFFORT_MULTIPLIERS: Dict[EffortLevel, float] = {
    EffortLevel.LOW: 1.0,
    EffortLevel.MEDIUM: 0.7,
    EffortLevel.HIGH: 0.4,
}

# Estimated hours to complete (min, max); display only
TIME_INVESTMENT_HOURS: Dict[EffortLevel, Tuple[int, int]] = {
    EffortLevel.LOW: (2, 3),
    EffortLevel.MEDIUM: (4, 6),
    EffortLevel.HIGH: (8, 12),
}


class EffortEstimator:
    """
    Effort level classifier.

    - HIGH: 3+ essays OR 5+ documents OR 2+ recommendations
    - MEDIUM: 2 essays OR 3-4 documents OR 1 recommendation
    - LOW: everything else
    """

    def estimate(self, scholarship: ScholarshipData) -> EffortEstimation:
        breakdown = EffortBreakdown(
            essays=len(scholarship.essay_prompts or []),
            documents=len(scholarship.required_documents or []),
            recommendations=max(0, scholarship.recommendation_count or 0),
        )
        level = self.classify(breakdown)
        return EffortEstimation(
            level=level,
            breakdown=breakdown,
            multiplier=EFFORT_MULTIPLIERS[level],
        )

    def classify(self, breakdown: EffortBreakdown) -> EffortLevel:
        essays = max(0, breakdown.essays)
        documents = max(0, breakdown.documents)
        recommendations = max(0, breakdown.recommendations)

        if essays >= 3 or documents >= 5 or recommendations >= 2:
            return EffortLevel.HIGH
        if essays >= 2 or 3 <= documents <= 4 or recommendations >= 1:
            return EffortLevel.MEDIUM
        return EffortLevel.LOW


def estimate_time_investment(level: EffortLevel) -> Tuple[int, int]:
    """Estimated (min, max) hours for an effort level."""
    return TIME_INVESTMENT_HOURS[level]
