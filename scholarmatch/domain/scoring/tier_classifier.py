"""
Tier Classifiers

Maps success probability and strategic value onto their tiers.
Both classifiers are total: every input lands in exactly one tier, with
inclusive lower bounds.
"""

from dataclasses import dataclass
from typing import Dict

from scholarmatch.domain.scoring.interfaces import (
    EffortBreakdown,
    EffortLevel,
    StrategicValueTier,
    SuccessTier,
    TierDisplay,
)
from scholarmatch.domain.scoring.numeric import round_int


SUCCESS_TIER_DISPLAY: Dict[SuccessTier, TierDisplay] = {
    SuccessTier.STRONG_MATCH: TierDisplay(
        label="Strong Match",
        description="Apply immediately, high confidence",
        color="green",
    ),
    SuccessTier.COMPETITIVE_MATCH: TierDisplay(
        label="Competitive Match",
        description="Solid opportunity, worth effort",
        color="blue",
    ),
    SuccessTier.REACH: TierDisplay(
        label="Reach",
        description="Long shot, but possible",
        color="orange",
    ),
    SuccessTier.LONG_SHOT: TierDisplay(
        label="Long-Shot",
        description="Very competitive, consider if high value",
        color="red",
    ),
}

STRATEGIC_VALUE_DISPLAY: Dict[StrategicValueTier, TierDisplay] = {
    StrategicValueTier.BEST_BET: TierDisplay(
        label="Best Bet",
        description="Apply immediately - highest expected return per hour invested",
        color="gold",
        icon="⭐",
    ),
    StrategicValueTier.HIGH_VALUE: TierDisplay(
        label="High Value",
        description="Strong opportunity worth pursuing after best bets",
        color="green",
        icon="✓",
    ),
    StrategicValueTier.MEDIUM_VALUE: TierDisplay(
        label="Medium Value",
        description="Apply if time permits after higher priorities",
        color="blue",
        icon="•",
    ),
    StrategicValueTier.LOW_VALUE: TierDisplay(
        label="Low Value",
        description="Consider skipping unless special circumstances apply",
        color="gray",
        icon="○",
    ),
}


@dataclass(frozen=True)
class SuccessTierResult:
    tier: SuccessTier
    probability: int  # percent
    display: TierDisplay


@dataclass(frozen=True)
class StrategicValueClassification:
    tier: StrategicValueTier
    value: float
    display: TierDisplay


class SuccessTierClassifier:
    """
    Success tier from a percent probability.

    - >= 70: STRONG_MATCH
    - >= 40: COMPETITIVE_MATCH
    - >= 10: REACH
    - else: LONG_SHOT
    """

    STRONG_MATCH_THRESHOLD = 70
    COMPETITIVE_MATCH_THRESHOLD = 40
    REACH_THRESHOLD = 10

    def classify(self, probability_percent: float) -> SuccessTier:
        if probability_percent >= self.STRONG_MATCH_THRESHOLD:
            return SuccessTier.STRONG_MATCH
        elif probability_percent >= self.COMPETITIVE_MATCH_THRESHOLD:
            return SuccessTier.COMPETITIVE_MATCH
        elif probability_percent >= self.REACH_THRESHOLD:
            return SuccessTier.REACH
        else:
            return SuccessTier.LONG_SHOT

    def describe(self, probability_percent: float) -> SuccessTierResult:
        tier = self.classify(probability_percent)
        return SuccessTierResult(
            tier=tier,
            probability=round_int(probability_percent),
            display=SUCCESS_TIER_DISPLAY[tier],
        )


class StrategicValueClassifier:
    """
    Strategic value tier.

    - >= 5.0: BEST_BET
    - >= 3.0: HIGH_VALUE
    - >= 1.5: MEDIUM_VALUE
    - else: LOW_VALUE
    """

    BEST_BET_THRESHOLD = 5.0
    HIGH_VALUE_THRESHOLD = 3.0
    MEDIUM_VALUE_THRESHOLD = 1.5

    def classify(self, strategic_value: float) -> StrategicValueTier:
        if strategic_value >= self.BEST_BET_THRESHOLD:
            return StrategicValueTier.BEST_BET
        elif strategic_value >= self.HIGH_VALUE_THRESHOLD:
            return StrategicValueTier.HIGH_VALUE
        elif strategic_value >= self.MEDIUM_VALUE_THRESHOLD:
            return StrategicValueTier.MEDIUM_VALUE
        else:
            return StrategicValueTier.LOW_VALUE

    def describe(self, strategic_value: float) -> StrategicValueClassification:
        tier = self.classify(strategic_value)
        return StrategicValueClassification(
            tier=tier,
            value=strategic_value,
            display=STRATEGIC_VALUE_DISPLAY[tier],
        )


def format_tier_display(result: SuccessTierResult) -> str:
    """e.g. "84% success probability - Strong Match"."""
    return f"{result.probability}% success probability - {result.display.label}"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count > 1 else ''}"


def format_strategic_value_display(
    tier: StrategicValueTier,
    award_amount: float,
    probability_percent: float,
    effort_level: EffortLevel,
    breakdown: EffortBreakdown
) -> str:
    """One-line summary of a strategic value classification."""
    parts = []
    if breakdown.essays > 0:
        parts.append(_plural(breakdown.essays, "essay"))
    if breakdown.documents > 0:
        parts.append(_plural(breakdown.documents, "doc"))
    if breakdown.recommendations > 0:
        parts.append(_plural(breakdown.recommendations, "rec"))
    requirements = ", ".join(parts) if parts else "no requirements"

    label = STRATEGIC_VALUE_DISPLAY[tier].label
    return (
        f"Strategic Value: {label} - ${award_amount:,.0f} award, "
        f"{round_int(probability_percent)}% success probability, "
        f"{effort_level.value} effort ({requirements})"
    )
