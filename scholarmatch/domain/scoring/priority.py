"""
Priority Tier Assigner

Ordered rule cascade that turns the derived scores into one actionable
recommendation. The first matching rule wins.
"""

from typing import Dict

from scholarmatch.domain.scoring.interfaces import PriorityTier
from scholarmatch.domain.scoring.numeric import round_int, to_percent


# Display order used when sorting recommendations
PRIORITY_ORDER: Dict[PriorityTier, int] = {
    PriorityTier.MUST_APPLY: 0,
    PriorityTier.SHOULD_APPLY: 1,
    PriorityTier.HIGH_VALUE_REACH: 2,
    PriorityTier.IF_TIME_PERMITS: 3,
}

TIER_RATIONALE_SUFFIX: Dict[PriorityTier, str] = {
    PriorityTier.MUST_APPLY: " - Exceptional match with high probability and strong ROI",
    PriorityTier.SHOULD_APPLY: " - Strong match with competitive probability",
    PriorityTier.HIGH_VALUE_REACH: " - High-value opportunity worth the calculated risk",
    PriorityTier.IF_TIME_PERMITS: " - Decent match, apply if time allows",
}


class PriorityAssigner:
    """
    Priority tier cascade.

    1. MUST_APPLY: match >= 90 AND probability >= 0.70 AND strategic value >= 3.0
    2. SHOULD_APPLY: match >= 75 AND probability >= 0.40
    3. HIGH_VALUE_REACH: award >= $10,000 AND probability < 0.25
    4. IF_TIME_PERMITS: everything else

    Probabilities are fractions.
    """

    MUST_APPLY_MATCH = 90
    MUST_APPLY_PROBABILITY = 0.70
    MUST_APPLY_STRATEGIC_VALUE = 3.0

    SHOULD_APPLY_MATCH = 75
    SHOULD_APPLY_PROBABILITY = 0.40

    REACH_MIN_AWARD = 10000
    REACH_MAX_PROBABILITY = 0.25

    def assign(
        self,
        match_score: float,
        success_probability: float,
        strategic_value: float,
        award_amount: float
    ) -> PriorityTier:
        if (
            match_score >= self.MUST_APPLY_MATCH
            and success_probability >= self.MUST_APPLY_PROBABILITY
            and strategic_value >= self.MUST_APPLY_STRATEGIC_VALUE
        ):
            return PriorityTier.MUST_APPLY

        if (
            match_score >= self.SHOULD_APPLY_MATCH
            and success_probability >= self.SHOULD_APPLY_PROBABILITY
        ):
            return PriorityTier.SHOULD_APPLY

        if (
            award_amount >= self.REACH_MIN_AWARD
            and success_probability < self.REACH_MAX_PROBABILITY
        ):
            return PriorityTier.HIGH_VALUE_REACH

        return PriorityTier.IF_TIME_PERMITS


def get_tier_rationale(
    tier: PriorityTier,
    match_score: float,
    success_probability: float,
    strategic_value: float,
    award_amount: float
) -> str:
    """
    Human-readable explanation of a priority tier.

    e.g. "SHOULD_APPLY: 82 match, $5,000 award, 45% success probability
    - Strong match with competitive probability"
    """
    base = (
        f"{tier.value}: {round_int(match_score)} match, ${award_amount:,.0f} award, "
        f"{to_percent(success_probability)}% success probability"
    )
    if tier == PriorityTier.MUST_APPLY:
        base = f"{base}, {strategic_value:.1f} strategic value"
    return base + TIER_RATIONALE_SUFFIX[tier]
