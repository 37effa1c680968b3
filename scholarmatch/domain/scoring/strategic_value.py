"""
Strategic Value Calculator

ROI-style score balancing expected award money against application effort:

    expected_value        = award * probability
    effort_adjusted_value = expected_value * effort multiplier
    strategic_value       = min(10, effort_adjusted_value / 1000)

Monotone increasing in award and probability, decreasing in effort.
"""

from scholarmatch.domain.scoring.interfaces import EffortLevel, StrategicValueResult
from scholarmatch.domain.scoring.effort import EFFORT_MULTIPLIERS


# Dollars of effort-adjusted expected value per strategic value point
VALUE_NORMALIZER = 1000.0
MAX_STRATEGIC_VALUE = 10.0
MATCH_BOOST_FACTOR = 0.1


def calculate_strategic_value(
    award_amount: float,
    success_probability: float,
    effort_level: EffortLevel
) -> StrategicValueResult:
    """
    Strategic value for one scholarship.

    Args:
        award_amount: Award in dollars
        success_probability: Probability of winning as a fraction (0-1)
        effort_level: Output of EffortEstimator
    """
    if award_amount <= 0 or success_probability <= 0:
        return StrategicValueResult(
            strategic_value=0.0,
            expected_value=0.0,
            effort_adjusted_value=0.0,
        )

    expected_value = award_amount * min(success_probability, 1.0)
    effort_adjusted_value = expected_value * EFFORT_MULTIPLIERS[effort_level]
    return StrategicValueResult(
        strategic_value=min(effort_adjusted_value / VALUE_NORMALIZER, MAX_STRATEGIC_VALUE),
        expected_value=expected_value,
        effort_adjusted_value=effort_adjusted_value,
    )


def calculate_strategic_value_with_match_boost(
    award_amount: float,
    success_probability: float,
    effort_level: EffortLevel,
    match_score: float
) -> StrategicValueResult:
    """Variant that rewards closer matches by up to 10%."""
    base = calculate_strategic_value(award_amount, success_probability, effort_level)
    boost = 1 + (max(0.0, min(100.0, match_score)) / 100) * MATCH_BOOST_FACTOR
    return StrategicValueResult(
        strategic_value=min(base.strategic_value * boost, MAX_STRATEGIC_VALUE),
        expected_value=base.expected_value,
        effort_adjusted_value=base.effort_adjusted_value * boost,
    )
