"""
Unit tests for strategic value and the priority tier cascade.
"""

import pytest

from scholarmatch.domain.scoring.interfaces import EffortLevel, PriorityTier
from scholarmatch.domain.scoring.priority import (
    PRIORITY_ORDER,
    PriorityAssigner,
    get_tier_rationale,
)
from scholarmatch.domain.scoring.strategic_value import (
    calculate_strategic_value,
    calculate_strategic_value_with_match_boost,
)


class TestStrategicValue:
    """Tests for the ROI formula."""

    @pytest.mark.parametrize("award,probability,effort,expected", [
        (5000, 0.72, EffortLevel.LOW, 3.6),
        (10000, 0.6, EffortLevel.MEDIUM, 4.2),
        (8000, 0.8, EffortLevel.HIGH, 2.56),
    ])
    def test_formula(self, award, probability, effort, expected):
        result = calculate_strategic_value(award, probability, effort)
        assert result.strategic_value == pytest.approx(expected)

    def test_intermediate_values(self):
        result = calculate_strategic_value(10000, 0.6, EffortLevel.MEDIUM)
        assert result.expected_value == pytest.approx(6000)
        assert result.effort_adjusted_value == pytest.approx(4200)

    def test_capped_at_ten(self):
        result = calculate_strategic_value(100000, 0.95, EffortLevel.LOW)
        assert result.strategic_value == 10.0

    @pytest.mark.parametrize("award,probability", [(0, 0.5), (-100, 0.5), (5000, 0)])
    def test_zero_for_nothing_to_gain(self, award, probability):
        assert calculate_strategic_value(award, probability, EffortLevel.LOW).strategic_value == 0.0

    def test_monotone_in_effort(self):
        values = [
            calculate_strategic_value(5000, 0.5, level).strategic_value
            for level in (EffortLevel.LOW, EffortLevel.MEDIUM, EffortLevel.HIGH)
        ]
        assert values == sorted(values, reverse=True)

    @pytest.mark.parametrize("effort", list(EffortLevel))
    @pytest.mark.parametrize("award", [5000, 30000])
    def test_monotone_in_probability(self, award, effort):
        """5000 stays below the cap; 30000 reaches it part way up."""
        probabilities = [p / 100 for p in range(5, 100, 5)]
        values = [
            calculate_strategic_value(award, p, effort).strategic_value for p in probabilities
        ]
        assert values == sorted(values), f"Not monotone for award={award}, effort={effort}"
        assert max(values) <= 10.0

    @pytest.mark.parametrize("effort", list(EffortLevel))
    @pytest.mark.parametrize("probability", [0.05, 0.5, 0.95])
    def test_monotone_in_award(self, probability, effort):
        awards = [0, 500, 1000, 5000, 10000, 20000, 50000, 100000, 500000]
        values = [
            calculate_strategic_value(a, probability, effort).strategic_value for a in awards
        ]
        assert values == sorted(values), f"Not monotone for p={probability}, effort={effort}"
        assert max(values) <= 10.0

    def test_flat_once_capped(self):
        capped = [
            calculate_strategic_value(award, 0.95, EffortLevel.LOW).strategic_value
            for award in (20000, 50000, 100000)
        ]
        assert capped == [10.0, 10.0, 10.0]

    def test_match_boost(self):
        boosted = calculate_strategic_value_with_match_boost(5000, 0.72, EffortLevel.LOW, 100)
        assert boosted.strategic_value == pytest.approx(3.96)

    def test_match_boost_zero_match_is_base(self):
        base = calculate_strategic_value(5000, 0.72, EffortLevel.LOW)
        boosted = calculate_strategic_value_with_match_boost(5000, 0.72, EffortLevel.LOW, 0)
        assert boosted.strategic_value == pytest.approx(base.strategic_value)


class TestPriorityAssigner:
    """Tests for the ordered rule cascade."""

    @pytest.fixture
    def assigner(self):
        return PriorityAssigner()

    def test_must_apply(self, assigner):
        assert assigner.assign(94, 0.72, 5.0, 5000) == PriorityTier.MUST_APPLY

    def test_must_apply_needs_strategic_value(self, assigner):
        assert assigner.assign(95, 0.80, 2.9, 3000) == PriorityTier.SHOULD_APPLY

    def test_should_apply(self, assigner):
        assert assigner.assign(80, 0.45, 1.0, 5000) == PriorityTier.SHOULD_APPLY

    def test_high_value_reach(self, assigner):
        assert assigner.assign(40, 0.10, 0.8, 20000) == PriorityTier.HIGH_VALUE_REACH

    def test_reach_requires_low_probability(self, assigner):
        assert assigner.assign(40, 0.30, 1.2, 20000) == PriorityTier.IF_TIME_PERMITS

    def test_reach_requires_large_award(self, assigner):
        assert assigner.assign(40, 0.10, 0.1, 9999) == PriorityTier.IF_TIME_PERMITS

    def test_first_matching_rule_wins(self, assigner):
        # Also satisfies SHOULD_APPLY
        assert assigner.assign(90, 0.70, 9.0, 50000) == PriorityTier.MUST_APPLY

    def test_display_order(self):
        ordered = sorted(PriorityTier, key=PRIORITY_ORDER.__getitem__)
        assert ordered == [
            PriorityTier.MUST_APPLY,
            PriorityTier.SHOULD_APPLY,
            PriorityTier.HIGH_VALUE_REACH,
            PriorityTier.IF_TIME_PERMITS,
        ]


class TestTierRationale:
    """Tests for the rationale text."""

    def test_should_apply_rationale(self):
        text = get_tier_rationale(PriorityTier.SHOULD_APPLY, 82, 0.45, 2.0, 5000)
        assert text == (
            "SHOULD_APPLY: 82 match, $5,000 award, 45% success probability"
            " - Strong match with competitive probability"
        )

    def test_must_apply_mentions_strategic_value(self):
        text = get_tier_rationale(PriorityTier.MUST_APPLY, 94, 0.72, 5.0, 5000)
        assert text == (
            "MUST_APPLY: 94 match, $5,000 award, 72% success probability, "
            "5.0 strategic value - Exceptional match with high probability and strong ROI"
        )

    def test_if_time_permits_rationale(self):
        text = get_tier_rationale(PriorityTier.IF_TIME_PERMITS, 60, 0.3, 0.3, 1000)
        assert text.endswith(" - Decent match, apply if time allows")
