"""
Unit tests for the competition factor and effort estimator.
"""

import pytest

from scholarmatch.domain.scoring.competition import CompetitionEstimator
from scholarmatch.domain.scoring.effort import (
    EFFORT_MULTIPLIERS,
    EffortEstimator,
    estimate_time_investment,
)
from scholarmatch.domain.scoring.interfaces import (
    EffortBreakdown,
    EffortLevel,
    ScholarshipData,
)


class TestCompetitionEstimator:
    """Tests for acceptance rate / pool ratio / default resolution."""

    @pytest.fixture
    def estimator(self):
        return CompetitionEstimator()

    def test_acceptance_rate_used_directly(self, estimator):
        scholarship = ScholarshipData(name="A", acceptance_rate=0.42, applicant_pool_size=10)
        assert estimator.calculate(scholarship) == pytest.approx(0.42)

    @pytest.mark.parametrize("rate,expected", [(0.0, 0.05), (1.0, 0.95), (0.99, 0.95)])
    def test_acceptance_rate_clamped(self, estimator, rate, expected):
        scholarship = ScholarshipData(name="A", acceptance_rate=rate)
        assert estimator.calculate(scholarship) == pytest.approx(expected)

    def test_pool_ratio(self, estimator):
        scholarship = ScholarshipData(name="A", number_of_awards=5, applicant_pool_size=1000)
        assert estimator.calculate(scholarship) == pytest.approx(0.5)

    def test_pool_ratio_capped_lower_than_acceptance_rate(self, estimator):
        scholarship = ScholarshipData(name="A", number_of_awards=1, applicant_pool_size=50)
        assert estimator.calculate(scholarship) == pytest.approx(0.80)

    def test_huge_pool_floors(self, estimator):
        scholarship = ScholarshipData(name="A", number_of_awards=1, applicant_pool_size=10000)
        assert estimator.calculate(scholarship) == pytest.approx(0.05)

    def test_zero_awards_floors(self, estimator):
        scholarship = ScholarshipData(name="A", number_of_awards=0, applicant_pool_size=100)
        assert estimator.calculate(scholarship) == pytest.approx(0.05)

    @pytest.mark.parametrize("pool", [None, 0, -10])
    def test_default_without_data(self, estimator, pool):
        scholarship = ScholarshipData(name="A", applicant_pool_size=pool)
        assert estimator.calculate(scholarship) == pytest.approx(0.30)

    def test_always_in_range(self, estimator):
        for awards, pool in [(1, 1), (100, 1), (1, 10 ** 9)]:
            scholarship = ScholarshipData(name="A", number_of_awards=awards, applicant_pool_size=pool)
            factor = estimator.calculate(scholarship)
            assert 0.05 <= factor <= 0.95, f"{awards}/{pool} gave {factor}"


class TestEffortEstimator:
    """Tests for effort classification."""

    @pytest.fixture
    def estimator(self):
        return EffortEstimator()

    @pytest.mark.parametrize("essays,documents,recommendations,expected", [
        (0, 0, 0, EffortLevel.LOW),
        (1, 2, 0, EffortLevel.LOW),
        (2, 0, 0, EffortLevel.MEDIUM),
        (0, 3, 0, EffortLevel.MEDIUM),
        (0, 4, 0, EffortLevel.MEDIUM),
        (0, 0, 1, EffortLevel.MEDIUM),
        (3, 2, 0, EffortLevel.HIGH),
        (0, 5, 0, EffortLevel.HIGH),
        (0, 0, 2, EffortLevel.HIGH),
    ])
    def test_classify(self, estimator, essays, documents, recommendations, expected):
        breakdown = EffortBreakdown(
            essays=essays, documents=documents, recommendations=recommendations
        )
        assert estimator.classify(breakdown) == expected

    def test_estimate_from_scholarship(self, estimator):
        scholarship = ScholarshipData(
            name="A",
            essay_prompts=["One", "Two"],
            required_documents=["Transcript"],
        )
        estimation = estimator.estimate(scholarship)
        assert estimation.level == EffortLevel.MEDIUM
        assert estimation.breakdown.essays == 2
        assert estimation.breakdown.documents == 1
        assert estimation.multiplier == pytest.approx(0.7)

    def test_negative_recommendations_treated_as_zero(self, estimator):
        scholarship = ScholarshipData(name="A", recommendation_count=-3)
        estimation = estimator.estimate(scholarship)
        assert estimation.breakdown.recommendations == 0
        assert estimation.level == EffortLevel.LOW

    def test_multipliers(self):
        assert EFFORT_MULTIPLIERS == {
            EffortLevel.LOW: 1.0,
            EffortLevel.MEDIUM: 0.7,
            EffortLevel.HIGH: 0.4,
        }

    def test_time_investment(self):
        assert estimate_time_investment(EffortLevel.LOW) == (2, 3)
        assert estimate_time_investment(EffortLevel.HIGH) == (8, 12)
