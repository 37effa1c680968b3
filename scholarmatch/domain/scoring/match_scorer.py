"""
Match Scorer

Central scoring engine. Runs the full pipeline for a (profile, scholarship)
pair: dimension scores, weighted match score, competition, probability,
historical refinement, tiers, effort, strategic value and priority.
"""

import logging
from typing import Dict, List, Optional

from scholarmatch.domain.scoring.interfaces import (
    Dimension,
    DimensionResult,
    MatchResult,
    PriorityTier,
    ScholarshipData,
    ScoreBreakdown,
    ScoringFactor,
    StudentProfile,
)
from scholarmatch.domain.scoring.factors import (
    AcademicFactor,
    DemographicFactor,
    MajorFieldFactor,
    ExperienceFactor,
    FinancialFactor,
    SpecialCriteriaFactor,
)
from scholarmatch.domain.scoring.competition import CompetitionEstimator
from scholarmatch.domain.scoring.effort import EffortEstimator
from scholarmatch.domain.scoring.gap_analysis import GapReport, build_gap_report
from scholarmatch.domain.scoring.historical import (
    adjust_probability_for_history,
    compare_to_historical_winners,
)
from scholarmatch.domain.scoring.numeric import clamp_score, to_fraction
from scholarmatch.domain.scoring.priority import (
    PRIORITY_ORDER,
    PriorityAssigner,
    get_tier_rationale,
)
from scholarmatch.domain.scoring.probability import SuccessPredictor
from scholarmatch.domain.scoring.strategic_value import calculate_strategic_value
from scholarmatch.domain.scoring.tier_classifier import (
    StrategicValueClassifier,
    SuccessTierClassifier,
)
from scholarmatch.domain.scoring.weights import ScoringWeights


logger = logging.getLogger(__name__)


class MatchScorer:
    """
    Scholarship match scoring engine.

    Stateless apart from its weights and factor instances, so one instance
    can be shared across requests.
    """

    def __init__(
        self,
        weights: Optional[ScoringWeights] = None,
        factors: Optional[List[ScoringFactor]] = None
    ):
        """
        Initialize scorer.

        Args:
            weights: Dimension weights. If None, uses ScoringWeights.baseline().
            factors: Dimension scorers. If None, uses the six defaults.
        """
        self._weights = weights or ScoringWeights.baseline()
        self._factors: Dict[Dimension, ScoringFactor] = {
            factor.dimension: factor for factor in (factors or self._default_factors())
        }
        self._competition = CompetitionEstimator()
        self._effort = EffortEstimator()
        self._predictor = SuccessPredictor()
        self._success_tiers = SuccessTierClassifier()
        self._value_tiers = StrategicValueClassifier()
        self._priority = PriorityAssigner()

    def _default_factors(self) -> List[ScoringFactor]:
        return [
            AcademicFactor(),
            DemographicFactor(),
            MajorFieldFactor(),
            ExperienceFactor(),
            FinancialFactor(),
            SpecialCriteriaFactor(),
        ]

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    def score_dimensions(
        self,
        profile: StudentProfile,
        scholarship: ScholarshipData
    ) -> ScoreBreakdown:
        """Score every dimension; a dimension without a factor scores 100."""
        results: Dict[Dimension, DimensionResult] = {}
        for dimension in Dimension:
            factor = self._factors.get(dimension)
            if factor is None:
                results[dimension] = DimensionResult(
                    dimension=dimension, score=100, applicable=False
                )
                continue
            results[dimension] = factor.calculate(profile, scholarship)
        return ScoreBreakdown(dimensions=results, weights_used=self._weights.to_dict())

    def calculate_match_score(self, breakdown: ScoreBreakdown) -> int:
        """Weighted sum of dimension scores, rounded half-up, 0-100."""
        total = sum(
            result.score * self._weights.weight_for(dimension)
            for dimension, result in breakdown.dimensions.items()
        )
        return clamp_score(total)

    def score_scholarship(
        self,
        profile: StudentProfile,
        scholarship: ScholarshipData
    ) -> MatchResult:
        """
        Score a single scholarship for the student.

        Returns:
            MatchResult with every derived field populated
        """
        breakdown = self.score_dimensions(profile, scholarship)
        match_score = self.calculate_match_score(breakdown)

        competition = self._competition.calculate(scholarship)
        probability_breakdown = self._predictor.detailed(
            match_score, profile.strength_score, competition
        )

        comparison = compare_to_historical_winners(
            profile, scholarship.historical_winner_profiles
        )
        adjustment = adjust_probability_for_history(
            probability_breakdown.final_probability, comparison
        )
        probability = to_fraction(adjustment.probability)

        effort = self._effort.estimate(scholarship)
        value = calculate_strategic_value(
            scholarship.award_amount, probability, effort.level
        )
        priority = self._priority.assign(
            match_score, probability, value.strategic_value, scholarship.award_amount
        )

        logger.debug(
            "Scored %s: match=%d probability=%.2f value=%.2f priority=%s",
            scholarship.name, match_score, probability, value.strategic_value, priority.value,
        )

        return MatchResult(
            scholarship=scholarship,
            overall_match_score=match_score,
            breakdown=breakdown,
            competition_factor=competition,
            success_probability=probability,
            probability_breakdown=probability_breakdown,
            historical_comparison=comparison,
            historical_adjustment=adjustment,
            success_tier=self._success_tiers.classify(adjustment.probability),
            effort=effort,
            strategic_value=value.strategic_value,
            strategic_value_tier=self._value_tiers.classify(value.strategic_value),
            priority_tier=priority,
            rationale=get_tier_rationale(
                priority,
                match_score,
                probability,
                value.strategic_value,
                scholarship.award_amount,
            ),
        )

    def score_scholarships(
        self,
        profile: StudentProfile,
        scholarships: List[ScholarshipData]
    ) -> List[MatchResult]:
        """
        Score multiple scholarships.

        Returns:
            Results ordered by priority tier, then strategic value and
            match score (both descending)
        """
        scored = [self.score_scholarship(profile, s) for s in scholarships]
        return sorted(
            scored,
            key=lambda r: (
                PRIORITY_ORDER[r.priority_tier],
                -r.strategic_value,
                -r.overall_match_score,
            ),
        )

    def analyze_gaps(self, profile: StudentProfile, result: MatchResult) -> GapReport:
        """Missing criteria, assessment, positioning and recommendations."""
        return build_gap_report(
            result.breakdown.dimensions,
            result.overall_match_score,
            profile,
            result.scholarship.eligibility_criteria,
        )


def count_by_priority_tier(results: List[MatchResult]) -> Dict[PriorityTier, int]:
    """Count results per tier; every tier is present, zeros included."""
    counts = {tier: 0 for tier in PriorityTier}
    for result in results:
        counts[result.priority_tier] += 1
    return counts


def filter_by_priority_tier(
    results: List[MatchResult],
    tier: PriorityTier
) -> List[MatchResult]:
    return [r for r in results if r.priority_tier == tier]
