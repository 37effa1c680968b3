# Scoring module for ScholarMatch
from scholarmatch.domain.scoring.interfaces import (
    Dimension,
    EffortLevel,
    SuccessTier,
    StrategicValueTier,
    PriorityTier,
    FinancialNeedLevel,
    EligibilityCriteria,
    StudentProfile,
    ScholarshipData,
    HistoricalWinnerProfile,
    DimensionResult,
    ScoreBreakdown,
    MatchResult,
    ScoringFactor,
    BaseScoringFactor,
)
from scholarmatch.domain.scoring.weights import ScoringWeights
from scholarmatch.domain.scoring.match_scorer import (
    MatchScorer,
    count_by_priority_tier,
    filter_by_priority_tier,
)

__all__ = [
    "Dimension",
    "EffortLevel",
    "SuccessTier",
    "StrategicValueTier",
    "PriorityTier",
    "FinancialNeedLevel",
    "EligibilityCriteria",
    "StudentProfile",
    "ScholarshipData",
    "HistoricalWinnerProfile",
    "DimensionResult",
    "ScoreBreakdown",
    "MatchResult",
    "ScoringFactor",
    "BaseScoringFactor",
    "ScoringWeights",
    "MatchScorer",
    "count_by_priority_tier",
    "filter_by_priority_tier",
]
