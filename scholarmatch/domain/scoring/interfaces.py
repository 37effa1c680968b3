"""
Scoring Interfaces for ScholarMatch

Defines protocols and data models for the matching & scoring engine.
Every record here is an immutable input or a derived output; the engine
never mutates what it is handed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from datetime import date
from enum import Enum
from typing import Optional, List, Dict, Any, Mapping, Protocol, runtime_checkable

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from scholarmatch.domain.scoring.numeric import average_score, to_percent
from scholarmatch.infrastructure.exceptions import CriteriaParseError


class Dimension(str, Enum):
    """The six independent eligibility dimensions."""
    ACADEMIC = "academic"
    DEMOGRAPHIC = "demographic"
    MAJOR_FIELD = "major_field"
    EXPERIENCE = "experience"
    FINANCIAL = "financial"
    SPECIAL = "special"

    @property
    def display_name(self) -> str:
        return _DIMENSION_NAMES[self]


_DIMENSION_NAMES = {
    Dimension.ACADEMIC: "Academic",
    Dimension.DEMOGRAPHIC: "Demographic",
    Dimension.MAJOR_FIELD: "Major/Field",
    Dimension.EXPERIENCE: "Experience",
    Dimension.FINANCIAL: "Financial",
    Dimension.SPECIAL: "Special Criteria",
}


class EffortLevel(str, Enum):
    """Application effort classification."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class SuccessTier(str, Enum):
    """Qualitative bucket for the probability of winning."""
    STRONG_MATCH = "STRONG_MATCH"
    COMPETITIVE_MATCH = "COMPETITIVE_MATCH"
    REACH = "REACH"
    LONG_SHOT = "LONG_SHOT"


class StrategicValueTier(str, Enum):
    """ROI bucket for the strategic value score."""
    BEST_BET = "BEST_BET"
    HIGH_VALUE = "HIGH_VALUE"
    MEDIUM_VALUE = "MEDIUM_VALUE"
    LOW_VALUE = "LOW_VALUE"


class PriorityTier(str, Enum):
    """Single actionable recommendation bucket."""
    MUST_APPLY = "MUST_APPLY"
    SHOULD_APPLY = "SHOULD_APPLY"
    IF_TIME_PERMITS = "IF_TIME_PERMITS"
    HIGH_VALUE_REACH = "HIGH_VALUE_REACH"


class FinancialNeedLevel(str, Enum):
    """Ordered financial need levels (LOW < MODERATE < HIGH < VERY_HIGH)."""
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"
    VERY_HIGH = "VERY_HIGH"

    @property
    def rank(self) -> int:
        return _NEED_RANKS[self]


_NEED_RANKS = {
    FinancialNeedLevel.LOW: 1,
    FinancialNeedLevel.MODERATE: 2,
    FinancialNeedLevel.HIGH: 3,
    FinancialNeedLevel.VERY_HIGH: 4,
}


def _from_mapping(cls, payload: Optional[Mapping[str, Any]]):
    """Build a dataclass from a mapping, ignoring unknown keys."""
    if payload is None:
        return None
    if not isinstance(payload, Mapping):
        raise TypeError(f"{cls.__name__} expects an object, got {type(payload).__name__}")
    known = {f.name for f in fields(cls)}
    return cls(**{key: value for key, value in payload.items() if key in known})


# ============================================================================
# Eligibility criteria (one record per dimension, every field optional)
# ============================================================================

@dataclass(frozen=True)
class AcademicCriteria:
    min_gpa: Optional[float] = None
    max_gpa: Optional[float] = None
    gpa_scale: float = 4.0  # Scale min_gpa/max_gpa are expressed in
    min_sat: Optional[int] = None  # 400-1600
    max_sat: Optional[int] = None
    min_act: Optional[int] = None  # 1-36
    max_act: Optional[int] = None
    class_rank_percentile: Optional[float] = None  # Top X%


@dataclass(frozen=True)
class DemographicCriteria:
    required_gender: Optional[str] = None  # "Any" means no requirement
    required_ethnicity: List[str] = field(default_factory=list)
    required_state: List[str] = field(default_factory=list)
    required_city: List[str] = field(default_factory=list)
    age_min: Optional[int] = None
    age_max: Optional[int] = None


@dataclass(frozen=True)
class MajorFieldCriteria:
    eligible_majors: List[str] = field(default_factory=list)
    excluded_majors: List[str] = field(default_factory=list)
    required_field_of_study: List[str] = field(default_factory=list)
    career_goals_keywords: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ExperienceCriteria:
    min_volunteer_hours: Optional[float] = None
    leadership_required: Optional[bool] = None
    required_extracurriculars: List[str] = field(default_factory=list)
    min_work_experience_months: Optional[int] = None
    awards_honors_required: Optional[bool] = None


@dataclass(frozen=True)
class FinancialCriteria:
    requires_financial_need: Optional[bool] = None
    financial_need_level: Optional[FinancialNeedLevel] = None
    pell_grant_required: Optional[bool] = None
    max_efc: Optional[float] = None

    def __post_init__(self) -> None:
        if isinstance(self.financial_need_level, str):
            object.__setattr__(
                self, "financial_need_level", FinancialNeedLevel(self.financial_need_level)
            )


@dataclass(frozen=True)
class SpecialCriteria:
    first_generation_required: Optional[bool] = None
    military_affiliation: Optional[str] = None  # "Any" means no requirement
    disability_required: Optional[bool] = None
    citizenship_required: Optional[str] = None  # "Any" means no requirement


@dataclass(frozen=True)
class EligibilityCriteria:
    """
    Scholarship eligibility partitioned into the six dimensions.

    A missing dimension (None) means "no requirement" and scores 100.
    """
    academic: Optional[AcademicCriteria] = None
    demographic: Optional[DemographicCriteria] = None
    major_field: Optional[MajorFieldCriteria] = None
    experience: Optional[ExperienceCriteria] = None
    financial: Optional[FinancialCriteria] = None
    special: Optional[SpecialCriteria] = None

    def for_dimension(self, dimension: Dimension):
        """Return the criteria record for a dimension (or None)."""
        return getattr(self, dimension.value)

    @classmethod
    def parse(cls, raw: Any) -> "EligibilityCriteria":
        """
        Parse criteria as stored by the persistence layer.

        Accepts an already-built record, a mapping, or a JSON string.
        Anything else is treated as "no criteria". Field types are checked
        the same way for every form: "3.5" becomes 3.5, but a bare string
        where a list is expected is rejected.

        Raises:
            CriteriaParseError: If the criteria cannot be decoded into the
                dimension records
        """
        if isinstance(raw, EligibilityCriteria):
            return raw
        try:
            if isinstance(raw, str):
                return _CRITERIA_ADAPTER.validate_json(raw)
            if isinstance(raw, Mapping):
                return _CRITERIA_ADAPTER.validate_python(dict(raw))
        except PydanticValidationError as e:
            raise CriteriaParseError(
                f"Invalid eligibility criteria: {e}",
                field="eligibility_criteria",
                original_error=e,
            )
        return cls()


_CRITERIA_ADAPTER = TypeAdapter(EligibilityCriteria)


# ============================================================================
# Profile and scholarship records
# ============================================================================

@dataclass(frozen=True)
class WorkExperience:
    title: str
    months: int = 0


@dataclass(frozen=True)
class StudentProfile:
    """
    Read-only view of a student profile for scoring.

    None (or an empty list) means the student has not provided the value.
    """
    # Academic
    gpa: Optional[float] = None
    gpa_scale: float = 4.0
    sat_score: Optional[int] = None
    act_score: Optional[int] = None
    class_rank: Optional[int] = None
    class_size: Optional[int] = None

    # Demographic
    gender: Optional[str] = None
    age: Optional[int] = None
    state: Optional[str] = None
    city: Optional[str] = None
    citizenship: Optional[str] = None
    ethnicity: List[str] = field(default_factory=list)

    # Major / field
    intended_major: Optional[str] = None
    field_of_study: Optional[str] = None
    career_goals: Optional[str] = None

    # Experience
    volunteer_hours: Optional[float] = None
    extracurriculars: List[str] = field(default_factory=list)
    work_experience: List[WorkExperience] = field(default_factory=list)
    leadership_roles: List[str] = field(default_factory=list)
    awards_honors: List[str] = field(default_factory=list)

    # Financial
    financial_need: Optional[FinancialNeedLevel] = None
    pell_grant_eligible: Optional[bool] = None
    efc_range: Optional[str] = None  # "0-5000", "5001-10000", ...

    # Special circumstances
    first_generation: Optional[bool] = None
    military_affiliation: Optional[str] = None
    disabilities: Optional[str] = None

    # Narrative + derived (computed by the profile module)
    personal_statement: Optional[str] = None
    strength_score: float = 50.0  # 0-100, 50 = average applicant
    completion_percentage: float = 0.0

    def __post_init__(self) -> None:
        if isinstance(self.financial_need, str):
            object.__setattr__(self, "financial_need", FinancialNeedLevel(self.financial_need))
        work = [
            WorkExperience(**item) if isinstance(item, Mapping) else item
            for item in self.work_experience
        ]
        object.__setattr__(self, "work_experience", work)

    def gpa_on_scale(self, scale: float) -> Optional[float]:
        """GPA converted onto another scale (e.g. 4.5 of 5.0 -> 3.6 of 4.0)."""
        if self.gpa is None:
            return None
        if not self.gpa_scale or self.gpa_scale <= 0:
            return self.gpa
        return self.gpa * scale / self.gpa_scale

    @property
    def total_work_months(self) -> int:
        return sum(max(0, job.months) for job in self.work_experience)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "StudentProfile":
        return _from_mapping(cls, payload)


@dataclass(frozen=True)
class HistoricalWinnerProfile:
    """Aggregate statistics about past winners of a scholarship."""
    average_gpa: Optional[float] = None
    average_sat: Optional[float] = None
    average_act: Optional[float] = None
    average_strength: Optional[float] = None
    common_majors: List[str] = field(default_factory=list)
    sample_size: Optional[int] = None


@dataclass(frozen=True)
class ScholarshipData:
    """
    Scholarship record for scoring.

    Award, requirement and competition metadata plus eligibility criteria.
    """
    name: str
    award_amount: float = 0.0
    award_amount_max: Optional[float] = None
    number_of_awards: int = 1
    deadline: Optional[date] = None
    scholarship_id: Optional[str] = None

    eligibility_criteria: EligibilityCriteria = field(default_factory=EligibilityCriteria)

    # Application requirements
    essay_prompts: List[str] = field(default_factory=list)
    required_documents: List[str] = field(default_factory=list)
    recommendation_count: int = 0

    # Competition metadata
    applicant_pool_size: Optional[int] = None
    acceptance_rate: Optional[float] = None  # 0.0-1.0
    historical_winner_profiles: Optional[HistoricalWinnerProfile] = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "eligibility_criteria", EligibilityCriteria.parse(self.eligibility_criteria)
        )
        if isinstance(self.historical_winner_profiles, Mapping):
            object.__setattr__(
                self,
                "historical_winner_profiles",
                _from_mapping(HistoricalWinnerProfile, self.historical_winner_profiles),
            )

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "ScholarshipData":
        return _from_mapping(cls, payload)


# ============================================================================
# Derived outputs
# ============================================================================

@dataclass(frozen=True)
class CriterionCheck:
    """One evaluated criterion inside a dimension."""
    name: str
    score: int  # 0-100
    message: str

    @property
    def met(self) -> bool:
        return self.score >= 100


@dataclass(frozen=True)
class DimensionResult:
    """
    Score for one dimension plus the met/missing detail.

    The missing list feeds the gap-analysis / goal-tracking collaborator.
    """
    dimension: Dimension
    score: int  # 0-100
    applicable: bool = True  # False when the scholarship has no criteria here
    met_criteria: List[str] = field(default_factory=list)
    missing_criteria: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dimension": self.dimension.value,
            "score": self.score,
            "applicable": self.applicable,
            "met_criteria": list(self.met_criteria),
            "missing_criteria": list(self.missing_criteria),
        }


@dataclass(frozen=True)
class ScoreBreakdown:
    """
    Transparent breakdown of the aggregate match score.

    Returned to the presentation layer for progress bars.
    """
    dimensions: Dict[Dimension, DimensionResult]
    weights_used: Dict[str, float] = field(default_factory=dict)

    def score_for(self, dimension: Dimension) -> int:
        return self.dimensions[dimension].score

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for API response."""
        return {dim.value: result.score for dim, result in self.dimensions.items()}


@dataclass(frozen=True)
class EffortBreakdown:
    essays: int = 0
    documents: int = 0
    recommendations: int = 0


@dataclass(frozen=True)
class EffortEstimation:
    level: EffortLevel
    breakdown: EffortBreakdown
    multiplier: float


@dataclass(frozen=True)
class ProbabilityBreakdown:
    """
    Stage-by-stage view of the success probability calculation.

    Stage values are independently rounded percents and may fall outside
    5-95; only final_probability is clamped.
    """
    final_probability: int  # percent, 5-95
    base_probability: int  # percent, the match score
    after_competition: int  # percent
    after_strength_adjustment: int  # percent, before clamping
    competition_factor: float  # 2 decimals
    strength_adjustment: int  # percent points


@dataclass(frozen=True)
class MetricComparison:
    student_value: float
    average_value: float
    difference: float
    is_above: bool


@dataclass(frozen=True)
class HistoricalComparison:
    """Student vs past winners; has_data=False when nothing to compare."""
    has_data: bool
    gpa: Optional[MetricComparison] = None
    sat: Optional[MetricComparison] = None
    act: Optional[MetricComparison] = None
    strength: Optional[MetricComparison] = None
    overall_similarity: Optional[int] = None  # 0-100
    summary: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class HistoricalAdjustment:
    """Outcome of applying historical data to a probability (percent)."""
    applied: bool
    adjustment: int  # percent points
    probability: int  # percent, 5-95
    reason: str


@dataclass(frozen=True)
class StrategicValueResult:
    strategic_value: float  # 0-10
    expected_value: float  # dollars
    effort_adjusted_value: float  # dollars


@dataclass(frozen=True)
class TierDisplay:
    """Presentation metadata attached to a tier. Not part of scoring."""
    label: str
    description: str
    color: str
    icon: str = ""


@dataclass(frozen=True)
class MatchResult:
    """
    Fully derived match record for one (profile, scholarship) pair.

    success_probability is the canonical fraction (0.05-0.95); use
    success_probability_percent at display/serialization boundaries.
    """
    scholarship: ScholarshipData
    overall_match_score: int
    breakdown: ScoreBreakdown
    competition_factor: float
    success_probability: float
    probability_breakdown: ProbabilityBreakdown
    historical_comparison: HistoricalComparison
    historical_adjustment: HistoricalAdjustment
    success_tier: SuccessTier
    effort: EffortEstimation
    strategic_value: float
    strategic_value_tier: StrategicValueTier
    priority_tier: PriorityTier
    rationale: str = ""

    @property
    def success_probability_percent(self) -> int:
        return to_percent(self.success_probability)

    @property
    def effort_level(self) -> EffortLevel:
        return self.effort.level

    @property
    def missing_criteria(self) -> Dict[Dimension, List[str]]:
        return {
            dim: list(result.missing_criteria)
            for dim, result in self.breakdown.dimensions.items()
            if result.missing_criteria
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API response format."""
        return {
            "scholarship_id": self.scholarship.scholarship_id,
            "name": self.scholarship.name,
            "award_amount": self.scholarship.award_amount,
            "overall_match_score": self.overall_match_score,
            "dimension_scores": self.breakdown.to_dict(),
            "competition_factor": self.competition_factor,
            "success_probability": self.success_probability,
            "success_probability_percent": self.success_probability_percent,
            "success_tier": self.success_tier.value,
            "effort_level": self.effort.level.value,
            "effort_breakdown": {
                "essays": self.effort.breakdown.essays,
                "documents": self.effort.breakdown.documents,
                "recommendations": self.effort.breakdown.recommendations,
            },
            "strategic_value": round(self.strategic_value, 2),
            "strategic_value_tier": self.strategic_value_tier.value,
            "priority_tier": self.priority_tier.value,
            "rationale": self.rationale,
        }


# ============================================================================
# Scoring factor protocol
# ============================================================================

@runtime_checkable
class ScoringFactor(Protocol):
    """
    Protocol for dimension scorers.

    Each factor scores one dimension 0-100 and reports met/missing criteria.
    """

    @property
    def dimension(self) -> Dimension:
        """Dimension this factor scores."""
        ...

    def calculate(
        self,
        profile: StudentProfile,
        scholarship: ScholarshipData
    ) -> DimensionResult:
        ...


class BaseScoringFactor(ABC):
    """
    Base class for dimension scorers.

    Subclasses implement evaluate(), returning one CriterionCheck per
    criterion that is actually present. This class applies the shared rules:
    no criteria means 100, and multiple criteria are averaged unweighted.
    """

    NO_REQUIREMENT_MESSAGE = "No requirements in this dimension"

    @property
    @abstractmethod
    def dimension(self) -> Dimension:
        pass

    @abstractmethod
    def evaluate(self, profile: StudentProfile, criteria: Any) -> List[CriterionCheck]:
        pass

    def calculate(
        self,
        profile: StudentProfile,
        scholarship: ScholarshipData
    ) -> DimensionResult:
        criteria = scholarship.eligibility_criteria.for_dimension(self.dimension)
        if criteria is None:
            return self._not_applicable()
        return self.combine(self.evaluate(profile, criteria))

    def combine(self, checks: List[CriterionCheck]) -> DimensionResult:
        if not checks:
            return self._not_applicable()
        return DimensionResult(
            dimension=self.dimension,
            score=average_score(check.score for check in checks),
            met_criteria=[c.message for c in checks if c.met],
            missing_criteria=[c.message for c in checks if not c.met],
        )

    def _not_applicable(self) -> DimensionResult:
        return DimensionResult(
            dimension=self.dimension,
            score=100,
            applicable=False,
            met_criteria=[self.NO_REQUIREMENT_MESSAGE],
        )
