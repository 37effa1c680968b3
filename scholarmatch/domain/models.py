"""
Domain Models for ScholarMatch

Pydantic request/response schemas for the HTTP surface. Requests convert
into the immutable scoring records via to_domain(); responses are built
from MatchResult.
"""

from dataclasses import asdict
from datetime import date
from typing import Optional, List, Dict, Union
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from scholarmatch.domain.scoring.interfaces import (
    Dimension,
    EffortLevel,
    EligibilityCriteria,
    FinancialNeedLevel,
    MatchResult,
    PriorityTier,
    ScholarshipData,
    StrategicValueTier,
    StudentProfile,
    SuccessTier,
)
from scholarmatch.domain.scoring.gap_analysis import GapReport
from scholarmatch.infrastructure.exceptions import CriteriaParseError


# ============================================================================
# Requests
# ============================================================================

class WorkExperienceInput(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    months: int = Field(0, ge=0)


class StudentProfileInput(BaseModel):
    """Student profile as submitted by the profile module."""
    gpa: Optional[float] = Field(None, ge=0.0, le=10.0)
    gpa_scale: float = Field(4.0, gt=0.0, le=10.0)
    sat_score: Optional[int] = Field(None, ge=400, le=1600)
    act_score: Optional[int] = Field(None, ge=1, le=36)
    class_rank: Optional[int] = Field(None, ge=1)
    class_size: Optional[int] = Field(None, ge=1)

    gender: Optional[str] = None
    age: Optional[int] = Field(None, ge=0, le=120)
    state: Optional[str] = None
    city: Optional[str] = None
    citizenship: Optional[str] = None
    ethnicity: List[str] = Field(default_factory=list)

    intended_major: Optional[str] = None
    field_of_study: Optional[str] = None
    career_goals: Optional[str] = Field(None, max_length=5000)

    volunteer_hours: Optional[float] = Field(None, ge=0.0)
    extracurriculars: List[str] = Field(default_factory=list)
    work_experience: List[WorkExperienceInput] = Field(default_factory=list)
    leadership_roles: List[str] = Field(default_factory=list)
    awards_honors: List[str] = Field(default_factory=list)

    financial_need: Optional[FinancialNeedLevel] = None
    pell_grant_eligible: Optional[bool] = None
    efc_range: Optional[str] = None

    first_generation: Optional[bool] = None
    military_affiliation: Optional[str] = None
    disabilities: Optional[str] = None

    strength_score: float = Field(50.0, ge=0.0, le=100.0, description="Profile strength, 50 = average")
    completion_percentage: float = Field(0.0, ge=0.0, le=100.0)

    def to_domain(self) -> StudentProfile:
        return StudentProfile.from_mapping(self.model_dump())


class AcademicCriteriaInput(BaseModel):
    min_gpa: Optional[float] = Field(None, ge=0.0)
    max_gpa: Optional[float] = Field(None, ge=0.0)
    gpa_scale: float = Field(4.0, gt=0.0)
    min_sat: Optional[int] = None
    max_sat: Optional[int] = None
    min_act: Optional[int] = None
    max_act: Optional[int] = None
    class_rank_percentile: Optional[float] = Field(None, gt=0.0, le=100.0)


class DemographicCriteriaInput(BaseModel):
    required_gender: Optional[str] = None
    required_ethnicity: List[str] = Field(default_factory=list)
    required_state: List[str] = Field(default_factory=list)
    required_city: List[str] = Field(default_factory=list)
    age_min: Optional[int] = None
    age_max: Optional[int] = None


class MajorFieldCriteriaInput(BaseModel):
    eligible_majors: List[str] = Field(default_factory=list)
    excluded_majors: List[str] = Field(default_factory=list)
    required_field_of_study: List[str] = Field(default_factory=list)
    career_goals_keywords: List[str] = Field(default_factory=list)


class ExperienceCriteriaInput(BaseModel):
    min_volunteer_hours: Optional[float] = None
    leadership_required: Optional[bool] = None
    required_extracurriculars: List[str] = Field(default_factory=list)
    min_work_experience_months: Optional[int] = None
    awards_honors_required: Optional[bool] = None


class FinancialCriteriaInput(BaseModel):
    requires_financial_need: Optional[bool] = None
    financial_need_level: Optional[FinancialNeedLevel] = None
    pell_grant_required: Optional[bool] = None
    max_efc: Optional[float] = None


class SpecialCriteriaInput(BaseModel):
    first_generation_required: Optional[bool] = None
    military_affiliation: Optional[str] = None
    disability_required: Optional[bool] = None
    citizenship_required: Optional[str] = None


class EligibilityCriteriaInput(BaseModel):
    """Criteria per dimension; an omitted dimension has no requirements."""
    academic: Optional[AcademicCriteriaInput] = None
    demographic: Optional[DemographicCriteriaInput] = None
    major_field: Optional[MajorFieldCriteriaInput] = None
    experience: Optional[ExperienceCriteriaInput] = None
    financial: Optional[FinancialCriteriaInput] = None
    special: Optional[SpecialCriteriaInput] = None


class HistoricalWinnerInput(BaseModel):
    average_gpa: Optional[float] = None
    average_sat: Optional[float] = None
    average_act: Optional[float] = None
    average_strength: Optional[float] = None
    common_majors: List[str] = Field(default_factory=list)
    sample_size: Optional[int] = Field(None, ge=0)


class ScholarshipInput(BaseModel):
    """
    Scholarship record for scoring.

    eligibility_criteria accepts structured criteria or the JSON string
    stored by the persistence layer.
    """
    scholarship_id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=300)
    award_amount: float = Field(0.0, ge=0.0)
    award_amount_max: Optional[float] = Field(None, ge=0.0)
    number_of_awards: int = Field(1, ge=0)
    deadline: Optional[date] = None

    eligibility_criteria: Union[EligibilityCriteriaInput, str, None] = None

    essay_prompts: List[str] = Field(default_factory=list)
    required_documents: List[str] = Field(default_factory=list)
    recommendation_count: int = Field(0, ge=0)

    applicant_pool_size: Optional[int] = None
    acceptance_rate: Optional[float] = Field(None, ge=0.0, le=1.0)
    historical_winner_profiles: Optional[HistoricalWinnerInput] = None

    @field_validator("name")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Field cannot be empty or whitespace only")
        return v.strip()

    def to_domain(self) -> ScholarshipData:
        """
        Raises:
            CriteriaParseError: If eligibility_criteria is a JSON string that
                is malformed or has fields of the wrong type
        """
        payload = self.model_dump(exclude={"eligibility_criteria"})
        raw = self.eligibility_criteria
        if isinstance(raw, str):
            try:
                raw = EligibilityCriteriaInput.model_validate_json(raw)
            except PydanticValidationError as e:
                raise CriteriaParseError(
                    f"Invalid eligibility criteria: {e}",
                    field="eligibility_criteria",
                    original_error=e,
                )
        if isinstance(raw, EligibilityCriteriaInput):
            raw = raw.model_dump(exclude_none=True)
        criteria = EligibilityCriteria.parse(raw)
        return ScholarshipData.from_mapping({**payload, "eligibility_criteria": criteria})


class ScoreRequest(BaseModel):
    """Score one scholarship for one profile."""
    profile: StudentProfileInput
    scholarship: ScholarshipInput


class BatchScoreRequest(BaseModel):
    """Score many scholarships for one profile."""
    profile: StudentProfileInput
    scholarships: List[ScholarshipInput] = Field(..., min_length=1)
    priority_tier: Optional[PriorityTier] = Field(None, description="Only return this tier")


# ============================================================================
# Responses
# ============================================================================

class DimensionScoreResponse(BaseModel):
    score: int = Field(..., ge=0, le=100)
    applicable: bool
    met_criteria: List[str] = Field(default_factory=list)
    missing_criteria: List[str] = Field(default_factory=list)


class ProbabilityBreakdownResponse(BaseModel):
    final_probability: int
    base_probability: int
    after_competition: int
    after_strength_adjustment: int
    competition_factor: float
    strength_adjustment: int


class HistoricalResponse(BaseModel):
    has_data: bool
    overall_similarity: Optional[int] = None
    adjustment_applied: bool
    adjustment: int
    summary: List[str] = Field(default_factory=list)


class CompetitivePositioningResponse(BaseModel):
    percentile: int = Field(..., ge=0, le=100)
    message: str
    context: str


class GapAnalysisResponse(BaseModel):
    total_criteria: int
    met_criteria: int
    missing_criteria: List[str] = Field(default_factory=list)
    overall_assessment: str
    competitive_positioning: CompetitivePositioningResponse
    recommendations: List[str] = Field(default_factory=list)

    @classmethod
    def from_report(cls, report: GapReport) -> "GapAnalysisResponse":
        return cls(
            total_criteria=report.gaps.total_criteria,
            met_criteria=report.gaps.met_criteria,
            missing_criteria=report.gaps.missing_criteria,
            overall_assessment=report.assessment.value,
            competitive_positioning=CompetitivePositioningResponse(
                **asdict(report.positioning)
            ),
            recommendations=report.recommendations,
        )


class MatchResponse(BaseModel):
    """Derived match record for one scholarship."""
    scholarship_id: Optional[str] = None
    name: str
    award_amount: float
    overall_match_score: int = Field(..., ge=0, le=100)
    dimension_scores: Dict[Dimension, DimensionScoreResponse]
    competition_factor: float
    success_probability: float = Field(..., ge=0.05, le=0.95)
    success_probability_percent: int = Field(..., ge=5, le=95)
    success_tier: SuccessTier
    probability_breakdown: ProbabilityBreakdownResponse
    historical: HistoricalResponse
    effort_level: EffortLevel
    effort_breakdown: Dict[str, int]
    strategic_value: float = Field(..., ge=0.0, le=10.0)
    strategic_value_tier: StrategicValueTier
    priority_tier: PriorityTier
    rationale: str
    gap_analysis: GapAnalysisResponse

    @classmethod
    def from_result(cls, result: MatchResult, report: GapReport) -> "MatchResponse":
        base = result.to_dict()
        base.pop("dimension_scores")
        return cls(
            **base,
            dimension_scores={
                dimension: DimensionScoreResponse(
                    score=dim.score,
                    applicable=dim.applicable,
                    met_criteria=dim.met_criteria,
                    missing_criteria=dim.missing_criteria,
                )
                for dimension, dim in result.breakdown.dimensions.items()
            },
            probability_breakdown=ProbabilityBreakdownResponse(
                **asdict(result.probability_breakdown)
            ),
            historical=HistoricalResponse(
                has_data=result.historical_comparison.has_data,
                overall_similarity=result.historical_comparison.overall_similarity,
                adjustment_applied=result.historical_adjustment.applied,
                adjustment=result.historical_adjustment.adjustment,
                summary=result.historical_comparison.summary,
            ),
            gap_analysis=GapAnalysisResponse.from_report(report),
        )


class BatchScoreResponse(BaseModel):
    results: List[MatchResponse]
    tier_counts: Dict[PriorityTier, int]
    total: int


class WeightsResponse(BaseModel):
    weights: Dict[str, float]
