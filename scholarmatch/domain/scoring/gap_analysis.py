"""
Gap Analysis

Rolls the per-dimension met/missing detail up into a single view for the
goal-tracking collaborator, with an overall assessment, actionable
recommendations and a rough competitive position.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List

from scholarmatch.domain.scoring.interfaces import (
    Dimension,
    DimensionResult,
    EligibilityCriteria,
    StudentProfile,
)
from scholarmatch.domain.scoring.numeric import round_int


class OverallAssessment(str, Enum):
    HIGHLY_ELIGIBLE = "Highly Eligible"
    COMPETITIVE = "Competitive"
    NEEDS_IMPROVEMENT = "Needs Improvement"
    NOT_ELIGIBLE = "Not Eligible"


@dataclass(frozen=True)
class GapAnalysis:
    total_criteria: int
    met_criteria: int
    missing_criteria: List[str] = field(default_factory=list)  # "Dimension: criterion"

    @property
    def has_gaps(self) -> bool:
        return bool(self.missing_criteria)


@dataclass(frozen=True)
class CompetitivePositioning:
    percentile: int
    message: str
    context: str


# (minimum percentile, message, context), checked in order
POSITIONING_BANDS = [
    (
        90,
        "Your profile ranks in the top 10% of typical applicants for this scholarship.",
        "Excellent competitive advantage - your credentials exceed typical requirements significantly.",
    ),
    (
        75,
        "Your profile ranks in the top 25% of typical applicants for this scholarship.",
        "Strong competitive position - you have a good chance of success with this scholarship.",
    ),
    (
        50,
        "Your profile ranks in the top 50% of typical applicants for this scholarship.",
        "Competitive position - you meet most requirements and have a reasonable chance of success.",
    ),
    (
        25,
        "Your profile ranks in the bottom 50% of typical applicants for this scholarship.",
        "This scholarship is a reach - consider strengthening your profile or focusing on better-matched opportunities.",
    ),
]
BELOW_TYPICAL = (
    "Your profile ranks below typical applicants for this scholarship.",
    "Significant reach - focus on improving gaps before applying or consider better-matched scholarships.",
)


def build_gap_analysis(results: Iterable[DimensionResult]) -> GapAnalysis:
    """
    Count met/missing criteria across dimensions.

    Dimensions without criteria contribute nothing.
    """
    total = 0
    met = 0
    missing: List[str] = []

    for result in results:
        if not result.applicable:
            continue
        total += len(result.met_criteria) + len(result.missing_criteria)
        met += len(result.met_criteria)
        missing.extend(
            f"{result.dimension.display_name}: {criterion}"
            for criterion in result.missing_criteria
        )

    return GapAnalysis(total_criteria=total, met_criteria=met, missing_criteria=missing)


def determine_overall_assessment(overall_score: float, gaps: GapAnalysis) -> OverallAssessment:
    if overall_score >= 90 and not gaps.has_gaps:
        return OverallAssessment.HIGHLY_ELIGIBLE
    elif overall_score >= 70:
        return OverallAssessment.COMPETITIVE
    elif overall_score >= 50:
        return OverallAssessment.NEEDS_IMPROVEMENT
    else:
        return OverallAssessment.NOT_ELIGIBLE


def calculate_competitive_positioning(overall_score: float) -> CompetitivePositioning:
    """Approximate percentile among typical applicants (90% of the score)."""
    percentile = round_int(overall_score * 0.9)
    for threshold, message, context in POSITIONING_BANDS:
        if percentile >= threshold:
            return CompetitivePositioning(percentile, message, context)
    return CompetitivePositioning(percentile, *BELOW_TYPICAL)


def generate_recommendations(
    gaps: GapAnalysis,
    results: Dict[Dimension, DimensionResult],
    profile: StudentProfile,
    criteria: EligibilityCriteria
) -> List[str]:
    """Actionable improvement steps for the missing criteria."""
    recommendations: List[str] = []

    academic = criteria.academic
    if academic is not None:
        gpa = profile.gpa_on_scale(academic.gpa_scale)
        if academic.min_gpa and gpa is not None and gpa < academic.min_gpa:
            gap = academic.min_gpa - gpa
            recommendations.append(
                f"Raise your GPA by {gap:.2f} points to {academic.min_gpa:.2f} "
                "to meet the academic requirement."
            )
        if academic.min_sat and profile.sat_score is not None and profile.sat_score < academic.min_sat:
            gap = academic.min_sat - profile.sat_score
            recommendations.append(
                f"Improve your SAT score by {gap:g} points to {academic.min_sat:g} "
                "through test prep and retaking the exam."
            )

    experience = criteria.experience
    if experience is not None:
        hours = profile.volunteer_hours or 0
        if experience.min_volunteer_hours and hours < experience.min_volunteer_hours:
            needed = experience.min_volunteer_hours - hours
            recommendations.append(
                f"Gain {needed:g} more volunteer hours to reach the "
                f"{experience.min_volunteer_hours:g}-hour requirement."
            )
        if experience.leadership_required and not profile.leadership_roles:
            recommendations.append(
                "Consider joining a student organization and taking on a leadership "
                "position, such as club president or team captain."
            )

    demographic = results.get(Dimension.DEMOGRAPHIC)
    if demographic is not None and demographic.missing_criteria:
        recommendations.append(
            "Note: Some demographic criteria (gender, ethnicity, location) are fixed "
            "factors and cannot be changed."
        )

    if not recommendations and gaps.has_gaps:
        recommendations.append(
            "Focus on strengthening your overall profile by maintaining high grades "
            "and staying active in extracurriculars."
        )

    if not gaps.has_gaps:
        recommendations.append(
            "Excellent! You meet all requirements. Focus on crafting a compelling application essay."
        )

    return recommendations


@dataclass(frozen=True)
class GapReport:
    """Gap roll-up plus assessment, positioning and next steps for one match."""
    gaps: GapAnalysis
    assessment: OverallAssessment
    positioning: CompetitivePositioning
    recommendations: List[str] = field(default_factory=list)


def build_gap_report(
    results: Dict[Dimension, DimensionResult],
    overall_score: float,
    profile: StudentProfile,
    criteria: EligibilityCriteria
) -> GapReport:
    gaps = build_gap_analysis(results.values())
    return GapReport(
        gaps=gaps,
        assessment=determine_overall_assessment(overall_score, gaps),
        positioning=calculate_competitive_positioning(overall_score),
        recommendations=generate_recommendations(gaps, results, profile, criteria),
    )
