"""
Unit tests for gap analysis, assessment and recommendations.
"""

import pytest

from scholarmatch.domain.scoring.gap_analysis import (
    GapAnalysis,
    OverallAssessment,
    build_gap_analysis,
    calculate_competitive_positioning,
    determine_overall_assessment,
    generate_recommendations,
)
from scholarmatch.domain.scoring.interfaces import (
    AcademicCriteria,
    Dimension,
    DimensionResult,
    EligibilityCriteria,
    ExperienceCriteria,
    StudentProfile,
)


class TestBuildGapAnalysis:
    """Tests for rolling dimension detail into one view."""

    def test_counts_and_prefixes(self):
        results = [
            DimensionResult(
                dimension=Dimension.ACADEMIC,
                score=50,
                met_criteria=["GPA 3.80 meets minimum 3.50"],
                missing_criteria=["Minimum SAT 1400 (current: 1200)"],
            ),
            DimensionResult(
                dimension=Dimension.MAJOR_FIELD,
                score=0,
                missing_criteria=["Major: Nursing"],
            ),
        ]
        gaps = build_gap_analysis(results)
        assert gaps.total_criteria == 3
        assert gaps.met_criteria == 1
        assert gaps.missing_criteria == [
            "Academic: Minimum SAT 1400 (current: 1200)",
            "Major/Field: Major: Nursing",
        ]

    def test_skips_dimensions_without_criteria(self):
        results = [
            DimensionResult(
                dimension=Dimension.SPECIAL,
                score=100,
                applicable=False,
                met_criteria=["No requirements in this dimension"],
            ),
        ]
        gaps = build_gap_analysis(results)
        assert gaps.total_criteria == 0
        assert gaps.has_gaps is False


class TestOverallAssessment:
    """Tests for the overall assessment buckets."""

    @pytest.mark.parametrize("score,missing,expected", [
        (95, [], OverallAssessment.HIGHLY_ELIGIBLE),
        (95, ["Academic: x"], OverallAssessment.COMPETITIVE),
        (70, [], OverallAssessment.COMPETITIVE),
        (60, [], OverallAssessment.NEEDS_IMPROVEMENT),
        (40, ["Academic: x"], OverallAssessment.NOT_ELIGIBLE),
    ])
    def test_assessment(self, score, missing, expected):
        gaps = GapAnalysis(total_criteria=1, met_criteria=0, missing_criteria=missing)
        assert determine_overall_assessment(score, gaps) == expected

    def test_assessment_value_is_display_text(self):
        assert OverallAssessment.HIGHLY_ELIGIBLE.value == "Highly Eligible"


class TestCompetitivePositioning:
    """Tests for the percentile estimate."""

    @pytest.mark.parametrize("score,percentile,fragment", [
        (100, 90, "top 10%"),
        (85, 77, "top 25%"),
        (60, 54, "top 50%"),
        (30, 27, "bottom 50%"),
        (20, 18, "below typical"),
    ])
    def test_bands(self, score, percentile, fragment):
        positioning = calculate_competitive_positioning(score)
        assert positioning.percentile == percentile
        assert fragment in positioning.message


class TestRecommendations:
    """Tests for actionable recommendations."""

    def _gaps(self, *missing):
        return GapAnalysis(total_criteria=len(missing), met_criteria=0, missing_criteria=list(missing))

    def test_gpa_recommendation(self):
        profile = StudentProfile(gpa=3.2)
        criteria = EligibilityCriteria(academic=AcademicCriteria(min_gpa=3.5))
        recs = generate_recommendations(self._gaps("Academic: GPA"), {}, profile, criteria)
        assert recs == [
            "Raise your GPA by 0.30 points to 3.50 to meet the academic requirement."
        ]

    def test_gpa_recommendation_uses_criteria_scale(self):
        profile = StudentProfile(gpa=4.0, gpa_scale=5.0)
        criteria = EligibilityCriteria(academic=AcademicCriteria(min_gpa=3.5))
        recs = generate_recommendations(self._gaps("Academic: GPA"), {}, profile, criteria)
        assert recs == [
            "Raise your GPA by 0.30 points to 3.50 to meet the academic requirement."
        ]

    def test_gpa_met_after_rescaling(self):
        profile = StudentProfile(gpa=4.5, gpa_scale=5.0)
        criteria = EligibilityCriteria(academic=AcademicCriteria(min_gpa=3.5))
        recs = generate_recommendations(self._gaps("Academic: SAT"), {}, profile, criteria)
        assert not any("GPA" in rec for rec in recs)

    def test_sat_recommendation(self):
        profile = StudentProfile(sat_score=1200)
        criteria = EligibilityCriteria(academic=AcademicCriteria(min_sat=1300))
        recs = generate_recommendations(self._gaps("Academic: SAT"), {}, profile, criteria)
        assert recs[0].startswith("Improve your SAT score by 100 points to 1300")

    def test_volunteer_and_leadership(self):
        profile = StudentProfile(volunteer_hours=20)
        criteria = EligibilityCriteria(
            experience=ExperienceCriteria(min_volunteer_hours=50, leadership_required=True)
        )
        recs = generate_recommendations(self._gaps("Experience: hours"), {}, profile, criteria)
        assert recs[0] == "Gain 30 more volunteer hours to reach the 50-hour requirement."
        assert "leadership" in recs[1]

    def test_demographic_note(self):
        results = {
            Dimension.DEMOGRAPHIC: DimensionResult(
                dimension=Dimension.DEMOGRAPHIC,
                score=0,
                missing_criteria=["State residency: CA"],
            ),
        }
        recs = generate_recommendations(
            self._gaps("Demographic: State residency: CA"),
            results,
            StudentProfile(),
            EligibilityCriteria(),
        )
        assert len(recs) == 1
        assert "cannot be changed" in recs[0]

    def test_generic_fallback(self):
        recs = generate_recommendations(
            self._gaps("Special: Documented disability"),
            {},
            StudentProfile(),
            EligibilityCriteria(),
        )
        assert len(recs) == 1
        assert recs[0].startswith("Focus on strengthening")

    def test_no_gaps(self):
        recs = generate_recommendations(self._gaps(), {}, StudentProfile(), EligibilityCriteria())
        assert recs == [
            "Excellent! You meet all requirements. Focus on crafting a compelling application essay."
        ]
