"""
Test configuration and fixtures for ScholarMatch.

Provides shared fixtures for unit and integration tests.
"""

import pytest

from fastapi.testclient import TestClient

from scholarmatch.domain.scoring.interfaces import (
    AcademicCriteria,
    DemographicCriteria,
    EligibilityCriteria,
    ExperienceCriteria,
    FinancialCriteria,
    FinancialNeedLevel,
    MajorFieldCriteria,
    ScholarshipData,
    SpecialCriteria,
    StudentProfile,
    WorkExperience,
)
from scholarmatch.domain.scoring.match_scorer import MatchScorer


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Get the FastAPI application."""
    from scholarmatch.main import app
    return app


@pytest.fixture
def client(app):
    """Get synchronous test client."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def scorer():
    """MatchScorer with baseline weights."""
    return MatchScorer()


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def strong_profile():
    """STEM student who meets most common requirements."""
    return StudentProfile(
        gpa=3.9,
        sat_score=1480,
        act_score=33,
        class_rank=5,
        class_size=200,
        gender="Female",
        age=18,
        state="CA",
        city="San Jose",
        citizenship="US Citizen",
        ethnicity=["Hispanic"],
        intended_major="Computer Science",
        field_of_study="Engineering",
        career_goals="Become a software engineer building tools for education",
        volunteer_hours=120,
        extracurriculars=["Robotics Club", "Debate Team"],
        work_experience=[WorkExperience(title="Tutor", months=8)],
        leadership_roles=["Robotics Club President"],
        awards_honors=["National Merit Semifinalist"],
        financial_need=FinancialNeedLevel.HIGH,
        pell_grant_eligible=True,
        efc_range="0-5000",
        first_generation=True,
        strength_score=80,
        completion_percentage=95,
    )


@pytest.fixture
def minimal_profile():
    """Profile with almost nothing filled in."""
    return StudentProfile(strength_score=50)


@pytest.fixture
def open_scholarship():
    """Scholarship with no eligibility requirements."""
    return ScholarshipData(
        name="Open Community Award",
        award_amount=1000,
        essay_prompts=["Tell us about yourself"],
    )


@pytest.fixture
def stem_scholarship():
    """Scholarship with criteria in every dimension."""
    return ScholarshipData(
        name="Future Engineers Scholarship",
        scholarship_id="sch-stem-1",
        award_amount=10000,
        number_of_awards=5,
        eligibility_criteria=EligibilityCriteria(
            academic=AcademicCriteria(min_gpa=3.5, min_sat=1300),
            demographic=DemographicCriteria(required_state=["CA", "OR"]),
            major_field=MajorFieldCriteria(eligible_majors=["Computer Science", "Engineering"]),
            experience=ExperienceCriteria(min_volunteer_hours=50, leadership_required=True),
            financial=FinancialCriteria(
                requires_financial_need=True,
                financial_need_level=FinancialNeedLevel.MODERATE,
            ),
            special=SpecialCriteria(first_generation_required=True),
        ),
        essay_prompts=["Why engineering?"],
        required_documents=["Transcript"],
        recommendation_count=1,
        acceptance_rate=0.9,
    )


@pytest.fixture
def score_payload():
    """JSON payload for POST /api/matching/score."""
    return {
        "profile": {
            "gpa": 3.9,
            "sat_score": 1480,
            "state": "CA",
            "intended_major": "Computer Science",
            "volunteer_hours": 120,
            "leadership_roles": ["Club President"],
            "financial_need": "HIGH",
            "first_generation": True,
            "strength_score": 80,
        },
        "scholarship": {
            "scholarship_id": "sch-1",
            "name": "Future Engineers Scholarship",
            "award_amount": 10000,
            "eligibility_criteria": {
                "academic": {"min_gpa": 3.5, "min_sat": 1300},
                "demographic": {"required_state": ["CA"]},
                "major_field": {"eligible_majors": ["Computer Science"]},
            },
            "essay_prompts": ["Why engineering?"],
            "acceptance_rate": 0.9,
        },
    }
