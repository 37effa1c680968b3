"""
Major / Field Factor

Scores intended major, field of study and career goals.

Partial credit:
- Major: exact = 100, substring = 75, same major family = 50
- Field of study: exact = 100, substring = 80
- Career goals: share of keywords found in the career goals text
An excluded major zeroes the whole dimension.
"""

from typing import Dict, List, Optional

from scholarmatch.domain.scoring.interfaces import (
    BaseScoringFactor,
    CriterionCheck,
    Dimension,
    DimensionResult,
    MajorFieldCriteria,
    ScholarshipData,
    StudentProfile,
)
from scholarmatch.domain.scoring.numeric import clamp_score
from scholarmatch.domain.scoring.factors.text_match import (
    matches_any,
    normalize,
    overlaps,
)


# Keyword families used for "related major" credit
MAJOR_FAMILIES: Dict[str, List[str]] = {
    "stem": [
        "biology", "chemistry", "physics", "mathematics",
        "engineering", "computer science", "science",
    ],
    "engineering": [
        "mechanical", "electrical", "civil", "chemical",
        "computer", "aerospace", "biomedical",
    ],
    "business": [
        "business", "finance", "accounting", "economics",
        "marketing", "management",
    ],
    "health": [
        "nursing", "medicine", "pharmacy", "public health",
        "healthcare", "medical",
    ],
    "arts": [
        "art", "music", "theater", "dance", "design",
        "fine arts", "performing arts",
    ],
    "humanities": [
        "english", "history", "philosophy", "literature",
        "languages", "liberal arts",
    ],
}


def major_family(major: Optional[str]) -> Optional[str]:
    """First family whose keywords appear in the major, if any."""
    text = normalize(major)
    if not text:
        return None
    for family, keywords in MAJOR_FAMILIES.items():
        if any(keyword in text for keyword in keywords):
            return family
    return None


class MajorFieldFactor(BaseScoringFactor):
    """
    Major/field dimension scorer.

    Weight: 20% default
    """

    EXACT_MAJOR = 100
    PARTIAL_MAJOR = 75
    RELATED_MAJOR = 50
    PARTIAL_FIELD = 80

    @property
    def dimension(self) -> Dimension:
        return Dimension.MAJOR_FIELD

    def calculate(
        self,
        profile: StudentProfile,
        scholarship: ScholarshipData
    ) -> DimensionResult:
        criteria = scholarship.eligibility_criteria.major_field
        if criteria is not None and self._is_excluded(profile, criteria):
            return DimensionResult(
                dimension=self.dimension,
                score=0,
                missing_criteria=[f"Major not eligible: {profile.intended_major}"],
            )
        return super().calculate(profile, scholarship)

    def evaluate(
        self,
        profile: StudentProfile,
        criteria: MajorFieldCriteria
    ) -> List[CriterionCheck]:
        checks: List[CriterionCheck] = []

        if criteria.eligible_majors:
            checks.append(CriterionCheck(
                name="major",
                score=self.score_major(profile.intended_major, criteria.eligible_majors),
                message=f"Major: {', '.join(criteria.eligible_majors)}",
            ))

        if criteria.required_field_of_study:
            checks.append(CriterionCheck(
                name="field_of_study",
                score=self.score_field(profile.field_of_study, criteria.required_field_of_study),
                message=f"Field of study: {', '.join(criteria.required_field_of_study)}",
            ))

        if criteria.career_goals_keywords:
            checks.append(CriterionCheck(
                name="career_goals",
                score=self.score_career_goals(profile.career_goals, criteria.career_goals_keywords),
                message=f"Career goals: {', '.join(criteria.career_goals_keywords)}",
            ))

        return checks

    def _is_excluded(self, profile: StudentProfile, criteria: MajorFieldCriteria) -> bool:
        return bool(criteria.excluded_majors) and matches_any(
            profile.intended_major, criteria.excluded_majors
        )

    def score_major(self, major: Optional[str], eligible: List[str]) -> int:
        if not normalize(major):
            return 0
        if matches_any(major, eligible):
            return self.EXACT_MAJOR
        if any(overlaps(major, item) for item in eligible):
            return self.PARTIAL_MAJOR

        family = major_family(major)
        if family is not None:
            keywords = MAJOR_FAMILIES[family]
            if any(kw in normalize(item) for item in eligible for kw in keywords):
                return self.RELATED_MAJOR
        return 0

    def score_field(self, field_of_study: Optional[str], required: List[str]) -> int:
        if not normalize(field_of_study):
            return 0
        if matches_any(field_of_study, required):
            return 100
        if any(overlaps(field_of_study, item) for item in required):
            return self.PARTIAL_FIELD
        return 0

    def score_career_goals(self, goals: Optional[str], keywords: List[str]) -> int:
        text = normalize(goals)
        if not text:
            return 0
        found = [kw for kw in keywords if normalize(kw) and normalize(kw) in text]
        return clamp_score(100 * len(found) / len(keywords))
