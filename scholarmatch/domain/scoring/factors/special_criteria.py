"""
Special Criteria Factor

First-generation status, military affiliation, disability and citizenship.
"""

from typing import Dict, List, Optional

from scholarmatch.domain.scoring.interfaces import (
    BaseScoringFactor,
    CriterionCheck,
    Dimension,
    SpecialCriteria,
    StudentProfile,
)
from scholarmatch.domain.scoring.factors.text_match import (
    active_requirement,
    normalize,
)


# Required affiliation -> student affiliations that earn partial credit
RELATED_AFFILIATIONS: Dict[str, List[str]] = {
    "veteran": ["active duty"],
    "dependent": ["veteran", "active duty"],
}

US_CITIZEN = "us citizen"
PERMANENT_RESIDENT = "permanent resident"


class SpecialCriteriaFactor(BaseScoringFactor):
    """
    Special circumstances scorer.

    Weight: 10% default

    Partial credit:
    - Military: related affiliation = 75
    - Citizenship: US citizen meets a permanent-resident requirement,
      a permanent resident gets 50 on a US-citizen requirement
    """

    RELATED_AFFILIATION_SCORE = 75
    RESIDENT_FOR_CITIZEN_SCORE = 50

    @property
    def dimension(self) -> Dimension:
        return Dimension.SPECIAL

    def evaluate(
        self,
        profile: StudentProfile,
        criteria: SpecialCriteria
    ) -> List[CriterionCheck]:
        checks: List[CriterionCheck] = []

        if criteria.first_generation_required:
            checks.append(CriterionCheck(
                name="first_generation",
                score=100 if profile.first_generation else 0,
                message="First-generation college student",
            ))

        if active_requirement(criteria.military_affiliation):
            checks.append(CriterionCheck(
                name="military_affiliation",
                score=self.score_military(
                    profile.military_affiliation, criteria.military_affiliation
                ),
                message=f"Military affiliation: {criteria.military_affiliation}",
            ))

        if criteria.disability_required:
            has_disability = bool(normalize(profile.disabilities))
            checks.append(CriterionCheck(
                name="disability",
                score=100 if has_disability else 0,
                message="Documented disability",
            ))

        if active_requirement(criteria.citizenship_required):
            checks.append(CriterionCheck(
                name="citizenship",
                score=self.score_citizenship(
                    profile.citizenship, criteria.citizenship_required
                ),
                message=f"Citizenship: {criteria.citizenship_required}",
            ))

        return checks

    def score_military(self, student: Optional[str], required: str) -> int:
        student_value = normalize(student)
        required_value = normalize(required)

        if not student_value or student_value == "none":
            return 100 if required_value == "none" else 0
        if student_value == required_value:
            return 100
        if student_value in RELATED_AFFILIATIONS.get(required_value, []):
            return self.RELATED_AFFILIATION_SCORE
        return 0

    def score_citizenship(self, student: Optional[str], required: str) -> int:
        student_value = normalize(student)
        required_value = normalize(required)

        if not student_value:
            return 0
        if student_value == required_value:
            return 100
        if required_value == PERMANENT_RESIDENT and student_value == US_CITIZEN:
            return 100
        if required_value == US_CITIZEN and student_value == PERMANENT_RESIDENT:
            return self.RESIDENT_FOR_CITIZEN_SCORE
        return 0
