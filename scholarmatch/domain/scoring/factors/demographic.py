"""
Demographic Factor

Gender, ethnicity, location and age requirements.
"""

from typing import List

from scholarmatch.domain.scoring.interfaces import (
    BaseScoringFactor,
    CriterionCheck,
    DemographicCriteria,
    Dimension,
    StudentProfile,
)
from scholarmatch.domain.scoring.numeric import ceiling_credit, partial_credit
from scholarmatch.domain.scoring.factors.text_match import (
    active_requirement,
    matches_any,
)


class DemographicFactor(BaseScoringFactor):
    """
    Demographic dimension scorer.

    Weight: 15% default

    Categorical checks are case-insensitive all-or-nothing; a student with
    any one of the listed ethnicities qualifies. Age uses the min ramp below
    age_min and the mirror ramp above age_max.
    """

    @property
    def dimension(self) -> Dimension:
        return Dimension.DEMOGRAPHIC

    def evaluate(
        self,
        profile: StudentProfile,
        criteria: DemographicCriteria
    ) -> List[CriterionCheck]:
        checks: List[CriterionCheck] = []

        if active_requirement(criteria.required_gender):
            met = matches_any(profile.gender, [criteria.required_gender])
            checks.append(CriterionCheck(
                name="gender",
                score=100 if met else 0,
                message=f"Gender: {criteria.required_gender}",
            ))

        if criteria.required_ethnicity:
            met = any(matches_any(e, criteria.required_ethnicity) for e in profile.ethnicity)
            checks.append(CriterionCheck(
                name="ethnicity",
                score=100 if met else 0,
                message=f"Ethnicity: {', '.join(criteria.required_ethnicity)}",
            ))

        if criteria.required_state:
            met = matches_any(profile.state, criteria.required_state)
            checks.append(CriterionCheck(
                name="state",
                score=100 if met else 0,
                message=f"State residency: {', '.join(criteria.required_state)}",
            ))

        if criteria.required_city:
            met = matches_any(profile.city, criteria.required_city)
            checks.append(CriterionCheck(
                name="city",
                score=100 if met else 0,
                message=f"City: {', '.join(criteria.required_city)}",
            ))

        if criteria.age_min is not None or criteria.age_max is not None:
            checks.append(self._check_age(profile, criteria))

        return checks

    def _check_age(
        self,
        profile: StudentProfile,
        criteria: DemographicCriteria
    ) -> CriterionCheck:
        low = criteria.age_min if criteria.age_min is not None else "any"
        high = criteria.age_max if criteria.age_max is not None else "any"
        message = f"Age {low}-{high}"

        if profile.age is None:
            return CriterionCheck(name="age", score=0, message=f"{message} (not provided)")

        score = 100
        if criteria.age_min is not None:
            score = min(score, partial_credit(profile.age, criteria.age_min))
        if criteria.age_max is not None:
            score = min(score, ceiling_credit(profile.age, criteria.age_max))

        if score < 100:
            message = f"{message} (current: {profile.age})"
        return CriterionCheck(name="age", score=score, message=message)
