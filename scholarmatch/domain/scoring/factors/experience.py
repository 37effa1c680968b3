"""
Experience Factor

Volunteer hours, leadership, extracurriculars, work history and awards.
"""

from typing import List

from scholarmatch.domain.scoring.interfaces import (
    BaseScoringFactor,
    CriterionCheck,
    Dimension,
    ExperienceCriteria,
    StudentProfile,
)
from scholarmatch.domain.scoring.numeric import clamp_score, partial_credit
from scholarmatch.domain.scoring.factors.text_match import matched_items


class ExperienceFactor(BaseScoringFactor):
    """
    Experience dimension scorer.

    Weight: 15% default

    Boolean requirements (leadership, awards) only count when set to True.
    """

    @property
    def dimension(self) -> Dimension:
        return Dimension.EXPERIENCE

    def evaluate(
        self,
        profile: StudentProfile,
        criteria: ExperienceCriteria
    ) -> List[CriterionCheck]:
        checks: List[CriterionCheck] = []

        if criteria.min_volunteer_hours is not None:
            hours = profile.volunteer_hours
            required = criteria.min_volunteer_hours
            score = 0 if hours is None else partial_credit(hours, required)
            message = f"Minimum {required:g} volunteer hours"
            if score < 100:
                current = "not provided" if hours is None else f"current: {hours:g}"
                message = f"{message} ({current})"
            checks.append(CriterionCheck(name="volunteer_hours", score=score, message=message))

        if criteria.leadership_required:
            checks.append(CriterionCheck(
                name="leadership",
                score=100 if profile.leadership_roles else 0,
                message="Leadership experience",
            ))

        if criteria.required_extracurriculars:
            required = criteria.required_extracurriculars
            found = matched_items(required, profile.extracurriculars)
            checks.append(CriterionCheck(
                name="extracurriculars",
                score=clamp_score(100 * len(found) / len(required)),
                message=f"Extracurriculars: {', '.join(required)}",
            ))

        if criteria.min_work_experience_months is not None:
            required_months = criteria.min_work_experience_months
            months = profile.total_work_months
            if profile.work_experience or required_months <= 0:
                score = partial_credit(months, required_months)
            else:
                score = 0
            message = f"Minimum {required_months} months work experience"
            if score < 100:
                message = f"{message} (current: {months})"
            checks.append(CriterionCheck(name="work_experience", score=score, message=message))

        if criteria.awards_honors_required:
            checks.append(CriterionCheck(
                name="awards_honors",
                score=100 if profile.awards_honors else 0,
                message="Awards or honors",
            ))

        return checks
