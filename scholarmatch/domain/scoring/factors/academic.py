"""
Academic Factor

Scores GPA, SAT, ACT and class rank against a scholarship's academic criteria.

- Meeting a minimum (or staying under a maximum) = 100
- Below a minimum = linear ramp, 100 * value / required
- Above a maximum = mirror ramp, 100 * maximum / value
- Class rank compares percentiles (lower is better)
"""

from typing import List, Optional

from scholarmatch.domain.scoring.interfaces import (
    AcademicCriteria,
    BaseScoringFactor,
    CriterionCheck,
    Dimension,
    StudentProfile,
)
from scholarmatch.domain.scoring.numeric import (
    ceiling_credit,
    clamp_score,
    partial_credit,
)


class AcademicFactor(BaseScoringFactor):
    """
    Academic dimension scorer.

    Weight: 30% default

    GPA is rescaled from the student's scale to the criterion's scale
    before comparison, so a 4.5 on a 5.0 scale reads as 3.6 on 4.0.
    """

    @property
    def dimension(self) -> Dimension:
        return Dimension.ACADEMIC

    def evaluate(
        self,
        profile: StudentProfile,
        criteria: AcademicCriteria
    ) -> List[CriterionCheck]:
        checks: List[CriterionCheck] = []

        gpa = profile.gpa_on_scale(criteria.gpa_scale)
        if criteria.min_gpa is not None:
            checks.append(self._check_minimum("GPA", gpa, criteria.min_gpa, ".2f"))
        if criteria.max_gpa is not None:
            checks.append(self._check_maximum("GPA", gpa, criteria.max_gpa, ".2f"))

        if criteria.min_sat is not None:
            checks.append(self._check_minimum("SAT", profile.sat_score, criteria.min_sat, "g"))
        if criteria.max_sat is not None:
            checks.append(self._check_maximum("SAT", profile.sat_score, criteria.max_sat, "g"))

        if criteria.min_act is not None:
            checks.append(self._check_minimum("ACT", profile.act_score, criteria.min_act, "g"))
        if criteria.max_act is not None:
            checks.append(self._check_maximum("ACT", profile.act_score, criteria.max_act, "g"))

        if criteria.class_rank_percentile is not None:
            checks.append(self._check_class_rank(profile, criteria.class_rank_percentile))

        return checks

    def _check_minimum(
        self,
        label: str,
        value: Optional[float],
        required: float,
        fmt: str
    ) -> CriterionCheck:
        if value is None:
            return CriterionCheck(
                name=f"min_{label.lower()}",
                score=0,
                message=f"Minimum {label} {required:{fmt}} (not provided)",
            )
        score = partial_credit(value, required)
        if score >= 100:
            message = f"{label} {value:{fmt}} meets minimum {required:{fmt}}"
        else:
            message = f"Minimum {label} {required:{fmt}} (current: {value:{fmt}})"
        return CriterionCheck(name=f"min_{label.lower()}", score=score, message=message)

    def _check_maximum(
        self,
        label: str,
        value: Optional[float],
        maximum: float,
        fmt: str
    ) -> CriterionCheck:
        if value is None:
            return CriterionCheck(
                name=f"max_{label.lower()}",
                score=0,
                message=f"Maximum {label} {maximum:{fmt}} (not provided)",
            )
        score = ceiling_credit(value, maximum)
        if score >= 100:
            message = f"{label} {value:{fmt}} within maximum {maximum:{fmt}}"
        else:
            message = f"Maximum {label} {maximum:{fmt}} (current: {value:{fmt}})"
        return CriterionCheck(name=f"max_{label.lower()}", score=score, message=message)

    def _check_class_rank(
        self,
        profile: StudentProfile,
        required_percentile: float
    ) -> CriterionCheck:
        """
        Compare class rank as a percentile.

        actual = 100 * rank / size; rank 5 of 100 is the top 5%.
        """
        if not profile.class_rank or not profile.class_size or profile.class_size <= 0:
            return CriterionCheck(
                name="class_rank",
                score=0,
                message=f"Top {required_percentile:g}% class rank (not provided)",
            )

        actual = 100 * profile.class_rank / profile.class_size
        if actual <= required_percentile:
            return CriterionCheck(
                name="class_rank",
                score=100,
                message=f"Class rank top {actual:.1f}% meets top {required_percentile:g}%",
            )
        return CriterionCheck(
            name="class_rank",
            score=clamp_score(100 * required_percentile / actual),
            message=f"Top {required_percentile:g}% class rank (current: top {actual:.1f}%)",
        )
