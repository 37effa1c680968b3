"""
Financial Factor

Financial need, Pell Grant eligibility and Expected Family Contribution.
"""

from typing import List, Optional

from scholarmatch.domain.scoring.interfaces import (
    BaseScoringFactor,
    CriterionCheck,
    Dimension,
    FinancialCriteria,
    StudentProfile,
)
from scholarmatch.domain.scoring.numeric import ceiling_credit, partial_credit


def parse_efc_upper_bound(efc_range: Optional[str]) -> Optional[float]:
    """
    Upper bound of an EFC range string.

    "0-5000" -> 5000, "25000+" -> 25000, "12000" -> 12000. Unparseable -> None.
    """
    if not efc_range:
        return None
    text = efc_range.replace(",", "").replace("$", "").strip().rstrip("+")
    bound = text.split("-")[-1].strip()
    try:
        return float(bound)
    except ValueError:
        return None


class FinancialFactor(BaseScoringFactor):
    """
    Financial dimension scorer.

    Weight: 10% default

    Need levels are ordinal (LOW=1 .. VERY_HIGH=4); a student below the
    required level gets the ratio ramp on those ranks.
    """

    @property
    def dimension(self) -> Dimension:
        return Dimension.FINANCIAL

    def evaluate(
        self,
        profile: StudentProfile,
        criteria: FinancialCriteria
    ) -> List[CriterionCheck]:
        checks: List[CriterionCheck] = []

        if criteria.requires_financial_need:
            checks.append(self._check_need(profile, criteria))

        if criteria.pell_grant_required is not None:
            met = profile.pell_grant_eligible == criteria.pell_grant_required
            label = "Pell Grant eligible" if criteria.pell_grant_required else "Not Pell Grant eligible"
            checks.append(CriterionCheck(
                name="pell_grant",
                score=100 if met else 0,
                message=label,
            ))

        if criteria.max_efc is not None:
            checks.append(self._check_efc(profile, criteria.max_efc))

        return checks

    def _check_need(
        self,
        profile: StudentProfile,
        criteria: FinancialCriteria
    ) -> CriterionCheck:
        required = criteria.financial_need_level
        message = "Demonstrated financial need"
        if required is not None:
            message = f"Financial need: {required.value} or higher"

        if profile.financial_need is None:
            return CriterionCheck(name="financial_need", score=0, message=message)
        if required is None:
            return CriterionCheck(name="financial_need", score=100, message=message)

        score = partial_credit(profile.financial_need.rank, required.rank)
        if score < 100:
            message = f"{message} (current: {profile.financial_need.value})"
        return CriterionCheck(name="financial_need", score=score, message=message)

    def _check_efc(self, profile: StudentProfile, max_efc: float) -> CriterionCheck:
        message = f"Maximum EFC ${max_efc:,.0f}"
        student_efc = parse_efc_upper_bound(profile.efc_range)
        if student_efc is None:
            return CriterionCheck(name="efc", score=0, message=f"{message} (not provided)")

        score = ceiling_credit(student_efc, max_efc)
        if score < 100:
            message = f"{message} (current: {profile.efc_range})"
        return CriterionCheck(name="efc", score=score, message=message)
