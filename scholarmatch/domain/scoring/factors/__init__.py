# Dimension scorers submodule
from scholarmatch.domain.scoring.factors.academic import AcademicFactor
from scholarmatch.domain.scoring.factors.demographic import DemographicFactor
from scholarmatch.domain.scoring.factors.major_field import MajorFieldFactor
from scholarmatch.domain.scoring.factors.experience import ExperienceFactor
from scholarmatch.domain.scoring.factors.financial import FinancialFactor
from scholarmatch.domain.scoring.factors.special_criteria import SpecialCriteriaFactor

__all__ = [
    "AcademicFactor",
    "DemographicFactor",
    "MajorFieldFactor",
    "ExperienceFactor",
    "FinancialFactor",
    "SpecialCriteriaFactor",
]
