"""
Success Probability Predictor

probability = clamp(0.05, 0.95, (match / 100) * competition + (strength - 50) / 100)

The strength term centers on 50 (an average profile) and contributes at most
+/-0.5. Results are fractions rounded to whole percents, so the fraction and
its displayed percent always agree.
"""

import logging

from scholarmatch.domain.scoring.interfaces import ProbabilityBreakdown
from scholarmatch.domain.scoring.numeric import (
    clamp,
    round_half_up,
    round_int,
    to_fraction,
)


logger = logging.getLogger(__name__)


class SuccessPredictor:
    """Deterministic probability-of-winning estimate."""

    MIN_PROBABILITY = 0.05
    MAX_PROBABILITY = 0.95
    STRENGTH_BASELINE = 50.0

    def predict(
        self,
        match_score: float,
        strength_score: float,
        competition_factor: float
    ) -> float:
        """
        Probability of winning as a fraction (0.05-0.95).

        Args:
            match_score: Aggregate match score (0-100)
            strength_score: Profile strength (0-100, 50 = average)
            competition_factor: Output of CompetitionEstimator
        """
        return to_fraction(
            self.detailed(match_score, strength_score, competition_factor).final_probability
        )

    def detailed(
        self,
        match_score: float,
        strength_score: float,
        competition_factor: float
    ) -> ProbabilityBreakdown:
        """
        Stage-by-stage breakdown for explainability.

        Each stage is rounded independently, so after_strength_adjustment
        may sit outside 5-95 while final_probability never does.
        """
        match = clamp(match_score, 0, 100)
        strength = clamp(strength_score, 0, 100)
        competition = clamp(competition_factor, 0.0, 1.0)

        after_competition = (match / 100) * competition
        strength_adjustment = (strength - self.STRENGTH_BASELINE) / 100
        raw = after_competition + strength_adjustment
        clamped = clamp(raw, self.MIN_PROBABILITY, self.MAX_PROBABILITY)

        if clamped != raw:
            logger.debug("Clamped success probability %.4f to %.2f", raw, clamped)

        return ProbabilityBreakdown(
            final_probability=round_int(clamped * 100),
            base_probability=round_int(match),
            after_competition=round_int(after_competition * 100),
            after_strength_adjustment=round_int(raw * 100),
            competition_factor=round_half_up(competition, 2),
            strength_adjustment=round_int(strength_adjustment * 100),
        )
