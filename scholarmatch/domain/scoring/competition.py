"""
Competition Factor

Estimates how competitive a scholarship is as a 0.05-0.95 multiplier.
Lower values mean more competition.
"""

import logging

from scholarmatch.domain.scoring.interfaces import ScholarshipData
from scholarmatch.domain.scoring.numeric import clamp


logger = logging.getLogger(__name__)


class CompetitionEstimator:
    """
    Competition factor calculator.

    Resolution order:
    1. acceptance_rate, clamped to [0.05, 0.95]
    2. 100 * number_of_awards / applicant_pool_size, clamped to [0.05, 0.80]
    3. DEFAULT_FACTOR when neither is known
    """

    MIN_FACTOR = 0.05
    MAX_FACTOR = 0.95
    MAX_POOL_FACTOR = 0.80
    POOL_SCALE = 100  # awards * 100 / pool
    DEFAULT_FACTOR = 0.30

    def calculate(self, scholarship: ScholarshipData) -> float:
        if scholarship.acceptance_rate is not None:
            return clamp(scholarship.acceptance_rate, self.MIN_FACTOR, self.MAX_FACTOR)

        pool = scholarship.applicant_pool_size
        if pool is not None and pool > 0:
            awards = scholarship.number_of_awards
            if awards is None or awards <= 0:
                return self.MIN_FACTOR
            return clamp(
                awards * self.POOL_SCALE / pool,
                self.MIN_FACTOR,
                self.MAX_POOL_FACTOR,
            )

        if pool is not None:
            logger.debug(
                "Ignoring non-positive applicant pool %s for %s", pool, scholarship.name
            )
        return self.DEFAULT_FACTOR
