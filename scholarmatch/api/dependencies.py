"""
API Dependencies

FastAPI dependency injection for the scoring engine.

The MatchScorer is stateless, so a single cached instance serves every
request. Tests override get_match_scorer via app.dependency_overrides.
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from scholarmatch.config.settings import Settings, get_settings
from scholarmatch.domain.scoring.match_scorer import MatchScorer


logger = logging.getLogger(__name__)


@lru_cache
def get_match_scorer() -> MatchScorer:
    """
    Return the shared MatchScorer built from configured weights.

    Raises:
        ConfigurationError: If the configured weights are invalid
    """
    weights = get_settings().scoring_weights()
    logger.info("MatchScorer initialized with weights %s", weights.to_dict())
    return MatchScorer(weights=weights)


MatchScorerDep = Annotated[MatchScorer, Depends(get_match_scorer)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
