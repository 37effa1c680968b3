"""
Matching API Routes

Stateless endpoints that run the scoring engine on posted records.
"""

import logging

from fastapi import APIRouter

from scholarmatch.api.dependencies import MatchScorerDep, SettingsDep
from scholarmatch.domain.models import (
    BatchScoreRequest,
    BatchScoreResponse,
    MatchResponse,
    ScoreRequest,
    WeightsResponse,
)
from scholarmatch.domain.scoring.match_scorer import (
    count_by_priority_tier,
    filter_by_priority_tier,
)
from scholarmatch.infrastructure.exceptions import BatchTooLargeError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matching", tags=["Matching"])


@router.post("/score", response_model=MatchResponse)
async def score_scholarship(request: ScoreRequest, scorer: MatchScorerDep):
    """
    Score one scholarship for a profile.

    Returns the six dimension scores, match score, success probability,
    tiers, effort, strategic value and priority with its rationale, plus
    the gap analysis with recommendations.
    """
    profile = request.profile.to_domain()
    result = scorer.score_scholarship(profile, request.scholarship.to_domain())
    return MatchResponse.from_result(result, scorer.analyze_gaps(profile, result))


@router.post("/batch", response_model=BatchScoreResponse)
async def score_batch(
    request: BatchScoreRequest,
    scorer: MatchScorerDep,
    settings: SettingsDep,
):
    """
    Score many scholarships for a profile.

    Results are ordered by priority tier, then strategic value, then match
    score. tier_counts always covers all four tiers and is computed before
    the optional priority_tier filter.
    """
    if len(request.scholarships) > settings.max_batch_size:
        raise BatchTooLargeError(len(request.scholarships), settings.max_batch_size)

    logger.info(f"Scoring batch of {len(request.scholarships)} scholarships")

    profile = request.profile.to_domain()
    scholarships = [s.to_domain() for s in request.scholarships]
    results = scorer.score_scholarships(profile, scholarships)
    counts = count_by_priority_tier(results)

    if request.priority_tier is not None:
        results = filter_by_priority_tier(results, request.priority_tier)

    return BatchScoreResponse(
        results=[MatchResponse.from_result(r, scorer.analyze_gaps(profile, r)) for r in results],
        tier_counts=counts,
        total=len(results),
    )


@router.get("/weights", response_model=WeightsResponse)
async def get_weights(scorer: MatchScorerDep):
    """Dimension weights currently used for the match score."""
    return WeightsResponse(weights=scorer.weights.to_dict())
