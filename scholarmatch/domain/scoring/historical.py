"""
Historical Winner Comparison

Compares a student against aggregate statistics of past winners and nudges
the success probability by how similar they are.
"""

import logging
from typing import List, Optional

from scholarmatch.domain.scoring.interfaces import (
    HistoricalAdjustment,
    HistoricalComparison,
    HistoricalWinnerProfile,
    MetricComparison,
    StudentProfile,
)
from scholarmatch.domain.scoring.numeric import clamp, clamp_score


logger = logging.getLogger(__name__)

NO_DATA_SUMMARY = "Historical winner data unavailable for this scholarship"
NO_METRICS_REASON = "No metrics in common with past winners"

# Natural scale of each metric, used to normalize absolute differences
GPA_SCALE = 4.0  # Past-winner GPA averages are on a 4.0 scale
SAT_SCALE = 1600
ACT_SCALE = 36
STRENGTH_SCALE = 100

# (minimum similarity, percent-point adjustment), checked in order
SIMILARITY_ADJUSTMENTS = [
    (90, 5),
    (70, 2),
    (50, 0),
]
LOW_SIMILARITY_ADJUSTMENT = -2

MIN_PERCENT = 5
MAX_PERCENT = 95


def _compare(student: float, average: float) -> MetricComparison:
    difference = student - average
    return MetricComparison(
        student_value=student,
        average_value=average,
        difference=difference,
        is_above=difference >= 0,
    )


def compare_to_historical_winners(
    profile: StudentProfile,
    historical: Optional[HistoricalWinnerProfile]
) -> HistoricalComparison:
    """
    Compare the profile with past winners.

    Missing data (no record, or a sample size of 0) yields has_data=False.
    """
    if historical is None or not historical.sample_size:
        return HistoricalComparison(has_data=False, summary=[NO_DATA_SUMMARY])

    summary: List[str] = []
    normalized: List[float] = []
    gpa = sat = act = strength = None

    student_gpa = profile.gpa_on_scale(GPA_SCALE)
    if student_gpa and historical.average_gpa:
        gpa = _compare(student_gpa, historical.average_gpa)
        summary.append(
            f"Past winners had average GPA {historical.average_gpa:.1f} (yours: {student_gpa:.1f})"
        )
        normalized.append(abs(gpa.difference) / GPA_SCALE)

    if profile.sat_score and historical.average_sat:
        sat = _compare(profile.sat_score, historical.average_sat)
        summary.append(
            f"Past winners had average SAT {historical.average_sat:g} (yours: {profile.sat_score})"
        )
        normalized.append(abs(sat.difference) / SAT_SCALE)

    if profile.act_score and historical.average_act:
        act = _compare(profile.act_score, historical.average_act)
        summary.append(
            f"Past winners had average ACT {historical.average_act:g} (yours: {profile.act_score})"
        )
        normalized.append(abs(act.difference) / ACT_SCALE)

    if historical.average_strength:
        strength = _compare(profile.strength_score, historical.average_strength)
        summary.append(
            f"Past winners had average profile strength {historical.average_strength:.0f} "
            f"(yours: {profile.strength_score:.0f})"
        )
        normalized.append(abs(strength.difference) / STRENGTH_SCALE)

    similarity = None
    if normalized:
        mean_difference = sum(normalized) / len(normalized)
        similarity = clamp_score(100 * (1 - mean_difference))

    summary.append(f"Based on {historical.sample_size} past winners")

    return HistoricalComparison(
        has_data=True,
        gpa=gpa,
        sat=sat,
        act=act,
        strength=strength,
        overall_similarity=similarity,
        summary=summary,
    )


def similarity_adjustment(similarity: int) -> int:
    """Percent-point adjustment for an overall similarity score."""
    for threshold, adjustment in SIMILARITY_ADJUSTMENTS:
        if similarity >= threshold:
            return adjustment
    return LOW_SIMILARITY_ADJUSTMENT


def adjust_probability_for_history(
    probability_percent: int,
    comparison: HistoricalComparison
) -> HistoricalAdjustment:
    """
    Apply the similarity adjustment to a percent probability.

    Without comparable data the probability is returned unchanged and the
    result says so (applied=False).
    """
    if not comparison.has_data or comparison.overall_similarity is None:
        reason = NO_DATA_SUMMARY if not comparison.has_data else NO_METRICS_REASON
        return HistoricalAdjustment(
            applied=False,
            adjustment=0,
            probability=int(clamp(probability_percent, MIN_PERCENT, MAX_PERCENT)),
            reason=reason,
        )

    similarity = comparison.overall_similarity
    adjustment = similarity_adjustment(similarity)
    adjusted = int(clamp(probability_percent + adjustment, MIN_PERCENT, MAX_PERCENT))
    logger.debug(
        "Historical similarity %d adjusts probability %d -> %d",
        similarity, probability_percent, adjusted,
    )
    return HistoricalAdjustment(
        applied=True,
        adjustment=adjustment,
        probability=adjusted,
        reason=f"{similarity}% similar to past winners ({adjustment:+d} points)",
    )
