"""Weighted ATS score from a skill comparison.

    core_score     = matched_core / total_core * 100
    optional_score = matched_optional / total_optional * 100
    ats_score      = round(core_score * 0.7 + optional_score * 0.3)

When one tier is empty the other takes the full weight. When both are empty
the score is 0.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from models.schemas.score_result import ScoreResult
from models.schemas.skills_comparison import ComparisonResult

logger = logging.getLogger(__name__)

CORE_WEIGHT = 0.7
OPTIONAL_WEIGHT = 0.3

NO_SKILLS_EXPLANATION = "No skills found in the job description to evaluate against."
INVALID_INPUT_EXPLANATION = "Invalid comparison data provided."


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves away from zero for the non-negative scores used here."""
    factor = 10 ** ndigits
    rounded = math.floor(value * factor + 0.5) / factor
    return int(rounded) if ndigits == 0 else rounded


def tier_weights(total_core: int, total_optional: int) -> tuple[float, float]:
    """(core_weight, optional_weight); a missing tier hands its weight over."""
    if total_core == 0 and total_optional == 0:
        return 0.0, 0.0
    if total_core == 0:
        return 0.0, 1.0
    if total_optional == 0:
        return 1.0, 0.0
    return CORE_WEIGHT, OPTIONAL_WEIGHT


def weighted_percentage(matched_core: int, total_core: int, matched_optional: int, total_optional: int) -> float:
    """Unrounded weighted match percentage from tier counts."""
    core_score = matched_core / total_core * 100 if total_core > 0 else 0.0
    optional_score = matched_optional / total_optional * 100 if total_optional > 0 else 0.0
    core_weight, optional_weight = tier_weights(total_core, total_optional)
    return core_score * core_weight + optional_score * optional_weight


def _as_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


def coerce_comparison(comparison: Any) -> ComparisonResult | None:
    if isinstance(comparison, ComparisonResult):
        return comparison
    if isinstance(comparison, Mapping):
        return ComparisonResult(
            matched_core_skills=_as_list(comparison.get("matched_core_skills")),
            missing_core_skills=_as_list(comparison.get("missing_core_skills")),
            matched_optional_skills=_as_list(comparison.get("matched_optional_skills")),
            missing_optional_skills=_as_list(comparison.get("missing_optional_skills")),
        )
    return None


def score_weighted(comparison: Any) -> ScoreResult:
    """Compute the weighted ATS score and its explanation."""
    result = coerce_comparison(comparison)
    if result is None:
        return ScoreResult(score=0, explanation=INVALID_INPUT_EXPLANATION)

    matched_core = len(result.matched_core_skills)
    matched_optional = len(result.matched_optional_skills)
    total_core = result.total_core
    total_optional = result.total_optional

    if total_core == 0 and total_optional == 0:
        return ScoreResult(score=0, explanation=NO_SKILLS_EXPLANATION)

    core_score = matched_core / total_core * 100 if total_core > 0 else 0.0
    optional_score = matched_optional / total_optional * 100 if total_optional > 0 else 0.0
    score = round_half_up(weighted_percentage(matched_core, total_core, matched_optional, total_optional))

    logger.debug("Weighted ATS score %d (core %.1f, optional %.1f)", score, core_score, optional_score)
    return ScoreResult(
        score=score,
        explanation=build_explanation(
            score, matched_core, total_core, matched_optional, total_optional,
            core_score, optional_score,
        ),
    )


def score_band(score: int) -> str:
    """Qualitative band used in explanations."""
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 40:
        return "Moderate"
    if score > 0:
        return "Low"
    return "None"


_BAND_OPENERS = {
    "Excellent": "Excellent match! ",
    "Good": "Good match! ",
    "Moderate": "Moderate match. ",
    "Low": "Low match. ",
    "None": "No match found. ",
}


def build_explanation(
    score: int,
    matched_core: int,
    total_core: int,
    matched_optional: int,
    total_optional: int,
    core_score: float,
    optional_score: float,
) -> str:
    parts = [_BAND_OPENERS[score_band(score)]]

    if total_core > 0:
        parts.append(
            f"You matched {matched_core} out of {total_core} core/required skills "
            f"({round_half_up(core_score)}%). "
        )
        if core_score >= 80:
            parts.append("Your core skills are very strong. ")
        elif core_score >= 60:
            parts.append("Your core skills are good but could be improved. ")
        elif core_score > 0:
            parts.append("You are missing several critical core skills. ")
        else:
            parts.append("You do not possess the required core skills. ")

    if total_optional > 0:
        parts.append(
            f"You matched {matched_optional} out of {total_optional} optional/preferred skills "
            f"({round_half_up(optional_score)}%). "
        )
        if optional_score >= 80:
            parts.append("Great bonus skills! ")
        elif optional_score >= 50:
            parts.append("Good additional skills. ")
        elif optional_score > 0:
            parts.append("Some bonus skills present. ")

    if score >= 70:
        parts.append("You are a strong candidate for this position.")
    elif score >= 50:
        parts.append("Consider highlighting relevant experience or acquiring missing skills.")
    elif score > 0:
        parts.append("Significant skill development may be needed for this role.")
    else:
        parts.append("This position may not align with your current skill set.")

    return "".join(parts)
