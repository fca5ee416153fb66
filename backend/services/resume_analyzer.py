"""Orchestrator: skill relevance and resume quality combined into one score.

Pipeline:
1. Weighted JD skill extraction (core / optional tiers)
2. Comparison against the resume's skills
3. Weighted skill score (70% core, 30% optional)
4. Structural quality score
5. Blend 70% skill + 30% quality, then apply the relevance gate

The relevance gate: when the skill score is below 10 the final score is capped
at 15 and labelled "Not Relevant", whatever the formatting quality. A
well-formatted resume for an unrelated job must not score well.
"""

import logging
from typing import Any

from models.responses import AnalysisFeedback, AnalysisResult, SkillsBreakdown
from services.feedback import generate_feedback
from services.jd_skill_extractor import extract_weighted_skills
from services.quality_analyzer import analyze_quality
from services.resume_parser import coerce_resume, parse_resume
from services.scoring import round_half_up, score_weighted
from services.skill_comparator import compare_weighted

logger = logging.getLogger(__name__)

SKILL_WEIGHT = 0.7
QUALITY_WEIGHT = 0.3

RELEVANCE_THRESHOLD = 10
RELEVANCE_CEILING = 15

NOT_RELEVANT_LABEL = "Not Relevant"
NOT_RELEVANT_SUMMARY = (
    "Your resume has poor alignment with this job description. Even with good "
    "formatting, the lack of core keywords prevents a passing score."
)


def score_label(score: int) -> str:
    """Label for an ungated final score."""
    if score >= 80:
        return "Excellent Match"
    if score >= 60:
        return "Good Match"
    if score >= 40:
        return "Fair Match"
    return "Needs Work"


def blend_scores(skill_score: int, quality_score: int) -> int:
    return round_half_up(skill_score * SKILL_WEIGHT + quality_score * QUALITY_WEIGHT)


def analyze_resume(parsed_resume: Any, job_text: Any) -> AnalysisResult:
    """Run the full analysis for one resume against one job description."""
    resume = coerce_resume(parsed_resume)

    # --- Skill relevance ---
    weighted = extract_weighted_skills(job_text)
    comparison = compare_weighted(resume.skills, weighted.core_skills, weighted.optional_skills)
    skill_result = score_weighted(comparison)

    # --- Structural quality ---
    quality = analyze_quality(resume)

    # --- Blend + relevance gate ---
    blended = blend_scores(skill_result.score, quality.score)
    skill_feedback = generate_feedback(skill_result.score, comparison)
    summary = skill_feedback.summary

    if skill_result.score < RELEVANCE_THRESHOLD:
        final_score = min(blended, RELEVANCE_CEILING)
        label = NOT_RELEVANT_LABEL
        summary = NOT_RELEVANT_SUMMARY
        logger.debug(
            "Relevance gate applied: skill %d < %d, blended %d capped to %d",
            skill_result.score, RELEVANCE_THRESHOLD, blended, final_score,
        )
    else:
        final_score = blended
        label = score_label(final_score)

    logger.debug(
        "Analysis complete: final %d (%s), skill %d, quality %d",
        final_score, label, skill_result.score, quality.score,
    )

    return AnalysisResult(
        success=True,
        score=final_score,
        score_label=label,
        skill_score=skill_result.score,
        quality_score=quality.score,
        explanation=skill_result.explanation,
        skills=SkillsBreakdown(
            matched=comparison.matched_core_skills + comparison.matched_optional_skills,
            missing=list(comparison.missing_core_skills),
            core_matches=list(comparison.matched_core_skills),
            optional_matches=list(comparison.matched_optional_skills),
            optional_missing=list(comparison.missing_optional_skills),
            core_required=list(weighted.core_skills),
            optional_required=list(weighted.optional_skills),
        ),
        quality=quality,
        feedback=AnalysisFeedback(
            summary=summary,
            skill_recommendations=skill_feedback.recommendations,
            improvements=list(quality.improvements),
            critical_issues=list(quality.issues),
        ),
    )


def analyze_text(resume_text: str, job_text: str) -> AnalysisResult:
    """Parse plain resume text, then analyze it."""
    return analyze_resume(parse_resume(resume_text), job_text)
