"""Stage 3: project ATS data into the subset an intent needs.

Only data that exists is passed on. Missing numbers become 0 or None and
missing lists become empty lists; nothing is inferred.
"""

from models.schemas.assistant_context import (
    AssistantContext,
    ExperienceContext,
    FormattingContext,
    GeneralContext,
    JdMatchContext,
    KeywordContext,
    KeywordSuggestion,
    RewriteContext,
    ScoreContext,
    SectionScore,
    SkillsGapContext,
)
from models.schemas.assistant_intent import Intent
from models.schemas.ats_result import AtsResult
from services.scoring import round_half_up

MAX_SUGGESTED_KEYWORDS = 10

EXPERIENCE_TERMS = ("experience", "action", "verb")
FORMATTING_TERMS = ("format", "structure", "section", "length")


def _filter_recommendations(recommendations: list[str] | None, terms: tuple[str, ...]) -> list[str]:
    if not recommendations:
        return []
    return [r for r in recommendations if any(term in r.lower() for term in terms)]


def match_rate(matched: int, missing: int) -> int:
    total = matched + missing
    if total == 0:
        return 0
    return round_half_up(matched / total * 100)


def build_score_context(ats: AtsResult) -> ScoreContext:
    candidates = (
        ("skills", ats.skills_score),
        ("experience", ats.experience_score),
        ("education", ats.education_score),
        ("format", ats.format_score),
    )
    section_scores = {name: score for name, score in candidates if score is not None}

    lowest = highest = None
    if section_scores:
        ordered = sorted(section_scores.items(), key=lambda item: item[1])
        lowest = SectionScore(name=ordered[0][0], score=ordered[0][1])
        highest = SectionScore(name=ordered[-1][0], score=ordered[-1][1])

    return ScoreContext(
        overall_score=ats.ats_score or 0,
        section_scores=section_scores,
        lowest_section=lowest,
        highest_section=highest,
        explanation=ats.explanation or None,
    )


def build_skills_gap_context(ats: AtsResult) -> SkillsGapContext:
    matched_core = ats.matched_core_skills or []
    missing_core = ats.missing_core_skills or []
    matched_optional = ats.matched_optional_skills or []
    missing_optional = ats.missing_optional_skills or []
    return SkillsGapContext(
        matched_core_skills=matched_core,
        missing_core_skills=missing_core,
        matched_optional_skills=matched_optional,
        missing_optional_skills=missing_optional,
        total_core_skills=len(matched_core) + len(missing_core),
        total_optional_skills=len(matched_optional) + len(missing_optional),
        core_match_rate=match_rate(len(matched_core), len(missing_core)),
    )


def build_jd_match_context(ats: AtsResult) -> JdMatchContext:
    matched = ats.matched_core_skills or []
    missing = ats.missing_core_skills or []
    return JdMatchContext(
        overall_match=ats.ats_score or 0,
        matched_skills=matched,
        missing_skills=missing,
        match_count=len(matched),
        total_required=len(matched) + len(missing),
        feedback=ats.feedback or None,
    )


def build_experience_context(ats: AtsResult) -> ExperienceContext:
    return ExperienceContext(
        experience_score=ats.experience_score,
        weak_verbs=ats.weak_verbs or [],
        recommendations=_filter_recommendations(ats.recommendations, EXPERIENCE_TERMS),
    )


def build_keyword_context(ats: AtsResult) -> KeywordContext:
    missing_core = ats.missing_core_skills or []
    missing_optional = ats.missing_optional_skills or []
    # Core first, so truncation drops optional keywords before core ones
    suggestions = [KeywordSuggestion(keyword=k, priority="high") for k in missing_core]
    suggestions += [KeywordSuggestion(keyword=k, priority="medium") for k in missing_optional]
    return KeywordContext(
        suggested_keywords=suggestions[:MAX_SUGGESTED_KEYWORDS],
        total_missing=len(missing_core) + len(missing_optional),
        already_present=ats.matched_core_skills or [],
    )


def build_formatting_context(ats: AtsResult) -> FormattingContext:
    return FormattingContext(
        format_score=ats.format_score,
        format_issues=ats.format_issues or [],
        recommendations=_filter_recommendations(ats.recommendations, FORMATTING_TERMS),
    )


def build_rewrite_context(ats: AtsResult, query: str) -> RewriteContext:
    return RewriteContext(weak_verbs=ats.weak_verbs or [], original_query=query)


def build_general_context(ats: AtsResult) -> GeneralContext:
    return GeneralContext(
        overall_score=ats.ats_score or 0,
        matched_skills_count=len(ats.matched_core_skills or []),
        missing_skills_count=len(ats.missing_core_skills or []),
        has_feedback=bool(ats.feedback),
        has_recommendations=bool(ats.recommendations),
    )


_BUILDERS = {
    Intent.SCORE_EXPLANATION: build_score_context,
    Intent.SKILLS_GAP: build_skills_gap_context,
    Intent.JD_MATCH: build_jd_match_context,
    Intent.EXPERIENCE_IMPROVE: build_experience_context,
    Intent.KEYWORD_SUGGESTION: build_keyword_context,
    Intent.FORMATTING_FEEDBACK: build_formatting_context,
}


def build_context(ats: AtsResult, intent: Intent, query: str = "") -> AssistantContext:
    """Context for ``intent``; SECTION_ANALYSIS and anything unlisted get GENERAL."""
    if intent is Intent.RESUME_REWRITE:
        return build_rewrite_context(ats, query)
    builder = _BUILDERS.get(intent, build_general_context)
    return builder(ats)
