"""Stage 4: rule-based prioritization of what the user should do next."""

import logging
from types import MappingProxyType

from models.schemas.assistant_context import (
    AssistantContext,
    ExperienceContext,
    FormattingContext,
    JdMatchContext,
    KeywordContext,
    RewriteContext,
    ScoreContext,
    SkillsGapContext,
)
from models.schemas.assistant_decision import (
    Decision,
    ExperienceDecision,
    ExperienceIssue,
    FormatIssue,
    FormattingDecision,
    GeneralDecision,
    JdMatchDecision,
    KeywordDecision,
    PrioritizedSkill,
    RewriteDecision,
    ScoreDecision,
    ScoreIssue,
    SkillsGapDecision,
)
from services.scoring import round_half_up

logger = logging.getLogger(__name__)

IMPACT_WEIGHTS = MappingProxyType({
    "missing_core_skill": 10,
    "missing_optional_skill": 3,
    "weak_verb": 2,
    "format_issue": 5,
    "low_section_score": 8,
})

SCORE_THRESHOLDS = MappingProxyType({
    "EXCELLENT": 80,
    "GOOD": 60,
    "MODERATE": 40,
    "LOW": 20,
})

SEVERITY_ORDER = MappingProxyType({"HIGH": 0, "MEDIUM": 1, "LOW": 2})

LOW_SECTION_SCORE = 50
LOW_EXPERIENCE_SCORE = 60
APPLY_THRESHOLD = 50

ACTION_VERBS: tuple[str, ...] = (
    "Led", "Developed", "Implemented", "Achieved",
    "Increased", "Reduced", "Managed", "Created",
)

GENERAL_TIPS: tuple[str, ...] = (
    "Use consistent formatting throughout",
    "Keep resume to 1-2 pages",
    "Use standard section headers",
    "Avoid tables and graphics for ATS compatibility",
)

REWRITE_GUIDELINES: tuple[str, ...] = (
    "Start bullets with strong action verbs",
    "Quantify achievements when possible",
    "Focus on impact and results",
    "Use industry-specific keywords",
)

GENERAL_MESSAGE = "Please ask a specific question about your resume or ATS score."

_SECTION_ADVICE = MappingProxyType({
    "skills": (
        "Add more relevant skills from the job description",
        "Continue adding industry-specific keywords",
    ),
    "experience": (
        "Use stronger action verbs and quantify achievements",
        "Add more measurable outcomes to your bullet points",
    ),
    "education": (
        "Include relevant coursework or certifications",
        "Add any professional certifications or training",
    ),
    "format": (
        "Simplify your resume format for better ATS parsing",
        "Ensure consistent formatting throughout",
    ),
})


def section_recommendation(section: str, score: float) -> str:
    advice = _SECTION_ADVICE.get(section)
    if advice is None:
        return "Focus on improving this section with relevant content"
    low, high = advice
    return low if score < LOW_SECTION_SCORE else high


def score_category(score: float) -> str:
    if score >= SCORE_THRESHOLDS["EXCELLENT"]:
        return "EXCELLENT"
    if score >= SCORE_THRESHOLDS["GOOD"]:
        return "GOOD"
    if score >= SCORE_THRESHOLDS["MODERATE"]:
        return "MODERATE"
    return "LOW"


def _score_action_items(context: ScoreContext) -> list[str]:
    items: list[str] = []
    if context.overall_score < SCORE_THRESHOLDS["GOOD"]:
        items.append("Focus on adding missing core skills")
    if context.lowest_section and context.lowest_section.score < LOW_SECTION_SCORE:
        items.append(f"Improve your {context.lowest_section.name} section")
    if not context.section_scores:
        items.append("Run a complete ATS analysis for detailed feedback")
    return items[:3]


def decide_score_explanation(context: ScoreContext) -> ScoreDecision:
    lowest = context.lowest_section
    primary_issue = None
    if lowest is not None:
        primary_issue = ScoreIssue(
            section=lowest.name,
            score=lowest.score,
            recommendation=section_recommendation(lowest.name, lowest.score),
        )
    return ScoreDecision(
        category=score_category(context.overall_score),
        primary_issue=primary_issue,
        section_breakdown=dict(context.section_scores),
        action_items=_score_action_items(context),
    )


def skills_gap_urgency(missing_core_count: int) -> str:
    if missing_core_count > 3:
        return "HIGH"
    if missing_core_count > 0:
        return "MEDIUM"
    return "LOW"


def decide_skills_gap(context: SkillsGapContext) -> SkillsGapDecision:
    missing_core = context.missing_core_skills
    missing_optional = context.missing_optional_skills

    prioritized = [
        PrioritizedSkill(
            skill=skill,
            priority="HIGH",
            impact=IMPACT_WEIGHTS["missing_core_skill"],
            recommendation=f'Add "{skill}" to your resume - this is a core requirement.',
        )
        for skill in missing_core[:5]
    ]
    prioritized += [
        PrioritizedSkill(
            skill=skill,
            priority="MEDIUM",
            impact=IMPACT_WEIGHTS["missing_optional_skill"],
            recommendation=f'Consider adding "{skill}" to stand out from other candidates.',
        )
        for skill in missing_optional[:3]
    ]

    potential_gain = min(
        len(missing_core) * 5 + len(missing_optional) * 2,
        100 - context.core_match_rate,
    )

    return SkillsGapDecision(
        primary_focus=missing_core[:3],
        secondary_focus=missing_optional[:2],
        prioritized_skills=prioritized,
        potential_score_gain=round_half_up(potential_gain),
        urgency=skills_gap_urgency(len(missing_core)),
    )


def fit_level(match_percentage: int) -> str:
    if match_percentage >= 80:
        return "STRONG_FIT"
    if match_percentage >= 60:
        return "GOOD_FIT"
    if match_percentage >= 40:
        return "PARTIAL_FIT"
    return "WEAK_FIT"


def decide_jd_match(context: JdMatchContext) -> JdMatchDecision:
    percentage = (
        round_half_up(context.match_count / context.total_required * 100)
        if context.total_required > 0 else 0
    )
    return JdMatchDecision(
        fit_level=fit_level(percentage),
        match_percentage=percentage,
        matched_count=context.match_count,
        total_required=context.total_required,
        top_matches=context.matched_skills[:5],
        top_gaps=context.missing_skills[:5],
        should_apply=percentage >= APPLY_THRESHOLD,
        improvement_needed=context.missing_skills[:3],
    )


def decide_experience_improve(context: ExperienceContext) -> ExperienceDecision:
    issues: list[ExperienceIssue] = []

    if context.weak_verbs:
        issues.append(ExperienceIssue(
            type="WEAK_VERBS",
            severity="HIGH" if len(context.weak_verbs) > 3 else "MEDIUM",
            details=context.weak_verbs[:5],
            fix='Replace weak verbs with strong action verbs like "Led", "Developed", "Achieved", "Implemented"',
        ))

    if context.experience_score is not None and context.experience_score < LOW_EXPERIENCE_SCORE:
        issues.append(ExperienceIssue(
            type="LOW_EXPERIENCE_SCORE",
            severity="HIGH",
            score=context.experience_score,
            fix="Quantify achievements with numbers and metrics",
        ))

    issues.sort(key=lambda issue: SEVERITY_ORDER[issue.severity])

    return ExperienceDecision(
        primary_issues=issues[:2],
        all_issues=issues,
        action_verbs=list(ACTION_VERBS),
        recommendations=list(context.recommendations),
    )


def decide_keyword_suggestion(context: KeywordContext) -> KeywordDecision:
    high = [k.keyword for k in context.suggested_keywords if k.priority == "high"][:5]
    medium = [k.keyword for k in context.suggested_keywords if k.priority == "medium"][:3]
    return KeywordDecision(
        must_add=high,
        nice_to_have=medium,
        already_included=context.already_present[:5],
        total_missing=context.total_missing,
        estimated_impact="SIGNIFICANT" if len(high) > 3 else "MODERATE",
    )


def decide_formatting_feedback(context: FormattingContext) -> FormattingDecision:
    return FormattingDecision(
        format_score=context.format_score,
        issues=[FormatIssue(description=issue) for issue in context.format_issues],
        recommendations=context.recommendations[:3],
        general_tips=list(GENERAL_TIPS),
    )


def decide_resume_rewrite(context: RewriteContext) -> RewriteDecision:
    return RewriteDecision(
        requires_llm=True,
        weak_verbs=list(context.weak_verbs),
        guidelines=list(REWRITE_GUIDELINES),
    )


_DECIDERS = {
    ScoreContext: decide_score_explanation,
    SkillsGapContext: decide_skills_gap,
    JdMatchContext: decide_jd_match,
    ExperienceContext: decide_experience_improve,
    KeywordContext: decide_keyword_suggestion,
    FormattingContext: decide_formatting_feedback,
    RewriteContext: decide_resume_rewrite,
}


def decide(context: AssistantContext) -> Decision:
    """Decision for a context; GENERAL contexts get a generic pointer."""
    decider = _DECIDERS.get(type(context))
    if decider is None:
        return GeneralDecision(message=GENERAL_MESSAGE)
    decision = decider(context)
    logger.debug("Decision for %s: %s", context.type, type(decision).__name__)
    return decision
