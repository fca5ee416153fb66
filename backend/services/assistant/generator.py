"""Stage 5: pick the template for a decision and fill it in."""

import re
from typing import Any

from models.schemas.assistant_context import (
    AssistantContext,
    ExperienceContext,
    FormattingContext,
    GeneralContext,
    KeywordContext,
    RewriteContext,
    ScoreContext,
    SkillsGapContext,
)
from models.schemas.assistant_decision import (
    Decision,
    ExperienceDecision,
    FormattingDecision,
    GeneralDecision,
    JdMatchDecision,
    KeywordDecision,
    RewriteDecision,
    ScoreDecision,
    SkillsGapDecision,
)
from services.assistant import templates
from services.assistant.renderer import render

_BLANK_RUN_RE = re.compile(r"\n{3,}")


def _tidy(text: str) -> str:
    return _BLANK_RUN_RE.sub("\n\n", text).strip()


def _dump(model) -> Any:
    return model.model_dump() if model is not None else None


def _score_data(context: ScoreContext, decision: ScoreDecision) -> tuple[str, dict]:
    return templates.SCORE_EXPLANATION[decision.category], {
        "overall_score": context.overall_score,
        "section_breakdown": dict(context.section_scores),
        "lowest_section": _dump(context.lowest_section),
        "highest_section": _dump(context.highest_section),
        "primary_issue": _dump(decision.primary_issue),
        "action_items": decision.action_items,
    }


def _skills_gap_data(context: SkillsGapContext, decision: SkillsGapDecision) -> tuple[str, dict]:
    return templates.SKILLS_GAP[decision.urgency], {
        "missing_core_count": len(context.missing_core_skills),
        "primary_focus": decision.primary_focus,
        "secondary_focus": decision.secondary_focus,
        "has_secondary": bool(decision.secondary_focus),
        "potential_score_gain": decision.potential_score_gain,
        "matched_count": len(context.matched_core_skills),
        "total_skills": context.total_core_skills,
    }


def _jd_match_data(context: Any, decision: JdMatchDecision) -> tuple[str, dict]:
    return templates.JD_MATCH[decision.fit_level], {
        "match_percentage": decision.match_percentage,
        "matched_count": decision.matched_count,
        "total_required": decision.total_required,
        "top_matches": decision.top_matches,
        "top_gaps": decision.top_gaps,
    }


def _experience_data(context: ExperienceContext, decision: ExperienceDecision) -> tuple[str, dict]:
    return templates.EXPERIENCE_IMPROVE, {
        "has_weak_verbs": bool(context.weak_verbs),
        "weak_verbs": context.weak_verbs,
        "action_verbs": decision.action_verbs,
        "primary_issues": [issue.model_dump() for issue in decision.primary_issues],
    }


def _keyword_data(context: KeywordContext, decision: KeywordDecision) -> tuple[str, dict]:
    return templates.KEYWORD_SUGGESTION, {
        "must_add": decision.must_add,
        "nice_to_have": decision.nice_to_have,
        "has_nice_to_have": bool(decision.nice_to_have),
        "already_count": len(context.already_present),
        "estimated_impact": decision.estimated_impact,
    }


def _formatting_data(context: FormattingContext, decision: FormattingDecision) -> tuple[str, dict]:
    return templates.FORMATTING_FEEDBACK, {
        "has_score": context.format_score is not None,
        "format_score": context.format_score,
        "has_issues": bool(decision.issues),
        "issues": [issue.model_dump() for issue in decision.issues],
        "recommendations": decision.recommendations,
        "general_tips": decision.general_tips,
    }


def _rewrite_data(context: RewriteContext, decision: RewriteDecision) -> tuple[str, dict]:
    return templates.RESUME_REWRITE, {
        "has_weak_verbs": bool(context.weak_verbs),
        "weak_verbs": context.weak_verbs,
        "guidelines": decision.guidelines,
    }


def _general_data(context: Any, decision: GeneralDecision) -> tuple[str, dict]:
    data = {"message": decision.message}
    if isinstance(context, GeneralContext):
        data.update(context.model_dump())
    return templates.GENERAL, data


_BUILDERS = {
    ScoreDecision: _score_data,
    SkillsGapDecision: _skills_gap_data,
    JdMatchDecision: _jd_match_data,
    ExperienceDecision: _experience_data,
    KeywordDecision: _keyword_data,
    FormattingDecision: _formatting_data,
    RewriteDecision: _rewrite_data,
    GeneralDecision: _general_data,
}


def generate_response(context: AssistantContext, decision: Decision) -> str:
    """Render the response text for a decision."""
    template, data = _BUILDERS[type(decision)](context, decision)
    return _tidy(render(template, data))


def domain_refusal_message() -> str:
    return templates.DOMAIN_REFUSAL
