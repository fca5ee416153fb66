"""Assistant entry point.

Pipeline:
1. Domain validation (off-topic queries are refused)
2. Intent detection (low confidence asks for clarification)
3. Context building from the ATS result
4. Decision engine
5. Template rendering

Every outcome is an AssistantResponse; callers branch on ``type``.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from models.responses import AnalysisResult, AssistantResponse, ResponseContext, SuggestedAction
from models.schemas.assistant_intent import Intent
from models.schemas.ats_result import AtsResult
from services.assistant.context_builder import build_context
from services.assistant.decision_engine import decide
from services.assistant.generator import domain_refusal_message, generate_response
from services.assistant.intents import analyze_query

logger = logging.getLogger(__name__)

DATA_REQUIRED_INTENTS = frozenset({
    Intent.SCORE_EXPLANATION,
    Intent.SKILLS_GAP,
    Intent.JD_MATCH,
    Intent.EXPERIENCE_IMPROVE,
    Intent.KEYWORD_SUGGESTION,
    Intent.FORMATTING_FEEDBACK,
})

REFUSAL_SUGGESTIONS: tuple[str, ...] = (
    "Why is my score low?",
    "What skills am I missing?",
    "How can I improve my experience section?",
)

MISSING_DATA_MESSAGE = (
    "I need your ATS analysis results to answer this question. Please upload "
    "your resume and run an analysis first."
)
NO_DATA_MESSAGE = "No analysis data available. Please run an ATS scan first."
EMPTY_QUERY_MESSAGE = "Please enter a question about your resume or ATS score."


class _Unusable:
    """Marker for an ATS result that was supplied but cannot be read."""


_UNUSABLE = _Unusable()


def requires_ats_data(intent: Intent) -> bool:
    return intent in DATA_REQUIRED_INTENTS


def coerce_ats_result(value: Any) -> AtsResult | None | _Unusable:
    """AtsResult for any accepted shape, None when absent, _UNUSABLE when malformed."""
    if value is None:
        return None
    if isinstance(value, AtsResult):
        return value
    if isinstance(value, AnalysisResult):
        return AtsResult.from_analysis(value)
    if isinstance(value, Mapping):
        try:
            # A serialized AnalysisResult, as returned by /analyze
            if isinstance(value.get("skills"), Mapping):
                return AtsResult.from_serialized(value)
            return AtsResult.model_validate(value)
        except ValidationError:
            logger.debug("ATS result did not validate")
            return _UNUSABLE
    return _UNUSABLE


def domain_refusal() -> AssistantResponse:
    return AssistantResponse(
        success=False,
        type="DOMAIN_REFUSAL",
        intent=Intent.OUT_OF_SCOPE,
        message=domain_refusal_message(),
        suggestions=list(REFUSAL_SUGGESTIONS),
    )


def process_query(query: Any, ats_result: Any = None) -> AssistantResponse:
    """Answer one question about a resume analysis."""
    if not isinstance(query, str):
        return AssistantResponse(
            success=False, type="INVALID_INPUT", intent=Intent.INVALID_INPUT,
            message="Please enter a valid question.",
        )
    trimmed = query.strip()
    if not trimmed:
        return AssistantResponse(
            success=False, type="INVALID_INPUT", intent=Intent.INVALID_INPUT,
            message=EMPTY_QUERY_MESSAGE,
        )

    # --- Stages 1-2: domain + intent ---
    intent_result = analyze_query(trimmed)
    if not intent_result.is_valid:
        return domain_refusal()

    if intent_result.needs_clarification:
        return AssistantResponse(
            success=False,
            type="CLARIFICATION",
            intent=intent_result.intent,
            confidence=intent_result.confidence,
            message=intent_result.clarification_question or "",
            possible_intents=intent_result.possible_intents,
        )

    intent = intent_result.intent
    ats = coerce_ats_result(ats_result)

    if ats is None and requires_ats_data(intent):
        return AssistantResponse(
            success=False, type="MISSING_DATA", intent=intent, message=MISSING_DATA_MESSAGE,
        )
    if ats is _UNUSABLE:
        return AssistantResponse(success=False, type="ERROR", intent=intent, message=NO_DATA_MESSAGE)

    # --- Stages 3-5: context, decision, rendering ---
    context = build_context(ats or AtsResult(), intent, trimmed)
    decision = decide(context)
    message = generate_response(context, decision)

    logger.debug("Answered %s query (confidence %.2f)", intent.value, intent_result.confidence)
    return AssistantResponse(
        success=True,
        type="RESPONSE",
        intent=intent,
        confidence=intent_result.confidence,
        message=message,
        needs_llm=intent is Intent.RESUME_REWRITE and getattr(decision, "requires_llm", False),
        context=ResponseContext(
            type=context.type,
            overall_score=ats.ats_score if ats is not None and hasattr(context, "overall_score") else None,
        ),
    )


def get_suggested_actions(ats_result: Any = None) -> list[SuggestedAction]:
    """Up to four quick questions that make sense for this analysis."""
    ats = coerce_ats_result(ats_result)
    if not isinstance(ats, AtsResult):
        return [SuggestedAction(label="Upload resume for analysis", query=None)]

    actions = [SuggestedAction(label="Explain my score", query="Why is my score what it is?")]
    if ats.missing_core_skills:
        actions.append(SuggestedAction(label="Show missing skills", query="What skills am I missing?"))
    actions.append(SuggestedAction(label="Suggest keywords", query="What keywords should I add?"))
    if ats.ats_score is not None and ats.ats_score < 70:
        actions.append(SuggestedAction(label="How to improve", query="How can I improve my experience section?"))
    return actions[:4]
