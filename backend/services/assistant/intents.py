"""Stages 1-2: domain validation and rule-based intent classification.

Scoring per intent: +0.15 per keyword found, +0.35 per phrase pattern found,
capped at the intent's base confidence. The best score wins, lower priority
breaks ties, and anything under 0.6 asks for clarification.
"""

import logging
from collections.abc import Mapping
from typing import Any

from models.schemas.assistant_intent import DomainResult, Intent, IntentMatch, IntentResult
from services.assistant.patterns import (
    AMBIGUOUS_QUESTION,
    AMBIGUOUS_RULES,
    CLARIFICATION_QUESTIONS,
    DEFAULT_CLARIFICATION,
    DOMAIN_RULES,
    INTENT_PATTERNS,
    INVALID_INPUT_MESSAGE,
    OFF_TOPIC_RULES,
    OUT_OF_SCOPE_MESSAGE,
    UNKNOWN_QUESTION,
    IntentPattern,
)
from services.rules import Rule, has_match, matching_rules

logger = logging.getLogger(__name__)

CONFIDENCE_THRESHOLD = 0.6
DOMAIN_THRESHOLD = 0.3

KEYWORD_WEIGHT = 0.15
PHRASE_WEIGHT = 0.35


def validate_domain(
    query: str,
    *,
    domain_rules: tuple[Rule, ...] = DOMAIN_RULES,
    off_topic_rules: tuple[Rule, ...] = OFF_TOPIC_RULES,
) -> DomainResult:
    """Is the query about resumes / ATS at all?"""
    normalized = query.lower().strip()

    if has_match(normalized, off_topic_rules):
        return DomainResult(is_valid=False, confidence=0.0, reason="OFF_TOPIC")

    keyword_count = len(matching_rules(normalized, domain_rules))
    words = [word for word in normalized.split() if len(word) > 2]
    confidence = min(keyword_count / max(len(words) * 0.3, 1), 1) if words else 0.0

    return DomainResult(
        is_valid=confidence >= DOMAIN_THRESHOLD or keyword_count >= 1,
        confidence=confidence,
        reason="DOMAIN_MATCH" if confidence >= DOMAIN_THRESHOLD else "LOW_RELEVANCE",
    )


def _score_intent(query: str, pattern: IntentPattern) -> tuple[float, list[IntentMatch]]:
    score = 0.0
    matches: list[IntentMatch] = []
    for rule in matching_rules(query, pattern.keywords):
        score += KEYWORD_WEIGHT
        matches.append(IntentMatch(type="keyword", value=rule.category))
    for rule in matching_rules(query, pattern.phrases):
        score += PHRASE_WEIGHT
        matches.append(IntentMatch(type="phrase", value=rule.category))
    return min(score, pattern.base_confidence), matches


def clarification_question(intent: Intent) -> str:
    return CLARIFICATION_QUESTIONS.get(intent, DEFAULT_CLARIFICATION)


def detect_intent(
    query: str,
    *,
    patterns: Mapping[Intent, IntentPattern] = INTENT_PATTERNS,
    ambiguous_rules: tuple[Rule, ...] = AMBIGUOUS_RULES,
) -> IntentResult:
    """Classify a query into one of the assistant intents."""
    normalized = query.lower().strip()

    if has_match(normalized, ambiguous_rules):
        return IntentResult(
            intent=Intent.CLARIFICATION_NEEDED,
            confidence=0.0,
            needs_clarification=True,
            clarification_question=AMBIGUOUS_QUESTION,
        )

    scored = []
    for intent, pattern in patterns.items():
        confidence, matches = _score_intent(normalized, pattern)
        scored.append((confidence, pattern.priority, intent, matches))

    if not scored:
        return IntentResult(
            intent=Intent.UNKNOWN,
            needs_clarification=True,
            clarification_question=UNKNOWN_QUESTION,
        )

    scored.sort(key=lambda s: (-s[0], s[1]))
    top_confidence, _, top_intent, top_matches = scored[0]

    if top_confidence < CONFIDENCE_THRESHOLD:
        partial = [s for s in scored if s[0] > 0]
        if partial:
            return IntentResult(
                intent=Intent.CLARIFICATION_NEEDED,
                confidence=top_confidence,
                needs_clarification=True,
                possible_intents=[s[2] for s in partial[:2]],
                clarification_question=clarification_question(partial[0][2]),
            )
        return IntentResult(
            intent=Intent.UNKNOWN,
            confidence=0.0,
            needs_clarification=True,
            clarification_question=UNKNOWN_QUESTION,
        )

    logger.debug("Detected intent %s (%.2f)", top_intent.value, top_confidence)
    return IntentResult(intent=top_intent, confidence=top_confidence, matches=top_matches)


def analyze_query(query: Any) -> IntentResult:
    """Domain validation followed by intent detection."""
    if not isinstance(query, str) or not query.strip():
        return IntentResult(
            is_valid=False,
            intent=Intent.INVALID_INPUT,
            message=INVALID_INPUT_MESSAGE,
        )

    domain = validate_domain(query)
    if not domain.is_valid:
        logger.debug("Query refused (%s)", domain.reason)
        return IntentResult(
            is_valid=False,
            intent=Intent.OUT_OF_SCOPE,
            message=OUT_OF_SCOPE_MESSAGE,
        )

    result = detect_intent(query)
    return result.model_copy(update={"domain_confidence": domain.confidence})
