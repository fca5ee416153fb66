import pytest

from models.schemas.assistant_intent import Intent
from services.assistant.intents import (
    CONFIDENCE_THRESHOLD,
    analyze_query,
    detect_intent,
    validate_domain,
)
from services.assistant.patterns import (
    AMBIGUOUS_QUESTION,
    CLARIFICATION_QUESTIONS,
    UNKNOWN_QUESTION,
    IntentPattern,
)
from services.rules import compile_rules, regex_rule


@pytest.mark.parametrize("query, intent, confidence", [
    ("Why is my score low?", Intent.SCORE_EXPLANATION, 0.8),
    ("What skills am I missing?", Intent.SKILLS_GAP, 0.65),
    ("How can I improve my experience section?", Intent.EXPERIENCE_IMPROVE, 0.85),
    ("How well do I match this job?", Intent.JD_MATCH, 0.65),
    ("What keywords should I add?", Intent.KEYWORD_SUGGESTION, 0.8),
    ("Are there formatting issues with the layout and structure of my resume?",
     Intent.FORMATTING_FEEDBACK, 0.85),
    ("Can you rewrite this bullet?", Intent.RESUME_REWRITE, 0.65),
    ("Analyze my education section", Intent.SECTION_ANALYSIS, 0.8),
])
def test_detect_intent(query, intent, confidence):
    result = detect_intent(query)
    assert result.intent == intent
    assert result.confidence == pytest.approx(confidence)
    assert result.confidence >= CONFIDENCE_THRESHOLD
    assert result.needs_clarification is False


def test_matches_are_reported():
    result = detect_intent("Why is my score low?")
    assert {"type": "phrase", "value": r"why\s+(is|was)\s+(my|the)\s+score"} in [
        m.model_dump() for m in result.matches
    ]
    assert any(m.type == "keyword" and m.value == "score" for m in result.matches)


def test_confidence_is_capped_at_base():
    result = detect_intent("How can I improve my experience? improve my experience, make my experience better")
    assert result.intent == Intent.EXPERIENCE_IMPROVE
    assert result.confidence == pytest.approx(0.85)


def test_weak_signal_asks_for_clarification():
    result = detect_intent("score")
    assert result.intent == Intent.CLARIFICATION_NEEDED
    assert result.needs_clarification is True
    assert result.possible_intents == [Intent.SCORE_EXPLANATION]
    assert result.clarification_question == CLARIFICATION_QUESTIONS[Intent.SCORE_EXPLANATION]


def test_no_signal_is_unknown():
    result = detect_intent("recruiter")
    assert result.intent == Intent.UNKNOWN
    assert result.needs_clarification is True
    assert result.clarification_question == UNKNOWN_QUESTION


@pytest.mark.parametrize("query", ["help", "improve", "Better", " fix ", "what now?", "how now"])
def test_ambiguous_queries(query):
    result = detect_intent(query)
    assert result.intent == Intent.CLARIFICATION_NEEDED
    assert result.clarification_question == AMBIGUOUS_QUESTION


def test_priority_breaks_ties():
    def pattern(priority):
        return IntentPattern(
            keywords=compile_rules(("foo", "bar")),
            phrases=compile_rules((r"foo\s+bar",), factory=regex_rule),
            base_confidence=0.9,
            priority=priority,
        )

    patterns = {Intent.JD_MATCH: pattern(2), Intent.SKILLS_GAP: pattern(1)}
    result = detect_intent("foo bar", patterns=patterns)
    assert result.intent == Intent.SKILLS_GAP
    assert result.confidence == pytest.approx(0.65)


def test_empty_pattern_table_is_unknown():
    assert detect_intent("anything", patterns={}).intent == Intent.UNKNOWN


@pytest.mark.parametrize("query", [
    "What is the weather today?",
    "Who is the president?",
    "Can you recommend a restaurant near the job site?",
    # unanchored: "play" fires inside "display"
    "display my resume",
])
def test_off_topic_is_refused(query):
    domain = validate_domain(query)
    assert domain.is_valid is False
    assert domain.reason == "OFF_TOPIC"

    result = analyze_query(query)
    assert result.is_valid is False
    assert result.intent == Intent.OUT_OF_SCOPE


def test_domain_confidence():
    domain = validate_domain("Why is my resume score low?")
    assert domain.is_valid is True
    assert domain.reason == "DOMAIN_MATCH"
    assert domain.confidence == 1


def test_single_keyword_is_enough():
    domain = validate_domain(
        "please tell me something about the recruiter and also other people from yesterday and today"
    )
    assert domain.is_valid is True
    assert domain.reason == "LOW_RELEVANCE"


def test_unrelated_query_has_low_relevance():
    domain = validate_domain("hello there")
    assert domain.is_valid is False
    assert domain.reason == "LOW_RELEVANCE"
    assert domain.confidence == 0


@pytest.mark.parametrize("query", [None, "", "   ", 42])
def test_invalid_input(query):
    result = analyze_query(query)
    assert result.is_valid is False
    assert result.intent == Intent.INVALID_INPUT


@pytest.mark.parametrize("query", ["help", "fix", "better", "how now"])
def test_bare_words_without_domain_terms_are_refused(query):
    assert analyze_query(query).intent == Intent.OUT_OF_SCOPE


def test_analyze_query_carries_domain_confidence():
    result = analyze_query("Why is my score low?")
    assert result.is_valid is True
    assert result.intent == Intent.SCORE_EXPLANATION
    assert result.domain_confidence == pytest.approx(1.0)


def test_ambiguous_in_domain_query():
    result = analyze_query("improve")
    assert result.is_valid is True
    assert result.intent == Intent.CLARIFICATION_NEEDED
