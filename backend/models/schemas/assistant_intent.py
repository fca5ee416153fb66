"""Assistant stage 1-2 output: domain validation and intent classification."""

from enum import Enum

from pydantic import BaseModel


class Intent(str, Enum):
    SCORE_EXPLANATION = "SCORE_EXPLANATION"
    SKILLS_GAP = "SKILLS_GAP"
    JD_MATCH = "JD_MATCH"
    EXPERIENCE_IMPROVE = "EXPERIENCE_IMPROVE"
    KEYWORD_SUGGESTION = "KEYWORD_SUGGESTION"
    FORMATTING_FEEDBACK = "FORMATTING_FEEDBACK"
    RESUME_REWRITE = "RESUME_REWRITE"
    SECTION_ANALYSIS = "SECTION_ANALYSIS"
    # Control pseudo-intents
    CLARIFICATION_NEEDED = "CLARIFICATION_NEEDED"
    UNKNOWN = "UNKNOWN"
    OUT_OF_SCOPE = "OUT_OF_SCOPE"
    INVALID_INPUT = "INVALID_INPUT"


class DomainResult(BaseModel):
    is_valid: bool = False
    confidence: float = 0.0
    reason: str = ""  # OFF_TOPIC | DOMAIN_MATCH | LOW_RELEVANCE


class IntentMatch(BaseModel):
    type: str  # keyword | phrase
    value: str


class IntentResult(BaseModel):
    """Outcome of query analysis.

    ``is_valid`` is False only for invalid or off-topic queries; a valid query
    may still need clarification.
    """
    is_valid: bool = True
    intent: Intent = Intent.UNKNOWN
    confidence: float = 0.0
    needs_clarification: bool = False
    clarification_question: str | None = None
    possible_intents: list[Intent] = []
    matches: list[IntentMatch] = []
    domain_confidence: float | None = None
    message: str | None = None
