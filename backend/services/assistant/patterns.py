"""Rule tables for query validation and intent classification.

Keywords are case-insensitive substring rules; phrases are regex rules.
"""

from types import MappingProxyType
from typing import NamedTuple

from models.schemas.assistant_intent import Intent
from services.rules import Rule, compile_rules, phrase_rule, regex_rule

# Terms that place a query inside the resume / ATS domain
DOMAIN_KEYWORDS: tuple[str, ...] = (
    "resume", "cv", "ats", "score", "skills", "experience", "job",
    "description", "keywords", "match", "format", "bullet", "section",
    "work history", "education", "certification", "qualification",
    "hiring", "recruiter", "applicant", "tracking", "optimize",
    "improve", "rewrite", "rephrase", "missing", "weak", "strong",
)

DOMAIN_RULES: tuple[Rule, ...] = compile_rules(DOMAIN_KEYWORDS)


class IntentPattern(NamedTuple):
    keywords: tuple[Rule, ...]
    phrases: tuple[Rule, ...]
    base_confidence: float  # cap on the accumulated score
    priority: int  # lower wins ties


def _pattern(keywords, phrases, base_confidence, priority) -> IntentPattern:
    return IntentPattern(
        keywords=compile_rules(keywords, factory=phrase_rule),
        phrases=compile_rules(phrases, factory=regex_rule),
        base_confidence=base_confidence,
        priority=priority,
    )


INTENT_PATTERNS = MappingProxyType({
    Intent.SCORE_EXPLANATION: _pattern(
        ("score", "why", "low", "high", "explain", "breakdown", "rating", "grade", "result", "percentage"),
        (
            r"why\s+(is|was)\s+(my|the)\s+score",
            r"explain\s+(my|the)\s+score",
            r"score\s+(is|was)\s+(low|high|bad|good)",
            r"how\s+did\s+i\s+(score|do|perform)",
            r"what\s+does\s+(my|the)\s+score\s+mean",
            r"breakdown\s+(of|for)\s+(my|the)\s+score",
        ),
        0.9, 1,
    ),
    Intent.SKILLS_GAP: _pattern(
        ("missing", "skills", "gap", "lack", "need", "required", "keywords", "absent", "not found"),
        (
            r"what\s+(skills|keywords)\s+(am\s+i|are)\s+missing",
            r"missing\s+(skills|keywords)",
            r"skills?\s+gap",
            r"what\s+(should|do)\s+i\s+(add|include)",
            r"which\s+(skills|keywords)\s+(are|were)\s+not\s+found",
        ),
        0.9, 2,
    ),
    Intent.JD_MATCH: _pattern(
        ("match", "job", "description", "fit", "aligned", "relevant", "compatible", "suitable"),
        (
            r"how\s+(well\s+)?(do|does)\s+(i|it|my resume)\s+match",
            r"match\s+(percentage|rate|score)",
            r"fit\s+for\s+(this|the)\s+job",
            r"aligned\s+with\s+(the\s+)?job",
            r"compare\s+(to|with)\s+(the\s+)?job",
        ),
        0.9, 3,
    ),
    Intent.EXPERIENCE_IMPROVE: _pattern(
        ("experience", "work", "history", "weak", "improve", "better", "strengthen", "enhance", "bullets"),
        (
            r"improve\s+(my\s+)?experience",
            r"weak\s+(experience|work\s+history)",
            r"how\s+(can|do)\s+i\s+(improve|enhance)\s+(my\s+)?experience",
            r"experience\s+section\s+(is|looks)\s+(weak|bad)",
            r"make\s+(my\s+)?experience\s+(better|stronger)",
        ),
        0.85, 4,
    ),
    Intent.KEYWORD_SUGGESTION: _pattern(
        ("suggest", "recommend", "add", "include", "keywords", "terms", "phrases", "words"),
        (
            r"suggest\s+(keywords|skills|terms)",
            r"what\s+(keywords|skills)\s+(should|can)\s+i\s+add",
            r"recommend\s+(any\s+)?(keywords|skills)",
            r"keywords?\s+to\s+(add|include)",
        ),
        0.85, 5,
    ),
    Intent.FORMATTING_FEEDBACK: _pattern(
        ("format", "layout", "structure", "design", "template", "sections", "organize", "length", "pages"),
        (
            r"format(ting)?\s+(issues?|problems?|feedback)",
            r"(is|was)\s+(the|my)\s+format",
            r"how\s+(is|should)\s+(the|my)\s+(format|layout|structure)",
            r"structure\s+(of|for)\s+(my|the)\s+resume",
            r"organize\s+(my|the)\s+resume",
        ),
        0.85, 6,
    ),
    Intent.RESUME_REWRITE: _pattern(
        ("rewrite", "rephrase", "reword", "improve", "bullet", "sentence", "stronger", "action verbs"),
        (
            r"rewrite\s+(this|my|the)\s+(bullet|sentence|point)",
            r"rephrase\s+(this|my)",
            r"make\s+(this|it)\s+(sound\s+)?(better|stronger|professional)",
            r"improve\s+(this|my)\s+(bullet|sentence)",
            r"use\s+(stronger|better|action)\s+verbs",
        ),
        0.8, 7,
    ),
    Intent.SECTION_ANALYSIS: _pattern(
        ("section", "education", "summary", "objective", "projects", "certifications", "analyze"),
        (
            r"analyze\s+(my\s+)?(education|summary|projects)",
            r"(education|summary|projects?)\s+section",
            r"how\s+(is|was)\s+(my\s+)?(education|summary)",
            r"feedback\s+(on|for)\s+(my\s+)?(education|summary)",
        ),
        0.8, 8,
    ),
})

# Any match refuses the query outright. These are unanchored substrings, so
# "play" also fires on "display".
OFF_TOPIC_RULES: tuple[Rule, ...] = compile_rules(
    (
        r"weather", r"news", r"sports", r"politics", r"recipe", r"cook",
        r"movie", r"music", r"game", r"play", r"travel", r"hotel",
        r"restaurant", r"shop", r"buy", r"price", r"stock", r"crypto",
        r"health", r"medical", r"doctor", r"legal", r"lawyer",
        r"math", r"calculate", r"translate", r"language",
        r"who\s+is", r"what\s+year", r"when\s+was", r"history\s+of",
    ),
    factory=regex_rule,
)

# Bare queries that always need clarification
AMBIGUOUS_RULES: tuple[Rule, ...] = compile_rules(
    (r"^help$", r"^improve$", r"^better$", r"^fix$", r"^(what|how)\s+now\??$"),
    factory=regex_rule,
)

AMBIGUOUS_QUESTION = (
    "Could you be more specific? For example:\n"
    '- "Why is my score low?"\n'
    '- "What skills am I missing?"\n'
    '- "How can I improve my experience section?"'
)

UNKNOWN_QUESTION = (
    "I'm not sure what you're asking about. Could you please rephrase your "
    "question about your resume or ATS score?"
)

DEFAULT_CLARIFICATION = "Could you please clarify what aspect of your resume you'd like help with?"

CLARIFICATION_QUESTIONS = MappingProxyType({
    Intent.SCORE_EXPLANATION: "Are you asking about your ATS score? Would you like me to explain why your score is what it is?",
    Intent.SKILLS_GAP: "Are you interested in knowing which skills are missing from your resume?",
    Intent.JD_MATCH: "Would you like to know how well your resume matches the job description?",
    Intent.EXPERIENCE_IMPROVE: "Are you looking to improve your work experience section?",
    Intent.KEYWORD_SUGGESTION: "Would you like suggestions for keywords to add to your resume?",
    Intent.FORMATTING_FEEDBACK: "Are you asking about your resume's format and structure?",
    Intent.RESUME_REWRITE: "Would you like me to help rewrite or improve a specific part of your resume?",
    Intent.SECTION_ANALYSIS: "Which section of your resume would you like me to analyze?",
})

OUT_OF_SCOPE_MESSAGE = (
    "I can only assist with resume analysis and ATS optimization. Please ask about "
    "your resume score, missing skills, or how to improve your ATS match."
)

INVALID_INPUT_MESSAGE = "Please enter a valid question."
