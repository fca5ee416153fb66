"""Assistant stage 3 output: intent-specific, read-only projections of ATS data.

Absent source fields become explicit None or empty collections, never
inferred values.
"""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class _Context(BaseModel):
    model_config = ConfigDict(frozen=True)


class SectionScore(_Context):
    name: str
    score: float


class ScoreContext(_Context):
    type: Literal["SCORE_EXPLANATION"] = "SCORE_EXPLANATION"
    overall_score: float = 0
    section_scores: dict[str, float] = {}  # skills, experience, education, format; present ones only
    lowest_section: SectionScore | None = None
    highest_section: SectionScore | None = None
    explanation: str | None = None


class SkillsGapContext(_Context):
    type: Literal["SKILLS_GAP"] = "SKILLS_GAP"
    matched_core_skills: list[str] = []
    missing_core_skills: list[str] = []
    matched_optional_skills: list[str] = []
    missing_optional_skills: list[str] = []
    total_core_skills: int = 0
    total_optional_skills: int = 0
    core_match_rate: int = 0  # 0-100


class JdMatchContext(_Context):
    type: Literal["JD_MATCH"] = "JD_MATCH"
    overall_match: float = 0
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    match_count: int = 0
    total_required: int = 0
    feedback: str | None = None


class ExperienceContext(_Context):
    type: Literal["EXPERIENCE_IMPROVE"] = "EXPERIENCE_IMPROVE"
    experience_score: float | None = None
    weak_verbs: list[str] = []
    recommendations: list[str] = []


class KeywordSuggestion(_Context):
    keyword: str
    priority: Literal["high", "medium"]


class KeywordContext(_Context):
    type: Literal["KEYWORD_SUGGESTION"] = "KEYWORD_SUGGESTION"
    suggested_keywords: list[KeywordSuggestion] = []
    total_missing: int = 0
    already_present: list[str] = []


class FormattingContext(_Context):
    type: Literal["FORMATTING_FEEDBACK"] = "FORMATTING_FEEDBACK"
    format_score: float | None = None
    format_issues: list[str] = []
    recommendations: list[str] = []


class RewriteContext(_Context):
    type: Literal["RESUME_REWRITE"] = "RESUME_REWRITE"
    weak_verbs: list[str] = []
    needs_llm: bool = True
    original_query: str = ""


class GeneralContext(_Context):
    type: Literal["GENERAL"] = "GENERAL"
    overall_score: float = 0
    matched_skills_count: int = 0
    missing_skills_count: int = 0
    has_feedback: bool = False
    has_recommendations: bool = False


AssistantContext = Union[
    ScoreContext,
    SkillsGapContext,
    JdMatchContext,
    ExperienceContext,
    KeywordContext,
    FormattingContext,
    RewriteContext,
    GeneralContext,
]
