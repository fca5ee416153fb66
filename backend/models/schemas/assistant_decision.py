"""Assistant stage 4 output: prioritized, structured recommendations.

Decisions carry fragments and classifications only; turning them into prose
is the template layer's job.
"""

from typing import Literal, Union

from pydantic import BaseModel

Severity = Literal["HIGH", "MEDIUM", "LOW"]


class ScoreIssue(BaseModel):
    section: str
    score: float
    impact: str = "high"
    recommendation: str


class ScoreDecision(BaseModel):
    category: Literal["EXCELLENT", "GOOD", "MODERATE", "LOW"]
    primary_issue: ScoreIssue | None = None
    section_breakdown: dict[str, float] = {}
    action_items: list[str] = []


class PrioritizedSkill(BaseModel):
    skill: str
    priority: Severity
    impact: int
    recommendation: str


class SkillsGapDecision(BaseModel):
    primary_focus: list[str] = []
    secondary_focus: list[str] = []
    prioritized_skills: list[PrioritizedSkill] = []
    potential_score_gain: int = 0
    urgency: Severity = "LOW"


class JdMatchDecision(BaseModel):
    fit_level: Literal["STRONG_FIT", "GOOD_FIT", "PARTIAL_FIT", "WEAK_FIT"]
    match_percentage: int = 0
    matched_count: int = 0
    total_required: int = 0
    top_matches: list[str] = []
    top_gaps: list[str] = []
    should_apply: bool = False
    improvement_needed: list[str] = []


class ExperienceIssue(BaseModel):
    type: Literal["WEAK_VERBS", "LOW_EXPERIENCE_SCORE"]
    severity: Severity
    details: list[str] = []
    score: float | None = None
    fix: str


class ExperienceDecision(BaseModel):
    primary_issues: list[ExperienceIssue] = []
    all_issues: list[ExperienceIssue] = []
    action_verbs: list[str] = []
    recommendations: list[str] = []


class KeywordDecision(BaseModel):
    must_add: list[str] = []
    nice_to_have: list[str] = []
    already_included: list[str] = []
    total_missing: int = 0
    estimated_impact: Literal["SIGNIFICANT", "MODERATE"] = "MODERATE"


class FormatIssue(BaseModel):
    type: str = "FORMAT_ISSUE"
    description: str
    severity: Severity = "MEDIUM"


class FormattingDecision(BaseModel):
    format_score: float | None = None
    issues: list[FormatIssue] = []
    recommendations: list[str] = []
    general_tips: list[str] = []


class RewriteDecision(BaseModel):
    requires_llm: bool = True
    weak_verbs: list[str] = []
    guidelines: list[str] = []


class GeneralDecision(BaseModel):
    general: bool = True
    message: str = ""


Decision = Union[
    ScoreDecision,
    SkillsGapDecision,
    JdMatchDecision,
    ExperienceDecision,
    KeywordDecision,
    FormattingDecision,
    RewriteDecision,
    GeneralDecision,
]
