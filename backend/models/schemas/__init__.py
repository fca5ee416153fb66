"""Pydantic contracts passed between the pipeline stages."""

from models.schemas.parsed_resume import ParsedResume, PersonalInfo
from models.schemas.skills_comparison import ComparisonResult, WeightedSkills
from models.schemas.score_result import ScoreResult, SkillFeedback
from models.schemas.quality_result import QualityIssue, QualityResult, QualitySections
from models.schemas.ats_result import AtsResult
from models.schemas.assistant_intent import DomainResult, Intent, IntentResult

__all__ = [
    "ParsedResume",
    "PersonalInfo",
    "WeightedSkills",
    "ComparisonResult",
    "ScoreResult",
    "SkillFeedback",
    "QualityIssue",
    "QualityResult",
    "QualitySections",
    "AtsResult",
    "DomainResult",
    "Intent",
    "IntentResult",
]
