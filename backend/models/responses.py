from pydantic import BaseModel

from models.schemas.assistant_intent import Intent
from models.schemas.quality_result import QualityIssue, QualityResult


class SkillsBreakdown(BaseModel):
    matched: list[str] = []  # core + optional matches
    missing: list[str] = []  # core only
    core_matches: list[str] = []
    optional_matches: list[str] = []
    optional_missing: list[str] = []
    core_required: list[str] = []
    optional_required: list[str] = []


class AnalysisFeedback(BaseModel):
    summary: str = ""
    skill_recommendations: list[str] = []
    improvements: list[str] = []
    critical_issues: list[QualityIssue] = []


class AnalysisResult(BaseModel):
    success: bool = True
    score: int = 0  # gated final score, 0-100
    score_label: str = ""
    skill_score: int = 0
    quality_score: int = 0
    explanation: str = ""
    skills: SkillsBreakdown = SkillsBreakdown()
    quality: QualityResult = QualityResult()
    feedback: AnalysisFeedback = AnalysisFeedback()


class ImprovementItem(BaseModel):
    skill: str
    new_score: float


class SimulationResult(BaseModel):
    current_score: float = 0.0
    improvements: list[ImprovementItem] = []  # best gain first


class SuggestedAction(BaseModel):
    label: str
    query: str | None = None


class ResponseContext(BaseModel):
    type: str
    overall_score: float | None = None


class AssistantResponse(BaseModel):
    success: bool = False
    type: str = "RESPONSE"  # RESPONSE | CLARIFICATION | DOMAIN_REFUSAL | MISSING_DATA | INVALID_INPUT | ERROR
    message: str = ""
    intent: Intent | None = None
    confidence: float | None = None
    needs_llm: bool = False
    possible_intents: list[Intent] = []
    suggestions: list[str] = []
    context: ResponseContext | None = None


class SuggestionsResponse(BaseModel):
    success: bool = True
    suggestions: list[SuggestedAction] = []
