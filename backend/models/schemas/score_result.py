"""Weighted ATS score output."""

from pydantic import BaseModel


class ScoreResult(BaseModel):
    score: int = 0  # 0-100
    explanation: str = ""


class SkillFeedback(BaseModel):
    """Summary and prioritized recommendations for a skill comparison."""
    summary: str = ""
    recommendations: list[str] = []
