"""Resume structural quality output, independent of skill matching."""

from typing import Literal

from pydantic import BaseModel


class QualityIssue(BaseModel):
    type: Literal["critical", "warning"]
    message: str


class QualitySections(BaseModel):
    """Raw points per section (contact 15, summary 5, experience 10,
    education 5, projects 5; 40 in total)."""
    contact: int = 0
    summary: int = 0
    experience: int = 0
    education: int = 0
    projects: int = 0


class QualityResult(BaseModel):
    score: int = 0  # 0-100, rescaled from the 40-point budget
    sections: QualitySections = QualitySections()
    issues: list[QualityIssue] = []
    improvements: list[str] = []
    weak_verbs: list[str] = []  # distinct weak verbs found, table order
    weak_verb_count: int = 0
