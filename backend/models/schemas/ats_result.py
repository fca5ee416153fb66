"""The assistant's view of an analysis: every field optional, None = absent."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from models.responses import AnalysisResult


class AtsResult(BaseModel):
    """ATS data the assistant reasons over.

    Accepts snake_case or camelCase keys so results stored by other clients
    can be passed back in as-is.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    ats_score: float | None = None
    skills_score: float | None = None
    experience_score: float | None = None
    education_score: float | None = None
    format_score: float | None = None
    explanation: str | None = None
    matched_core_skills: list[str] | None = None
    missing_core_skills: list[str] | None = None
    matched_optional_skills: list[str] | None = None
    missing_optional_skills: list[str] | None = None
    weak_verbs: list[str] | None = None
    recommendations: list[str] | None = None
    format_issues: list[str] | None = None
    feedback: str | None = None

    @classmethod
    def from_analysis(cls, analysis: "AnalysisResult") -> "AtsResult":
        """Project an AnalysisResult without inventing any value.

        Experience (10 points) and education (5 points) are rescaled to 0-100.
        """
        sections = analysis.quality.sections
        return cls(
            ats_score=analysis.score,
            skills_score=analysis.skill_score,
            experience_score=sections.experience / 10 * 100,
            education_score=sections.education / 5 * 100,
            format_score=analysis.quality_score,
            explanation=analysis.explanation or None,
            matched_core_skills=list(analysis.skills.core_matches),
            missing_core_skills=list(analysis.skills.missing),
            matched_optional_skills=list(analysis.skills.optional_matches),
            missing_optional_skills=list(analysis.skills.optional_missing),
            weak_verbs=list(analysis.quality.weak_verbs),
            recommendations=analysis.feedback.skill_recommendations + analysis.feedback.improvements,
            format_issues=[issue.message for issue in analysis.quality.issues],
            feedback=analysis.feedback.summary or None,
        )

    @classmethod
    def from_serialized(cls, data: Mapping[str, Any]) -> "AtsResult":
        """Project a stored AnalysisResult mapping.

        Only keys present in ``data`` are carried over; everything else stays
        None. Raises ValidationError when a present field has the wrong type.
        """
        skills = _nested(data, "skills")
        quality = _nested(data, "quality")
        sections = _nested(quality, "sections")
        feedback = _nested(data, "feedback")

        projected: dict[str, Any] = {}
        _copy(projected, "ats_score", data, "score")
        _copy(projected, "skills_score", data, "skill_score")
        _copy(projected, "format_score", data, "quality_score")
        _copy(projected, "explanation", data, "explanation")
        _copy(projected, "matched_core_skills", skills, "core_matches")
        _copy(projected, "missing_core_skills", skills, "missing")
        _copy(projected, "matched_optional_skills", skills, "optional_matches")
        _copy(projected, "missing_optional_skills", skills, "optional_missing")
        _copy(projected, "weak_verbs", quality, "weak_verbs")
        _copy(projected, "feedback", feedback, "summary")
        _copy_scaled(projected, "experience_score", sections, "experience", 10)
        _copy_scaled(projected, "education_score", sections, "education", 5)

        if any(_has(feedback, key) for key in ("skill_recommendations", "improvements")):
            projected["recommendations"] = (
                _list(_get(feedback, "skill_recommendations")) + _list(_get(feedback, "improvements"))
            )
        if _has(quality, "issues"):
            projected["format_issues"] = [
                issue.get("message") if isinstance(issue, Mapping) else issue
                for issue in _list(_get(quality, "issues"))
            ]
        for key in ("explanation", "feedback"):
            if projected.get(key) == "":
                projected[key] = None
        return cls.model_validate(projected)


def _has(mapping: Mapping[str, Any], key: str) -> bool:
    return key in mapping or to_camel(key) in mapping


def _get(mapping: Mapping[str, Any], key: str) -> Any:
    return mapping[key] if key in mapping else mapping.get(to_camel(key))


def _nested(mapping: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = _get(mapping, key)
    return value if isinstance(value, Mapping) else {}


def _list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []


def _copy(projected: dict, field: str, source: Mapping[str, Any], key: str) -> None:
    if _has(source, key):
        projected[field] = _get(source, key)


def _copy_scaled(projected: dict, field: str, source: Mapping[str, Any], key: str, out_of: int) -> None:
    """Copy a raw section score rescaled to 0-100."""
    if not _has(source, key):
        return
    value = _get(source, key)
    is_number = isinstance(value, (int, float)) and not isinstance(value, bool)
    projected[field] = value / out_of * 100 if is_number else value
