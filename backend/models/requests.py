from typing import Any

from pydantic import AliasChoices, BaseModel, Field

# Clients send the analysis back under any of these names
_ATS_RESULT_ALIASES = AliasChoices("ats_result", "analysis_result", "analysisResult")


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    job_description: str = Field(..., max_length=10000, description="Job description text")


class ExtractSkillsRequest(BaseModel):
    job_description: str = Field(..., max_length=10000, description="Job description text")


class SimulationInput(BaseModel):
    core_skills: list[str] = []
    optional_skills: list[str] = []
    matched_core_skills: list[str] = []
    missing_core_skills: list[str] = []
    matched_optional_skills: list[str] = []
    missing_optional_skills: list[str] = []


class AssistantQueryRequest(BaseModel):
    query: str = Field(..., description="Question about the resume or ATS score")
    ats_result: dict[str, Any] | None = Field(
        None, validation_alias=_ATS_RESULT_ALIASES, description="Analysis to reason over"
    )


class SuggestionsRequest(BaseModel):
    ats_result: dict[str, Any] | None = Field(None, validation_alias=_ATS_RESULT_ALIASES)
