"""Structured resume consumed by the quality analyzer and orchestrator."""

from pydantic import BaseModel


class PersonalInfo(BaseModel):
    name: str = ""
    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None
    github: str | None = None


class ParsedResume(BaseModel):
    """Output of the resume parser.

    Section fields hold the section's lines; an empty list means the section
    was not found.
    """
    personal_info: PersonalInfo = PersonalInfo()
    summary: list[str] = []
    experience: list[str] = []
    education: list[str] = []
    projects: list[str] = []
    skills: list[str] = []
    raw_text: str = ""
