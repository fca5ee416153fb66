"""Shared fixtures for the test suite."""

import pytest

from models.schemas.ats_result import AtsResult

SAMPLE_RESUME = """Jane Smith
jane.smith@example.com | (555) 123-4567
linkedin.com/in/janesmith | github.com/janesmith

Summary
Backend developer with 6 years of experience building APIs.

Experience
Software Engineer | Acme Corp | 2019 - 2024
• Built Django services backed by PostgreSQL
• Led migration of deployments to Docker

Education
B.S. Computer Science | State University | 2018

Projects
Open-source task queue built with Redis

Skills
Python, Django, PostgreSQL, Docker, Redis
"""

SAMPLE_JD = """Senior Backend Engineer
Required skills: Python, Django and PostgreSQL.
Must have experience with Docker.
Nice to have: Kubernetes, Redis.
We use Git daily."""


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD


@pytest.fixture
def ats_result() -> AtsResult:
    """A moderate analysis with gaps in both tiers."""
    return AtsResult(
        ats_score=55,
        skills_score=50,
        experience_score=100,
        education_score=0,
        format_score=75,
        explanation="Moderate match.",
        matched_core_skills=["Python", "Django"],
        missing_core_skills=["Docker", "AWS", "Kubernetes", "Redis"],
        matched_optional_skills=["Git"],
        missing_optional_skills=["GraphQL", "Terraform", "Jenkins"],
        weak_verbs=["worked", "helped"],
        recommendations=[
            "Use stronger action verbs in your experience bullets",
            "Fix section headers and format consistency",
        ],
        format_issues=["Missing phone number"],
        feedback="Moderate match.",
    )
