import pytest

from models.schemas.ats_result import AtsResult
from models.schemas.parsed_resume import ParsedResume
from services.resume_analyzer import (
    NOT_RELEVANT_LABEL,
    NOT_RELEVANT_SUMMARY,
    RELEVANCE_CEILING,
    analyze_resume,
    analyze_text,
    blend_scores,
    score_label,
)
from services.resume_parser import parse_resume
from services.scoring import NO_SKILLS_EXPLANATION


def test_strong_match(sample_resume, sample_jd):
    result = analyze_text(sample_resume, sample_jd)
    assert result.success is True
    assert result.skill_score == 85
    assert result.quality_score == 100
    assert result.score == blend_scores(85, 100)
    assert result.score >= 80
    assert result.score_label == "Excellent Match"


def test_skills_breakdown(sample_resume, sample_jd):
    skills = analyze_text(sample_resume, sample_jd).skills
    assert skills.core_required == ["Python", "Django", "PostgreSQL", "Docker"]
    assert skills.optional_required == ["Redis", "Kubernetes"]
    assert skills.core_matches == ["Python", "Django", "PostgreSQL", "Docker"]
    assert skills.optional_matches == ["Redis"]
    assert skills.optional_missing == ["Kubernetes"]
    assert skills.missing == []
    assert skills.matched == ["Python", "Django", "PostgreSQL", "Docker", "Redis"]


def test_irrelevant_resume_is_capped_despite_formatting(sample_resume, sample_jd):
    unrelated = sample_resume.replace("Python, Django, PostgreSQL, Docker, Redis", "Figma, JIRA")
    result = analyze_text(unrelated, sample_jd)
    assert result.skill_score == 0
    assert result.quality_score == 100
    assert result.score == RELEVANCE_CEILING
    assert result.score_label == NOT_RELEVANT_LABEL
    assert result.feedback.summary == NOT_RELEVANT_SUMMARY


def test_nothing_to_analyze():
    result = analyze_resume(None, None)
    assert result.score == 0
    assert result.score_label == NOT_RELEVANT_LABEL
    assert result.explanation == NO_SKILLS_EXPLANATION


@pytest.mark.parametrize("skills, jd", [
    ([], "Required: Python, Java, Rust"),
    (["Python"], "Must have Python, Java, Rust, Scala, Kotlin, Swift, Ruby, Perl, Dart, PHP, MATLAB"),
    (["Python"], "Required: Python, Java\nNice to have: Redis"),
    (["Python", "Java", "Rust"], "Required: Python, Java, Rust"),
    (["Redis"], "Required: Python, Java\nNice to have: Redis"),
])
def test_relevance_gate(skills, jd):
    resume = ParsedResume(
        skills=skills,
        experience=["Engineer"],
        education=["B.S."],
        summary=["Engineer"],
        projects=["Tool"],
    )
    result = analyze_resume(resume, jd)
    if result.skill_score < 10:
        assert result.score <= RELEVANCE_CEILING
        assert result.score_label == NOT_RELEVANT_LABEL
    else:
        assert result.score == blend_scores(result.skill_score, result.quality_score)
        assert result.score_label == score_label(result.score)


@pytest.mark.parametrize("score, label", [
    (100, "Excellent Match"),
    (80, "Excellent Match"),
    (79, "Good Match"),
    (60, "Good Match"),
    (59, "Fair Match"),
    (40, "Fair Match"),
    (39, "Needs Work"),
    (0, "Needs Work"),
])
def test_score_label(score, label):
    assert score_label(score) == label


def test_feedback_carries_quality_notes():
    result = analyze_text("Jane Smith\nSkills\nPython", "Required: Python")
    assert [issue.message for issue in result.feedback.critical_issues] == [
        "Missing email address",
        "Missing phone number",
        "Missing Experience section",
        "Missing Education section",
    ]
    assert "Consider adding a professional summary" in result.feedback.improvements


def test_deterministic(sample_resume, sample_jd):
    assert analyze_text(sample_resume, sample_jd) == analyze_text(sample_resume, sample_jd)


def test_accepts_a_plain_mapping(sample_jd):
    result = analyze_resume({"skills": ["Python", "Django"]}, sample_jd)
    assert result.skills.core_matches == ["Python", "Django"]


def test_accepts_a_camel_case_resume():
    resume = {
        "personalInfo": {
            "name": "Jane Smith",
            "email": "jane@example.com",
            "phone": "555-123-4567",
            "linkedin": "linkedin.com/in/janesmith",
        },
        "summary": ["Backend developer"],
        "experience": ["Software Engineer at Acme"],
        "education": ["B.S. Computer Science"],
        "projects": ["Task queue"],
        "skills": ["Python"],
        "rawText": "worked on APIs, worked on queues, worked on tests, worked on docs, worked late",
    }
    result = analyze_resume(resume, "Required: Python")
    assert result.quality_score == 100
    assert result.quality.issues == []
    assert result.quality.weak_verb_count == 5
    assert result.quality.weak_verbs == ["worked"]


def test_ats_result_projection(sample_resume, sample_jd):
    analysis = analyze_text(sample_resume, sample_jd)
    ats = AtsResult.from_analysis(analysis)
    assert ats.ats_score == analysis.score
    assert ats.skills_score == 85
    assert ats.experience_score == 100
    assert ats.education_score == 100
    assert ats.format_score == 100
    assert ats.matched_core_skills == ["Python", "Django", "PostgreSQL", "Docker"]
    assert ats.missing_optional_skills == ["Kubernetes"]
    assert ats.recommendations == (
        analysis.feedback.skill_recommendations + analysis.feedback.improvements
    )
    assert ats.format_issues == []


def test_ats_result_accepts_camel_case():
    ats = AtsResult.model_validate({"atsScore": 72, "missingCoreSkills": ["Go"]})
    assert ats.ats_score == 72
    assert ats.missing_core_skills == ["Go"]
    assert AtsResult.model_validate({"ats_score": 72}).ats_score == 72


def test_parse_then_analyze_matches_analyze_text(sample_resume, sample_jd):
    assert analyze_resume(parse_resume(sample_resume), sample_jd) == analyze_text(sample_resume, sample_jd)
