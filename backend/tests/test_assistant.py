import pytest

from models.schemas.assistant_intent import Intent
from services.assistant.assistant import (
    EMPTY_QUERY_MESSAGE,
    MISSING_DATA_MESSAGE,
    NO_DATA_MESSAGE,
    REFUSAL_SUGGESTIONS,
    coerce_ats_result,
    get_suggested_actions,
    process_query,
    requires_ats_data,
)
from services.assistant.decision_engine import GENERAL_MESSAGE
from services.assistant.generator import domain_refusal_message
from services.resume_analyzer import analyze_text


def test_score_explanation(ats_result):
    response = process_query("Why is my score low?", ats_result)
    assert response.success is True
    assert response.type == "RESPONSE"
    assert response.intent == Intent.SCORE_EXPLANATION
    assert response.needs_llm is False
    assert response.context.type == "SCORE_EXPLANATION"
    assert response.context.overall_score == 55

    message = response.message
    assert message.startswith("## Room for Improvement")
    assert "Your ATS score is **55%**" in message
    assert "- Skills: 50%" in message
    assert "- Experience: 100%" in message
    # a 0% section is falsy and left out of the breakdown
    assert "- Education" not in message
    assert "**Main Issue:** education section needs work (0%)" in message
    assert "• Improve your education section" in message


def test_skills_gap(ats_result):
    message = process_query("What skills am I missing?", ats_result).message
    assert "You're missing **4** core skills" in message
    assert "• **Docker** - This is a core requirement" in message
    assert "• **Redis**" not in message
    assert "**Nice to Have:**" in message
    assert "• GraphQL" in message
    assert "~**26%**" in message


def test_jd_match(ats_result):
    message = process_query("How well do I match this job?", ats_result).message
    assert message.startswith("## Limited Match")
    assert "**Match Rate:** 33% (2/6 skills)" in message
    assert "• ✗ Docker" in message


def test_experience_improve(ats_result):
    message = process_query("How can I improve my experience section?", ats_result).message
    assert '• "worked" → Replace with stronger verbs' in message
    assert "• Led" in message
    assert "**Key Improvements:**" in message


def test_keyword_suggestion(ats_result):
    message = process_query("What keywords should I add?", ats_result).message
    assert "• **Docker**" in message
    assert "• Jenkins" in message
    assert "**Already Included:** 2 keywords" in message
    assert "**Impact:** SIGNIFICANT improvement expected" in message


def test_formatting_feedback(ats_result):
    query = "Are there formatting issues with the layout and structure of my resume?"
    message = process_query(query, ats_result).message
    assert "**Format Score:** 75%" in message
    assert "• Missing phone number" in message
    assert "• Fix section headers and format consistency" in message
    assert "• Keep resume to 1-2 pages" in message


def test_rewrite_needs_llm(ats_result):
    response = process_query("Can you rewrite this bullet?", ats_result)
    assert response.success is True
    assert response.needs_llm is True
    assert "**Weak verbs I noticed:** worked, helped" in response.message
    assert response.context.overall_score is None


def test_rewrite_works_without_data():
    response = process_query("Can you rewrite this bullet?")
    assert response.type == "RESPONSE"
    assert "Weak verbs" not in response.message


def test_section_analysis_falls_back_to_general(ats_result):
    response = process_query("Analyze my education section", ats_result)
    assert response.intent == Intent.SECTION_ANALYSIS
    assert response.context.type == "GENERAL"
    assert "**55%**, with 2 core skills matched and 4 missing" in response.message
    assert response.message.endswith(GENERAL_MESSAGE)


@pytest.mark.parametrize("query", [
    "Why is my score low?",
    "What skills am I missing?",
    "How well do I match this job?",
    "How can I improve my experience section?",
    "What keywords should I add?",
    "Are there formatting issues with the layout and structure of my resume?",
    "Can you rewrite this bullet?",
    "Analyze my education section",
])
def test_responses_are_fully_rendered(query, ats_result):
    message = process_query(query, ats_result).message
    assert "{{" not in message
    assert "\n\n\n" not in message
    assert message == message.strip()


def test_missing_data():
    response = process_query("Why is my score low?")
    assert response.success is False
    assert response.type == "MISSING_DATA"
    assert response.intent == Intent.SCORE_EXPLANATION
    assert response.message == MISSING_DATA_MESSAGE


@pytest.mark.parametrize("ats", [{"ats_score": "not a number"}, 42, "result"])
def test_unusable_data(ats):
    response = process_query("Why is my score low?", ats)
    assert response.success is False
    assert response.type == "ERROR"
    assert response.message == NO_DATA_MESSAGE


def test_accepts_analysis_results(sample_resume, sample_jd):
    analysis = analyze_text(sample_resume, sample_jd)
    from_model = process_query("Why is my score low?", analysis)
    from_dict = process_query("Why is my score low?", analysis.model_dump())
    assert from_model.success is True
    assert from_model.message == from_dict.message
    assert f"**{analysis.score}%**" in from_model.message


def test_partial_stored_analysis_keeps_absent_scores_absent():
    stored = {"score": 72, "skills": {"missing": ["Docker"]}}
    ats = coerce_ats_result(stored)
    assert ats.ats_score == 72
    assert ats.missing_core_skills == ["Docker"]
    assert ats.skills_score is None
    assert ats.experience_score is None
    assert ats.education_score is None
    assert ats.format_score is None
    assert ats.recommendations is None

    response = process_query("Why is my score low?", stored)
    assert response.success is True
    assert "**72%**" in response.message
    assert "Area to Improve" not in response.message
    assert "(0%)" not in response.message


def test_stored_analysis_sections_are_rescaled():
    ats = coerce_ats_result({"skills": {}, "quality": {"sections": {"experience": 5, "education": 5}}})
    assert ats.experience_score == 50
    assert ats.education_score == 100
    assert ats.ats_score is None


def test_malformed_stored_analysis_is_unusable():
    response = process_query("Why is my score low?", {"score": "high", "skills": {}})
    assert response.type == "ERROR"
    assert response.message == NO_DATA_MESSAGE


def test_zero_score_is_reported_as_zero(ats_result):
    response = process_query("Why is my score low?", ats_result.model_copy(update={"ats_score": 0}))
    assert response.context.overall_score == 0


def test_accepts_camel_case_mappings():
    response = process_query("What skills am I missing?", {
        "atsScore": 40,
        "matchedCoreSkills": ["Python"],
        "missingCoreSkills": ["Go"],
    })
    assert response.success is True
    assert "• **Go**" in response.message


def test_domain_refusal():
    response = process_query("What is the weather today?")
    assert response.success is False
    assert response.type == "DOMAIN_REFUSAL"
    assert response.intent == Intent.OUT_OF_SCOPE
    assert response.message == domain_refusal_message()
    assert response.suggestions == list(REFUSAL_SUGGESTIONS)


def test_clarification():
    response = process_query("score")
    assert response.success is False
    assert response.type == "CLARIFICATION"
    assert response.possible_intents == [Intent.SCORE_EXPLANATION]
    assert response.message


@pytest.mark.parametrize("query, message", [
    ("", EMPTY_QUERY_MESSAGE),
    ("   ", EMPTY_QUERY_MESSAGE),
    (None, "Please enter a valid question."),
    (12, "Please enter a valid question."),
])
def test_invalid_input(query, message):
    response = process_query(query)
    assert response.success is False
    assert response.type == "INVALID_INPUT"
    assert response.message == message


def test_requires_ats_data():
    assert requires_ats_data(Intent.SKILLS_GAP) is True
    assert requires_ats_data(Intent.RESUME_REWRITE) is False
    assert requires_ats_data(Intent.SECTION_ANALYSIS) is False


def test_suggested_actions(ats_result):
    labels = [action.label for action in get_suggested_actions(ats_result)]
    assert labels == ["Explain my score", "Show missing skills", "Suggest keywords", "How to improve"]


def test_suggested_actions_for_strong_result():
    actions = get_suggested_actions({"ats_score": 90, "missing_core_skills": []})
    assert [action.label for action in actions] == ["Explain my score", "Suggest keywords"]


@pytest.mark.parametrize("ats", [None, 42, {"ats_score": "bad"}])
def test_suggested_actions_without_data(ats):
    actions = get_suggested_actions(ats)
    assert len(actions) == 1
    assert actions[0].query is None


def test_deterministic(ats_result):
    first = process_query("What skills am I missing?", ats_result)
    second = process_query("What skills am I missing?", ats_result)
    assert first == second
