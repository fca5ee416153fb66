"""Tests for weighted (core / optional) JD skill extraction."""

from services.jd_skill_extractor import extract_weighted_skills, split_chunks
from services.rules import compile_rules, word_rule
from services.skill_catalog import find_skills


def test_tiers_follow_chunk_triggers(sample_jd):
    result = extract_weighted_skills(sample_jd)
    assert result.core_skills == ["Python", "Django", "PostgreSQL", "Docker"]
    assert result.optional_skills == ["Redis", "Kubernetes"]


def test_untriggered_chunks_do_not_assign_a_tier(sample_jd):
    result = extract_weighted_skills(sample_jd)
    # "We use Git daily" has no trigger phrase
    assert "Git" not in result.core_skills
    assert "Git" not in result.optional_skills


def test_untagged_jd_makes_every_skill_core():
    result = extract_weighted_skills("We work with Python, React and Docker every day")
    assert result.core_skills == ["Python", "React", "Docker"]
    assert result.optional_skills == []


def test_core_wins_over_optional():
    jd = "Required: Python and Redis\nPython experience is a plus"
    result = extract_weighted_skills(jd)
    assert "Python" in result.core_skills
    assert "Python" not in result.optional_skills


def test_core_wins_after_alias_resolution():
    jd = "Must have Vue.js\nVue experience preferred, Redis too"
    result = extract_weighted_skills(jd)
    assert result.core_skills == ["Vue.js"]
    assert result.optional_skills == ["Redis"]


def test_chunk_with_both_triggers_is_core():
    result = extract_weighted_skills("Python required, Redis preferred")
    assert result.core_skills == ["Python", "Redis"]
    assert result.optional_skills == []


def test_output_is_canonical():
    result = extract_weighted_skills("Must have Vue and Node.js")
    assert result.core_skills == ["Vue.js", "Node.js"]


def test_dotted_names_survive_chunking():
    assert split_chunks("Node.js required. ASP.NET is a plus.") == [
        "Node.js required",
        "ASP.NET is a plus",
    ]
    result = extract_weighted_skills("Node.js required. ASP.NET is a plus.")
    assert result.core_skills == ["Node.js"]
    assert result.optional_skills == ["ASP.NET"]


def test_skill_detection_is_whole_word():
    assert find_skills("JavaScript and TypeScript") == ["JavaScript", "TypeScript"]
    assert "Scala" not in find_skills("Built scalable systems")


def test_short_terms_are_not_detected():
    # "Go" is too ambiguous in free text
    assert find_skills("Go to the office") == []


def test_no_skills_yields_empty_tiers():
    result = extract_weighted_skills("We are hiring a friendly person. Must be punctual.")
    assert result.core_skills == []
    assert result.optional_skills == []


def test_invalid_input():
    for value in (None, "", "   ", 42, ["Python"]):
        result = extract_weighted_skills(value)
        assert result.core_skills == []
        assert result.optional_skills == []


def test_substituted_skill_table():
    rules = compile_rules(["Foo", "Bar"], factory=word_rule)
    result = extract_weighted_skills("Must have Foo\nBar is nice to have", skill_rules=rules)
    assert result.core_skills == ["Foo"]
    assert result.optional_skills == ["Bar"]


def test_deterministic(sample_jd):
    assert extract_weighted_skills(sample_jd) == extract_weighted_skills(sample_jd)
