"""Tests for alias resolution and de-duplication."""

import pytest

from services.skill_normalizer import canonical_skill, normalize_skills


def test_aliases_collapse_to_one_canonical_name():
    assert normalize_skills(["js", "JavaScript", "  javascript "]) == ["JavaScript"]


def test_common_aliases():
    assert normalize_skills(["k8s", "postgres", "nodejs", "py"]) == [
        "Kubernetes", "PostgreSQL", "Node.js", "Python",
    ]


def test_unmapped_tokens_pass_through_trimmed():
    assert normalize_skills(["  Elixir ", "Phoenix"]) == ["Elixir", "Phoenix"]


def test_first_seen_order_is_kept():
    assert normalize_skills(["React", "Python", "react", "PYTHON"]) == ["React", "Python"]


def test_unmapped_duplicates_are_case_insensitive():
    assert normalize_skills(["Elixir", "elixir", "ELIXIR"]) == ["Elixir"]


def test_junk_entries_are_dropped():
    assert normalize_skills(["", "   ", None, 42, "Docker"]) == ["Docker"]


@pytest.mark.parametrize("value", [None, "python", 42, {"js": 1}])
def test_non_sequence_input_is_empty(value):
    assert normalize_skills(value) == []


@pytest.mark.parametrize("tokens", [
    ["js", "ts", "k8s", "Elixir"],
    ["React", "reactjs", "react.js", "Vue", "vuejs"],
    ["  mongo ", "MongoDB", "", None],
    [],
])
def test_idempotent(tokens):
    once = normalize_skills(tokens)
    assert normalize_skills(once) == once


def test_substituted_alias_table():
    aliases = {"pg": "PostgreSQL"}
    assert normalize_skills(["pg", "js"], aliases) == ["PostgreSQL", "js"]


def test_canonical_skill():
    assert canonical_skill(" K8S ") == "Kubernetes"
    assert canonical_skill("Haskell") == "Haskell"
