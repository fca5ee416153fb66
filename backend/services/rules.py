"""Declarative rule tables and a generic matcher.

A rule table is a tuple of ``Rule(pattern, category)`` pairs. The same
matcher runs JD trigger phrases, skill vocabularies, weak-verb lists and
assistant intent patterns.
"""

import re
from typing import Iterable, NamedTuple


class Rule(NamedTuple):
    pattern: re.Pattern
    category: str


def phrase_rule(phrase: str, category: str = "") -> Rule:
    """Case-insensitive substring rule (no word boundaries)."""
    return Rule(re.compile(re.escape(phrase), re.IGNORECASE), category or phrase)


def word_rule(term: str, category: str = "") -> Rule:
    """Case-insensitive whole-word rule.

    Boundaries are lookarounds rather than ``\\b`` so that terms ending in
    symbols ("C++", "CI/CD") still match, while "java" never matches inside
    "javascript" and "gin" never matches inside "engineer".
    """
    escaped = re.escape(term)
    pattern = re.compile(rf"(?<![a-zA-Z0-9.#]){escaped}(?![a-zA-Z0-9])", re.IGNORECASE)
    return Rule(pattern, category or term)


def regex_rule(pattern: str, category: str = "") -> Rule:
    return Rule(re.compile(pattern, re.IGNORECASE), category or pattern)


def compile_rules(terms: Iterable[str], factory=phrase_rule, category: str = "") -> tuple[Rule, ...]:
    """Build a rule table from plain terms.

    With an explicit ``category`` every rule shares it, otherwise each rule is
    categorised by its own term.
    """
    return tuple(factory(term, category) for term in terms)


def matching_rules(text: str, rules: Iterable[Rule]) -> list[Rule]:
    """Rules whose pattern occurs in ``text``, in table order."""
    if not text:
        return []
    return [rule for rule in rules if rule.pattern.search(text)]


def has_match(text: str, rules: Iterable[Rule]) -> bool:
    if not text:
        return False
    return any(rule.pattern.search(text) for rule in rules)


def count_matches(text: str, rules: Iterable[Rule]) -> dict[str, int]:
    """Occurrence count per category, only for categories that occur."""
    counts: dict[str, int] = {}
    if not text:
        return counts
    for rule in rules:
        n = len(rule.pattern.findall(text))
        if n:
            counts[rule.category] = counts.get(rule.category, 0) + n
    return counts
