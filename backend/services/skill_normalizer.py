"""Skill normalization: alias resolution and case-insensitive de-duplication."""

from collections.abc import Mapping
from typing import Any

from services.skill_catalog import SKILL_ALIASES


def canonical_skill(skill: str, aliases: Mapping[str, str] = SKILL_ALIASES) -> str:
    """Resolve a single token to its canonical name.

    Unmapped tokens pass through trimmed with their original casing.
    """
    trimmed = skill.strip()
    return aliases.get(trimmed.lower(), trimmed)


def normalize_skills(tokens: Any, aliases: Mapping[str, str] = SKILL_ALIASES) -> list[str]:
    """Canonicalize a sequence of skill tokens.

    Non-string and blank entries are dropped, first-seen order is kept and
    duplicates are removed case-insensitively after alias resolution. Anything
    that is not a list or tuple yields an empty list.
    """
    if not isinstance(tokens, (list, tuple)):
        return []

    seen: set[str] = set()
    normalized: list[str] = []
    for token in tokens:
        if not isinstance(token, str) or not token.strip():
            continue
        skill = canonical_skill(token, aliases)
        key = skill.lower()
        if key not in seen:
            seen.add(key)
            normalized.append(skill)
    return normalized
