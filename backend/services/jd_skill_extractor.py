"""Weighted skill extraction from job descriptions.

Each line or sentence of the JD is classified on its own: a chunk that
mentions a core trigger ("required", "must have", ...) puts every known skill
it names into the core tier, an optional trigger ("nice to have",
"preferred", ...) puts them into the optional tier. Chunks with neither only
mark skills as seen.

Two policies follow the per-chunk pass:
    - untagged JD: if no chunk produced any tiered skill, every seen skill is core
    - core wins: a skill placed in both tiers is removed from optional
"""

import logging
import re
from collections.abc import Mapping

from models.schemas.skills_comparison import WeightedSkills
from services.rules import Rule, compile_rules, has_match
from services.skill_catalog import SKILL_ALIASES, SKILL_RULES, find_skills
from services.skill_normalizer import normalize_skills

logger = logging.getLogger(__name__)

CORE_TRIGGERS: tuple[str, ...] = (
    "must have",
    "required",
    "essential",
    "mandatory",
    "necessary",
    "critical",
    "need to have",
    "must know",
    "expertise in",
    "proficiency in",
    "experience with",
    "strong knowledge",
    "required skills",
    "requirements",
    "qualifications",
)

OPTIONAL_TRIGGERS: tuple[str, ...] = (
    "good to have",
    "nice to have",
    "optional",
    "plus",
    "bonus",
    "preferred",
    "desirable",
    "advantage",
    "beneficial",
    "would be a plus",
    "nice if you have",
    "additional skills",
    "preferred qualifications",
)

CORE_RULES: tuple[Rule, ...] = compile_rules(CORE_TRIGGERS, category="core")
OPTIONAL_RULES: tuple[Rule, ...] = compile_rules(OPTIONAL_TRIGGERS, category="optional")

# Newlines and sentence-ending periods; "Node.js" stays in one piece
_CHUNK_SPLIT_RE = re.compile(r"\n|\.(?=\s|$)")


def split_chunks(text: str) -> list[str]:
    """Split JD text into trimmed, non-empty line/sentence chunks."""
    return [chunk.strip() for chunk in _CHUNK_SPLIT_RE.split(text) if chunk.strip()]


def extract_weighted_skills(
    job_text: object,
    *,
    skill_rules: tuple[Rule, ...] = SKILL_RULES,
    core_rules: tuple[Rule, ...] = CORE_RULES,
    optional_rules: tuple[Rule, ...] = OPTIONAL_RULES,
    aliases: Mapping[str, str] = SKILL_ALIASES,
) -> WeightedSkills:
    """Extract core and optional skills from a job description."""
    if not isinstance(job_text, str) or not job_text.strip():
        return WeightedSkills()

    core: list[str] = []
    optional: list[str] = []
    seen: list[str] = []

    for chunk in split_chunks(job_text):
        is_core = has_match(chunk, core_rules)
        is_optional = has_match(chunk, optional_rules)

        for skill in find_skills(chunk, skill_rules):
            if skill not in seen:
                seen.append(skill)
            if is_core:
                if skill not in core:
                    core.append(skill)
            elif is_optional:
                if skill not in optional:
                    optional.append(skill)

    if not core and not optional and seen:
        core = list(seen)

    core_skills = normalize_skills(core, aliases)
    core_keys = {skill.lower() for skill in core_skills}
    optional_skills = [
        skill for skill in normalize_skills(optional, aliases)
        if skill.lower() not in core_keys
    ]

    logger.debug(
        "JD extraction: %d seen, %d core, %d optional",
        len(seen), len(core_skills), len(optional_skills),
    )
    return WeightedSkills(core_skills=core_skills, optional_skills=optional_skills)
