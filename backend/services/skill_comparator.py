"""Weighted skill comparison: resume skills vs core/optional JD requirements.

Matching is exact on the lower-cased, trimmed name. No alias resolution
happens here; the extractor and resume parser already produce canonical
names.
"""

import logging
from typing import Any

from models.schemas.skills_comparison import ComparisonResult

logger = logging.getLogger(__name__)


def _clean(skills: Any) -> list[str]:
    """Trimmed non-blank strings; anything that is not a list/tuple is empty."""
    if not isinstance(skills, (list, tuple)):
        return []
    return [s.strip() for s in skills if isinstance(s, str) and s.strip()]


def _split(candidates: set[str], required: list[str]) -> tuple[list[str], list[str]]:
    """Partition ``required`` into (matched, missing), de-duplicated, in order."""
    matched: list[str] = []
    missing: list[str] = []
    added: set[str] = set()

    for skill in required:
        key = skill.lower()
        if key in added:
            continue
        added.add(key)
        if key in candidates:
            matched.append(skill)
        else:
            missing.append(skill)
    return matched, missing


def compare_weighted(resume_skills: Any, core_skills: Any, optional_skills: Any) -> ComparisonResult:
    """Compare resume skills against both requirement tiers."""
    candidates = {skill.lower() for skill in _clean(resume_skills)}

    matched_core, missing_core = _split(candidates, _clean(core_skills))
    matched_optional, missing_optional = _split(candidates, _clean(optional_skills))

    logger.debug(
        "Comparison: core %d/%d, optional %d/%d",
        len(matched_core), len(matched_core) + len(missing_core),
        len(matched_optional), len(matched_optional) + len(missing_optional),
    )
    return ComparisonResult(
        matched_core_skills=matched_core,
        missing_core_skills=missing_core,
        matched_optional_skills=matched_optional,
        missing_optional_skills=missing_optional,
    )
