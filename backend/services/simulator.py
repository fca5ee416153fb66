"""What-if simulation: the score gain from adding each missing skill alone.

Every missing skill is evaluated independently against the current counts.
Gains are marginal, one skill at a time; adding two skills is not modelled.
"""

import logging
from collections.abc import Mapping
from typing import Any

from models.requests import SimulationInput
from models.responses import ImprovementItem, SimulationResult
from services.scoring import round_half_up, weighted_percentage

logger = logging.getLogger(__name__)

_FIELDS = (
    "core_skills",
    "optional_skills",
    "matched_core_skills",
    "missing_core_skills",
    "matched_optional_skills",
    "missing_optional_skills",
)


def _coerce(value: Any) -> SimulationInput:
    if isinstance(value, SimulationInput):
        return value
    if not isinstance(value, Mapping):
        return SimulationInput()
    fields = {}
    for name in _FIELDS:
        items = value.get(name)
        if isinstance(items, (list, tuple)):
            fields[name] = [item for item in items if isinstance(item, str)]
    return SimulationInput(**fields)


def simulate_improvements(skill_sets: Any) -> SimulationResult:
    """Rank missing skills by the score each would add on its own.

    Ties go to core skills; within a tier the input order is kept.
    """
    data = _coerce(skill_sets)

    matched_core = len(data.matched_core_skills)
    matched_optional = len(data.matched_optional_skills)
    total_core = max(len(data.core_skills), matched_core + len(data.missing_core_skills))
    total_optional = max(len(data.optional_skills), matched_optional + len(data.missing_optional_skills))

    current = round_half_up(
        weighted_percentage(matched_core, total_core, matched_optional, total_optional), 2
    )

    candidates: list[tuple[float, int, str, float]] = []
    for skill in data.missing_core_skills:
        new_score = round_half_up(
            weighted_percentage(matched_core + 1, total_core, matched_optional, total_optional), 2
        )
        candidates.append((round_half_up(new_score - current, 2), 0, skill, new_score))
    for skill in data.missing_optional_skills:
        new_score = round_half_up(
            weighted_percentage(matched_core, total_core, matched_optional + 1, total_optional), 2
        )
        candidates.append((round_half_up(new_score - current, 2), 1, skill, new_score))

    # sorted() is stable, so equal (gain, tier) pairs keep input order
    candidates.sort(key=lambda c: (-c[0], c[1]))

    logger.debug("Simulated %d improvements from current score %.2f", len(candidates), current)
    return SimulationResult(
        current_score=current,
        improvements=[ImprovementItem(skill=skill, new_score=new_score) for _, _, skill, new_score in candidates],
    )
