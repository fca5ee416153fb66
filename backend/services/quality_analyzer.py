"""Resume structural quality, scored independently of skill matching.

Point budget (40 raw points, rescaled to 0-100):
    contact     15  (email 5, phone 5, LinkedIn 5)
    summary      5
    experience  10
    education    5
    projects     5
"""

import logging
from typing import Any

from models.schemas.quality_result import QualityIssue, QualityResult, QualitySections
from services.resume_parser import coerce_resume
from services.rules import Rule, compile_rules, count_matches, word_rule
from services.scoring import round_half_up

logger = logging.getLogger(__name__)

MAX_RAW_POINTS = 40
WEAK_VERB_THRESHOLD = 3

WEAK_VERBS: tuple[str, ...] = (
    "worked", "helped", "assisted", "responsible for", "handled",
    "made", "did", "got", "used", "tried",
)

WEAK_VERB_RULES: tuple[Rule, ...] = compile_rules(WEAK_VERBS, factory=word_rule)


def analyze_quality(parsed_resume: Any, *, weak_verb_rules: tuple[Rule, ...] = WEAK_VERB_RULES) -> QualityResult:
    resume = coerce_resume(parsed_resume)
    info = resume.personal_info
    sections = QualitySections()
    issues: list[QualityIssue] = []
    improvements: list[str] = []

    # Contact block
    if info.email:
        sections.contact += 5
    else:
        issues.append(QualityIssue(type="critical", message="Missing email address"))

    if info.phone:
        sections.contact += 5
    else:
        issues.append(QualityIssue(type="warning", message="Missing phone number"))

    if info.linkedin:
        sections.contact += 5
    else:
        improvements.append("Adding a LinkedIn profile link is recommended")

    # Section presence
    if resume.summary:
        sections.summary = 5
    else:
        improvements.append("Consider adding a professional summary")

    if resume.experience:
        sections.experience = 10
    else:
        issues.append(QualityIssue(type="critical", message="Missing Experience section"))

    if resume.education:
        sections.education = 5
    else:
        issues.append(QualityIssue(type="warning", message="Missing Education section"))

    if resume.projects:
        sections.projects = 5

    # Weak verb density over the raw text
    verb_counts = count_matches(resume.raw_text, weak_verb_rules)
    weak_verbs = list(verb_counts)
    weak_verb_count = sum(verb_counts.values())
    if weak_verb_count > WEAK_VERB_THRESHOLD:
        improvements.append(
            f'Found {weak_verb_count} weak action verbs (e.g., "{weak_verbs[0]}"). '
            'Replace with strong alternatives like "Engineered", "Optimized", "Spearheaded".'
        )

    raw_points = (
        sections.contact + sections.summary + sections.experience
        + sections.education + sections.projects
    )
    score = min(100, round_half_up(raw_points / MAX_RAW_POINTS * 100))

    logger.debug("Quality score %d (%d raw points, %d weak verbs)", score, raw_points, weak_verb_count)
    return QualityResult(
        score=score,
        sections=sections,
        issues=issues,
        improvements=improvements,
        weak_verbs=weak_verbs,
        weak_verb_count=weak_verb_count,
    )
