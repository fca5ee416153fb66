"""Human-readable feedback for a weighted skill comparison.

The summary is picked by score band; recommendations are emitted in priority
order (missing core skills first, generic tailoring advice last).
"""

from typing import Any

from models.schemas.score_result import SkillFeedback
from services.scoring import coerce_comparison, round_half_up

TAILOR_TIP = (
    "Review the job description carefully and tailor your resume to emphasize "
    "relevant experience and accomplishments."
)


def _summary(ats_score: int, matched_core: list[str], missing_core: list[str]) -> str:
    total_core = len(matched_core) + len(missing_core)
    core_rate = round_half_up(len(matched_core) / total_core * 100) if total_core > 0 else 0

    if ats_score >= 80:
        return (
            f"Excellent match! Your resume scores {ats_score}% and includes "
            f"{len(matched_core)} of {total_core} essential skills. "
            "You're in a strong position for this role."
        )
    if ats_score >= 60:
        return (
            f"Good match with room for improvement. Your resume scores {ats_score}% and "
            f"covers {core_rate}% of the core requirements. Adding a few key skills "
            "could significantly strengthen your application."
        )
    if ats_score >= 40:
        return (
            f"Moderate match. Your resume scores {ats_score}% and is missing some "
            "important qualifications. Consider highlighting relevant experience or "
            "developing key skills before applying."
        )
    return (
        f"Limited match. Your resume scores {ats_score}% and lacks several essential "
        "requirements for this position. Significant skill development may be needed "
        "to qualify for this role."
    )


def _recommendations(
    ats_score: int,
    matched_core: list[str],
    missing_core: list[str],
    missing_optional: list[str],
) -> list[str]:
    recommendations: list[str] = []

    if len(missing_core) == 1:
        recommendations.append(
            f'Add "{missing_core[0]}" to your resume - this is a critical requirement for the role.'
        )
    elif 1 < len(missing_core) <= 3:
        recommendations.append(
            f"Include these essential skills in your resume: {', '.join(missing_core)}. "
            "These are core requirements that hiring managers look for."
        )
    elif len(missing_core) > 3:
        recommendations.append(
            f"Focus on adding these critical skills first: {', '.join(missing_core[:3])}. "
            f"You're also missing {len(missing_core) - 3} other core requirements."
        )

    if ats_score < 40 and len(missing_core) > 3:
        recommendations.append(
            "Consider gaining experience in the core areas where you're lacking "
            "qualifications before applying. This will significantly improve your chances."
        )

    if matched_core and ats_score < 70:
        recommendations.append(
            f"Make sure your existing skills ({', '.join(matched_core[:3])}) are prominently "
            "featured in your resume summary and work experience."
        )

    if missing_optional and len(missing_core) < 3:
        if len(missing_optional) <= 2:
            recommendations.append(
                f"To stand out from other candidates, consider adding: {', '.join(missing_optional)}."
            )
        else:
            recommendations.append(
                "To strengthen your application further, consider highlighting these "
                f"additional skills if you have them: {', '.join(missing_optional[:2])}."
            )

    if 60 <= ats_score < 80:
        recommendations.append(
            "Use industry-standard terms and keywords naturally throughout your resume "
            "to improve visibility in applicant tracking systems."
        )

    if ats_score >= 80:
        recommendations.append(
            "Your resume is well-aligned with the job requirements. Ensure your experience "
            "section provides specific examples of how you've applied these skills."
        )

    if not recommendations:
        recommendations.append(TAILOR_TIP)

    return recommendations


def generate_feedback(ats_score: Any, comparison: Any) -> SkillFeedback:
    """Summary and recommendations for a score and its comparison."""
    score = ats_score if isinstance(ats_score, int) and not isinstance(ats_score, bool) else 0
    result = coerce_comparison(comparison)
    if result is None:
        return SkillFeedback(summary=_summary(score, [], []), recommendations=[TAILOR_TIP])

    return SkillFeedback(
        summary=_summary(score, result.matched_core_skills, result.missing_core_skills),
        recommendations=_recommendations(
            score,
            result.matched_core_skills,
            result.missing_core_skills,
            result.missing_optional_skills,
        ),
    )
