"""JD skill tiers and the weighted comparison against resume skills."""

from pydantic import BaseModel


class WeightedSkills(BaseModel):
    """Skills extracted from a job description, split by tier.

    A skill never appears in both tiers; core wins.
    """
    core_skills: list[str] = []
    optional_skills: list[str] = []


class ComparisonResult(BaseModel):
    """Matched and missing skills per tier.

    matched + missing of a tier is exactly that tier's de-duplicated
    requirement list, in requirement order.
    """
    matched_core_skills: list[str] = []
    missing_core_skills: list[str] = []
    matched_optional_skills: list[str] = []
    missing_optional_skills: list[str] = []

    @property
    def total_core(self) -> int:
        return len(self.matched_core_skills) + len(self.missing_core_skills)

    @property
    def total_optional(self) -> int:
        return len(self.matched_optional_skills) + len(self.missing_optional_skills)
