"\"\"\"Required-skill coverage evaluation.\"\"\""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from ...schemas import JobPosting, RequiredSkill, SkillRecord, UserProfile


@dataclass
class SkillsMatchConfig:
    """Weights applied to mandatory and optional requirements."""

    mandatory_weight: float = 2.0
    optional_weight: float = 1.0


def calculate_skills_match(
    user_skills: Iterable[SkillRecord | dict[str, Any]],
    required_skills: Iterable[RequiredSkill | dict[str, Any]],
    *,
    config: SkillsMatchConfig | None = None,
) -> float:
    """Return the weighted share of required skills the user holds.

    Names are compared case-insensitively and must be equal; mandatory
    requirements weigh twice as much as optional ones by default. Returns 0.0
    when either side is empty.
    """
    config = config or SkillsMatchConfig()
    user_skill_names = {
        SkillRecord.model_validate(skill).name.lower() for skill in user_skills or []
    }
    requirements = [RequiredSkill.model_validate(skill) for skill in required_skills or []]
    if not user_skill_names or not requirements:
        return 0.0

    matched_weight = 0.0
    total_weight = 0.0
    for requirement in requirements:
        weight = config.mandatory_weight if requirement.mandatory else config.optional_weight
        total_weight += weight
        if requirement.name.lower() in user_skill_names:
            matched_weight += weight

    return matched_weight / total_weight if total_weight > 0 else 0.0


class SkillsEvaluator:
    """Score how well a user's skills cover a posting's requirements."""

    method = "skills"

    def __init__(self, *, config: SkillsMatchConfig | None = None) -> None:
        self._config = config or SkillsMatchConfig()

    def evaluate(self, candidate: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        profile = UserProfile.model_validate(candidate)
        job = JobPosting.model_validate(context["job"])

        user_names = {skill.name.lower() for skill in profile.skills}
        matched = [req.name for req in job.required_skills if req.name.lower() in user_names]
        missing_mandatory = [
            req.name
            for req in job.required_skills
            if req.mandatory and req.name.lower() not in user_names
        ]

        score = calculate_skills_match(profile.skills, job.required_skills, config=self._config)
        return {
            "method": self.method,
            "scores": {"skills": score},
            "metadata": {
                "required_count": len(job.required_skills),
                "matched": matched,
                "missing_mandatory": missing_mandatory,
            },
        }
