"\"\"\"Job type preference evaluation.\"\"\""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import JobPosting, UserProfile


@dataclass
class JobTypeConfig:
    match_score: float = 1.0
    neutral_score: float = 0.8
    mismatch_score: float = 0.5


def calculate_job_type_match(
    user: UserProfile | dict[str, Any],
    job: JobPosting | dict[str, Any],
    *,
    config: JobTypeConfig | None = None,
) -> float:
    """Exact membership of the posting type in the user's preferred types."""
    config = config or JobTypeConfig()
    profile = UserProfile.model_validate(user)
    posting = JobPosting.model_validate(job)

    preferred = profile.preferences.job_types
    if not preferred:
        return config.neutral_score
    return config.match_score if posting.type in preferred else config.mismatch_score


class JobTypeEvaluator:
    method = "job_type"

    def __init__(self, *, config: JobTypeConfig | None = None) -> None:
        self._config = config or JobTypeConfig()

    def evaluate(self, candidate: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        profile = UserProfile.model_validate(candidate)
        job = JobPosting.model_validate(context["job"])
        score = calculate_job_type_match(profile, job, config=self._config)
        return {
            "method": self.method,
            "scores": {"job_type": score},
            "metadata": {
                "job_type": job.type,
                "preferred_types": profile.preferences.job_types,
            },
        }
