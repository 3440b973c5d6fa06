"\"\"\"Location preference evaluation.\"\"\""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from ...schemas import JobPosting, UserProfile


class MissingJobLocationError(ValueError):
    """Raised when an on-site posting carries no location to compare against."""


@dataclass
class LocationConfig:
    """Scores for remote, unknown and mismatched locations."""

    remote_score: float = 1.0
    match_score: float = 1.0
    neutral_score: float = 0.5
    mismatch_score: float = 0.3


def matching_locations(preferred: Sequence[str], job_location: str) -> list[str]:
    """Return preferences that contain, or are contained in, ``job_location``."""
    target = job_location.lower()
    return [
        location
        for location in preferred
        if location.lower() in target or target in location.lower()
    ]


def calculate_location_match(
    user: UserProfile | dict[str, Any],
    job: JobPosting | dict[str, Any],
    *,
    config: LocationConfig | None = None,
) -> float:
    """Score the posting's location against the user's preferred locations.

    Remote postings always score 1.0. Users without preferences get a neutral
    0.5. Otherwise any symmetric, case-insensitive substring match scores 1.0
    and no match scores 0.3.

    Raises:
        MissingJobLocationError: the posting is on-site but has no location.
    """
    config = config or LocationConfig()
    profile = UserProfile.model_validate(user)
    posting = JobPosting.model_validate(job)

    if posting.remote:
        return config.remote_score

    preferred = profile.preferences.locations
    if not preferred:
        return config.neutral_score

    if posting.location is None:
        raise MissingJobLocationError(
            f"Job {posting.job_id or '<unknown>'} is not remote and has no location"
        )

    if matching_locations(preferred, posting.location):
        return config.match_score
    return config.mismatch_score


class LocationEvaluator:
    """Compare a posting's location with the user's preferences."""

    method = "location"

    def __init__(self, *, config: LocationConfig | None = None) -> None:
        self._config = config or LocationConfig()

    def evaluate(self, candidate: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        profile = UserProfile.model_validate(candidate)
        job = JobPosting.model_validate(context["job"])
        score = calculate_location_match(profile, job, config=self._config)

        if job.remote:
            status = "remote"
            matched: list[str] = []
        elif not profile.preferences.locations:
            status = "no_preference"
            matched = []
        else:
            matched = matching_locations(profile.preferences.locations, job.location or "")
            status = "matched" if matched else "mismatch"

        return {
            "method": self.method,
            "scores": {"location": score},
            "metadata": {
                "status": status,
                "job_location": job.location,
                "remote": job.remote,
                "matched_locations": matched,
            },
        }
