from __future__ import annotations

import pytest

from skillmatch.core.evaluators import (
    LocationEvaluator,
    MissingJobLocationError,
    calculate_location_match,
)
from skillmatch.schemas import JobPosting, UserProfile


def build_user(*locations: str) -> UserProfile:
    return UserProfile(preferences={"locations": list(locations)})


def test_remote_job_always_matches():
    job = JobPosting(remote=True)

    assert calculate_location_match(build_user("Berlin"), job) == 1.0
    assert calculate_location_match(build_user(), job) == 1.0
    assert calculate_location_match(UserProfile(), JobPosting(remote=True, location="Tokyo")) == 1.0


def test_no_preferences_is_neutral():
    assert calculate_location_match(build_user(), JobPosting(location="Paris")) == 0.5
    assert calculate_location_match(build_user(), JobPosting()) == 0.5


@pytest.mark.parametrize(
    ("preference", "job_location"),
    [
        ("San Francisco", "San Francisco, CA"),
        ("California, USA", "California"),
        ("berlin", "BERLIN"),
    ],
)
def test_containment_is_symmetric_and_case_insensitive(preference: str, job_location: str):
    assert calculate_location_match(build_user(preference), JobPosting(location=job_location)) == 1.0


def test_mismatch_is_soft_penalty():
    assert calculate_location_match(build_user("Berlin", "Munich"), JobPosting(location="Paris")) == pytest.approx(0.3)


def test_onsite_job_without_location_is_rejected():
    with pytest.raises(MissingJobLocationError):
        calculate_location_match(build_user("Berlin"), JobPosting(job_id="J-1"))

    assert issubclass(MissingJobLocationError, ValueError)


def test_location_evaluator_metadata():
    user = build_user("Austin", "Remote")
    job = JobPosting(location="Austin, TX")

    result = LocationEvaluator().evaluate(user.model_dump(mode="python"), {"job": job.model_dump(mode="python")})

    assert result["scores"]["location"] == 1.0
    assert result["metadata"]["status"] == "matched"
    assert result["metadata"]["matched_locations"] == ["Austin"]
