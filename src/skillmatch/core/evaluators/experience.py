"\"\"\"Years-of-experience evaluation.\"\"\""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Iterable

import pendulum

from ...schemas import ExperienceEntry, ExperienceLevel, JobPosting, UserProfile, parse_date

DAYS_PER_YEAR = 365

DEFAULT_EXPERIENCE_RANGES: dict[str, tuple[float, float]] = {
    ExperienceLevel.ENTRY.value: (0.0, 2.0),
    ExperienceLevel.MID.value: (2.0, 5.0),
    ExperienceLevel.SENIOR.value: (5.0, 10.0),
    ExperienceLevel.EXECUTIVE.value: (10.0, 100.0),
}


@dataclass
class ExperienceConfig:
    """Year ranges per seniority level and fallback scores."""

    ranges: dict[str, tuple[float, float]] = field(
        default_factory=lambda: dict(DEFAULT_EXPERIENCE_RANGES)
    )
    default_range: tuple[float, float] = (0.0, 100.0)
    neutral_score: float = 0.5
    overqualified_floor: float = 0.7

    def __post_init__(self) -> None:
        merged = {**DEFAULT_EXPERIENCE_RANGES, **self.ranges}
        self.ranges = {str(level): (float(low), float(high)) for level, (low, high) in merged.items()}
        low, high = self.default_range
        self.default_range = (float(low), float(high))

    def range_for(self, level: str | None) -> tuple[float, float]:
        if level is None:
            return self.default_range
        return self.ranges.get(level, self.default_range)


def total_experience_years(entries: Iterable[ExperienceEntry], as_of: date) -> float:
    """Sum elapsed years across entries; ongoing entries run until ``as_of``.

    Entries whose start lies after their end contribute 0.
    """
    total = 0.0
    for entry in entries:
        end_date = entry.end_date or as_of
        days = end_date.toordinal() - entry.start_date.toordinal()
        total += max(0.0, days / DAYS_PER_YEAR)
    return total


def score_years(total_years: float, year_range: tuple[float, float], config: ExperienceConfig) -> float:
    min_years, max_years = year_range
    if min_years <= total_years <= max_years:
        return 1.0
    if total_years < min_years:
        # min_years > 0 here, otherwise total_years would be in range
        return max(0.0, total_years / min_years)
    if max_years <= 0:
        return config.overqualified_floor
    return max(config.overqualified_floor, 1 - (total_years - max_years) / max_years)


def resolve_as_of(as_of: Any, now_provider: Callable[[], Any] | None = None) -> date:
    """Return ``as_of`` as a date, falling back to the current date."""
    parsed = parse_date(as_of) if as_of is not None else None
    if parsed is not None:
        return parsed
    now = (now_provider or pendulum.now)()
    return parse_date(now)


def calculate_experience_match(
    user: UserProfile | dict[str, Any],
    job: JobPosting | dict[str, Any],
    *,
    as_of: date | str | None = None,
    config: ExperienceConfig | None = None,
) -> float:
    """Score the user's total experience against the posting's level.

    Users without experience entries get a neutral 0.5. Inside the level's
    year range the score is 1.0; below it the score ramps linearly from 0;
    above it the score decays but never drops below 0.7.
    """
    config = config or ExperienceConfig()
    profile = UserProfile.model_validate(user)
    posting = JobPosting.model_validate(job)
    if not profile.experience:
        return config.neutral_score

    total_years = total_experience_years(profile.experience, resolve_as_of(as_of))
    return score_years(total_years, config.range_for(posting.experience_level), config)


class ExperienceEvaluator:
    """Compare accumulated years of experience with the posting's seniority."""

    method = "experience"

    def __init__(
        self,
        *,
        config: ExperienceConfig | None = None,
        now_provider: Callable[[], Any] | None = None,
    ) -> None:
        self._config = config or ExperienceConfig()
        self._now_provider = now_provider or pendulum.now

    def evaluate(self, candidate: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        profile = UserProfile.model_validate(candidate)
        job = JobPosting.model_validate(context["job"])
        as_of = resolve_as_of(context.get("as_of"), self._now_provider)
        year_range = self._config.range_for(job.experience_level)

        if not profile.experience:
            return {
                "method": self.method,
                "scores": {"experience": self._config.neutral_score},
                "metadata": {
                    "status": "insufficient_data",
                    "total_years": None,
                    "required_range": list(year_range),
                    "as_of": as_of.isoformat(),
                },
            }

        total_years = total_experience_years(profile.experience, as_of)
        score = score_years(total_years, year_range, self._config)
        if total_years < year_range[0]:
            status = "under_qualified"
        elif total_years > year_range[1]:
            status = "over_qualified"
        else:
            status = "within_range"

        return {
            "method": self.method,
            "scores": {"experience": score},
            "metadata": {
                "status": status,
                "total_years": total_years,
                "required_range": list(year_range),
                "as_of": as_of.isoformat(),
            },
        }
