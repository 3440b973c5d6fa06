from __future__ import annotations

from datetime import date, datetime
from typing import Any

import pendulum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .skill import SkillRecord


def parse_date(value: Any) -> Any:
    """Coerce ISO dates, ISO datetimes and ``YYYY-MM`` strings to ``date``."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if len(text) == 7 and text[4] == "-":
        return date(int(text[:4]), int(text[5:7]), 1)
    parsed = pendulum.parse(text)
    if isinstance(parsed, datetime):
        return parsed.date()
    if isinstance(parsed, date):
        return parsed
    raise ValueError(f"Unsupported date value: {value!r}")


class ExperienceEntry(BaseModel):
    """Employment history entry; a missing end date means ongoing."""

    start_date: date
    end_date: date | None = None
    company: str | None = None
    title: str | None = None

    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Any:
        return parse_date(value)


class Preferences(BaseModel):
    """Location and job-type preferences declared by a user."""

    locations: list[str] = Field(default_factory=list)
    job_types: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)

    @field_validator("locations", "job_types", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class UserProfile(BaseModel):
    """Candidate profile snapshot supplied by the caller."""

    user_id: str | None = None
    skills: list[SkillRecord] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    preferences: Preferences = Field(default_factory=Preferences)

    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)

    @field_validator("skills", "experience", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("preferences", mode="before")
    @classmethod
    def _none_preferences(cls, value: Any) -> Any:
        return {} if value is None else value
