from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .skill import RequiredSkill


class ExperienceLevel(str, Enum):
    """Seniority levels a posting may declare."""

    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    EXECUTIVE = "executive"


class JobPosting(BaseModel):
    """Job posting snapshot supplied by the caller.

    ``location`` is required whenever ``remote`` is false and the posting is
    scored against users with location preferences.
    """

    job_id: str | None = None
    title: str | None = None
    required_skills: list[RequiredSkill] = Field(default_factory=list)
    experience_level: str | None = None
    remote: bool = False
    location: str | None = None
    type: str | None = None

    model_config = ConfigDict(extra="allow", alias_generator=to_camel, populate_by_name=True)

    @field_validator("required_skills", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value
