"\"\"\"Skill records produced by extraction and required by job postings.\"\"\""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class SkillLevel(str, Enum):
    """Self-reported or inferred proficiency level."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class SkillRecord(BaseModel):
    """One identified competency."""

    name: str
    level: SkillLevel = SkillLevel.INTERMEDIATE
    ai_extracted: bool = False
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: Any) -> Any:
        # stored profiles use any casing; unknown labels fall back to the default
        if value is None or isinstance(value, SkillLevel):
            return value or SkillLevel.INTERMEDIATE
        normalized = str(value).strip().lower()
        for level in SkillLevel:
            if level.value.lower() == normalized:
                return level
        return SkillLevel.INTERMEDIATE


class RequiredSkill(BaseModel):
    """Skill requirement attached to a job posting."""

    name: str
    mandatory: bool = False

    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)
