"\"\"\"Pydantic schema definitions for profiles, postings and skill records.\"\"\""

from __future__ import annotations

from .job import ExperienceLevel, JobPosting
from .profile import ExperienceEntry, Preferences, UserProfile, parse_date
from .skill import RequiredSkill, SkillLevel, SkillRecord

__all__ = [
    "ExperienceEntry",
    "ExperienceLevel",
    "JobPosting",
    "Preferences",
    "RequiredSkill",
    "SkillLevel",
    "SkillRecord",
    "UserProfile",
    "parse_date",
]
