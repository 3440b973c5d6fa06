"\"\"\"Skill extraction and candidate/job match scoring.\"\"\""

from __future__ import annotations

__version__ = "0.1.0"

from .core import (
    MatchOutcome,
    MatchScorer,
    MissingJobLocationError,
    SkillExtractor,
    calculate_confidence,
    calculate_experience_match,
    calculate_job_type_match,
    calculate_location_match,
    calculate_match_score,
    calculate_skills_match,
    escape_regexp,
    extract_skills_from_text,
    get_skill_context,
)
from .schemas import (
    ExperienceEntry,
    JobPosting,
    Preferences,
    RequiredSkill,
    SkillLevel,
    SkillRecord,
    UserProfile,
)

__all__ = [
    "__version__",
    "ExperienceEntry",
    "JobPosting",
    "MatchOutcome",
    "MatchScorer",
    "MissingJobLocationError",
    "Preferences",
    "RequiredSkill",
    "SkillExtractor",
    "SkillLevel",
    "SkillRecord",
    "UserProfile",
    "calculate_confidence",
    "calculate_experience_match",
    "calculate_job_type_match",
    "calculate_location_match",
    "calculate_match_score",
    "calculate_skills_match",
    "escape_regexp",
    "extract_skills_from_text",
    "get_skill_context",
]
