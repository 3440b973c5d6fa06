"\"\"\"Sub-score evaluators combined by the match scorer.\"\"\""

from .skills import SkillsEvaluator, SkillsMatchConfig, calculate_skills_match
from .experience import ExperienceConfig, ExperienceEvaluator, calculate_experience_match
from .location import (
    LocationConfig,
    LocationEvaluator,
    MissingJobLocationError,
    calculate_location_match,
)
from .job_type import JobTypeConfig, JobTypeEvaluator, calculate_job_type_match

__all__ = [
    "SkillsEvaluator",
    "SkillsMatchConfig",
    "ExperienceEvaluator",
    "ExperienceConfig",
    "LocationEvaluator",
    "LocationConfig",
    "MissingJobLocationError",
    "JobTypeEvaluator",
    "JobTypeConfig",
    "calculate_skills_match",
    "calculate_experience_match",
    "calculate_location_match",
    "calculate_job_type_match",
]
