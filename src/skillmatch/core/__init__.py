"\"\"\"Core extraction and match scoring components.\"\"\""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# NOTE: keep imports explicit for export clarity.
from .evaluators import (
    ExperienceEvaluator,
    JobTypeEvaluator,
    LocationEvaluator,
    MissingJobLocationError,
    SkillsEvaluator,
    calculate_experience_match,
    calculate_job_type_match,
    calculate_location_match,
    calculate_skills_match,
)
from .extraction import (
    SKILL_PATTERNS,
    TECH_SKILLS,
    SkillExtractor,
    SkillExtractorConfig,
    calculate_confidence,
    extract_skills_from_text,
)
from .scoring import EvaluationResult, MatchOutcome, MatchScorer, calculate_match_score
from .text import escape_regexp, get_skill_context


@runtime_checkable
class Evaluator(Protocol):
    """Evaluator contract for computing one match factor."""

    method: str

    def evaluate(self, candidate: dict, context: dict) -> dict:
        """Return evaluation results for a user under the given context."""


__all__ = [
    "Evaluator",
    "EvaluationResult",
    "MatchOutcome",
    "MatchScorer",
    "SkillExtractor",
    "SkillExtractorConfig",
    "SkillsEvaluator",
    "ExperienceEvaluator",
    "LocationEvaluator",
    "JobTypeEvaluator",
    "MissingJobLocationError",
    "TECH_SKILLS",
    "SKILL_PATTERNS",
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
