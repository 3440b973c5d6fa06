"\"\"\"Dictionary and pattern based skill extraction.\"\"\""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

import structlog

from ..schemas import SkillLevel, SkillRecord
from .text import escape_regexp, get_skill_context

TECH_SKILLS: tuple[str, ...] = (
    "javascript", "python", "java", "react", "node.js", "express",
    "mongodb", "sql", "postgresql", "mysql", "html", "css",
    "typescript", "angular", "vue.js", "php", "ruby", "go",
    "rust", "c++", "c#", "swift", "kotlin", "flutter", "react native",
    "docker", "kubernetes", "aws", "azure", "gcp", "git",
    "machine learning", "ai", "blockchain", "solidity", "web3",
    "tensorflow", "pytorch", "scikit-learn", "pandas", "numpy",
)

# front-end frameworks, back-end frameworks, datastores, CI/CD and containers, cloud
SKILL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(react|angular|vue|svelte|ember)\.?js\b", re.IGNORECASE),
    re.compile(r"\b(node|express|django|flask|spring|laravel)\.?js?\b", re.IGNORECASE),
    re.compile(r"\b(mongodb|postgresql|mysql|redis|elasticsearch)\b", re.IGNORECASE),
    re.compile(r"\b(docker|kubernetes|jenkins|travis|circleci)\b", re.IGNORECASE),
    re.compile(r"\b(aws|azure|gcp|heroku|vercel|netlify)\b", re.IGNORECASE),
)

_NON_WORD = re.compile(r"[^\w]")

OCCURRENCE_WEIGHT = 0.3
OCCURRENCE_CAP = 0.9
EXPERIENCE_BOOST = 0.2
EXPERTISE_BOOST = 0.1


@dataclass
class SkillExtractorConfig:
    """Configuration for dictionary and pattern extraction."""

    skills: tuple[str, ...] = TECH_SKILLS
    pattern_confidence: float = 0.8

    def __post_init__(self) -> None:
        self.skills = tuple(skill.lower() for skill in self.skills)


def calculate_confidence(text: str, skill: str) -> float:
    """Estimate how strongly ``text`` supports ``skill``.

    Each literal, case-insensitive mention adds 0.3 up to 0.9. Mentions near
    "experience"/"years" add 0.2 and mentions near "expert"/"advanced" add
    0.1. The result never exceeds 1.0.
    """
    occurrences = len(re.findall(escape_regexp(skill), text, re.IGNORECASE))
    if occurrences == 0:
        return 0.0

    confidence = min(occurrences * OCCURRENCE_WEIGHT, OCCURRENCE_CAP)

    context = get_skill_context(text, skill)
    if "experience" in context or "years" in context:
        confidence += EXPERIENCE_BOOST
    if "expert" in context or "advanced" in context:
        confidence += EXPERTISE_BOOST

    return min(confidence, 1.0)


def canonical_skill_name(match: str) -> str:
    """Lowercase ``match`` and strip non-word characters (``React.js`` -> ``reactjs``)."""
    return _NON_WORD.sub("", match.lower())


class SkillExtractor:
    """Turn free-form profile text into skill records."""

    def __init__(
        self,
        *,
        config: SkillExtractorConfig | None = None,
        patterns: Iterable[re.Pattern[str]] | None = None,
    ) -> None:
        self._config = config or SkillExtractorConfig()
        self._patterns = tuple(patterns) if patterns is not None else SKILL_PATTERNS
        self._logger = structlog.get_logger(__name__)

    def extract(self, text: str) -> list[SkillRecord]:
        if not text or not text.strip():
            return []

        found: dict[str, SkillRecord] = {}
        self._dictionary_pass(text, found)
        self._pattern_pass(text, found)

        # sorted() is stable, so equal confidences keep encounter order
        records = sorted(found.values(), key=lambda record: record.confidence, reverse=True)
        self._logger.debug(
            "skills.extracted",
            count=len(records),
            skills=[record.name for record in records],
        )
        return records

    def _dictionary_pass(self, text: str, found: dict[str, SkillRecord]) -> None:
        lowered = text.lower()
        for skill in self._config.skills:
            if skill in found or skill not in lowered:
                continue
            found[skill] = self._record(skill, calculate_confidence(text, skill))

    def _pattern_pass(self, text: str, found: dict[str, SkillRecord]) -> None:
        for pattern in self._patterns:
            for match in pattern.finditer(text):
                name = canonical_skill_name(match.group(0))
                if not name or name in found:
                    continue
                found[name] = self._record(name, self._config.pattern_confidence)

    @staticmethod
    def _record(name: str, confidence: float) -> SkillRecord:
        return SkillRecord(
            name=name,
            level=SkillLevel.INTERMEDIATE,
            ai_extracted=True,
            confidence=confidence,
        )


_DEFAULT_EXTRACTOR = SkillExtractor()


def extract_skills_from_text(text: str) -> list[SkillRecord]:
    """Extract skill records from ``text`` with the built-in dictionary and patterns."""
    return _DEFAULT_EXTRACTOR.extract(text)
