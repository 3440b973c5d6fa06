"\"\"\"Weighted match scoring across evaluators.\"\"\""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable

import structlog

from ..schemas import JobPosting, UserProfile
from .evaluators import ExperienceEvaluator, JobTypeEvaluator, LocationEvaluator, SkillsEvaluator


@dataclass(slots=True)
class EvaluationResult:
    """Normalized evaluator output."""

    method: str
    scores: dict[str, float]
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class MatchOutcome:
    """Match score with the per-factor breakdown."""

    user_id: str | None
    job_id: str | None
    score: float
    scores: dict[str, float]
    weights: dict[str, float]
    evaluations: list[EvaluationResult]


def default_evaluators() -> list[Any]:
    return [SkillsEvaluator(), ExperienceEvaluator(), LocationEvaluator(), JobTypeEvaluator()]


class MatchScorer:
    """Runs evaluators and combines their scores with fixed weights."""

    DEFAULT_WEIGHTS: dict[str, float] = {
        "skills": 0.4,
        "experience": 0.3,
        "location": 0.2,
        "job_type": 0.1,
    }

    def __init__(
        self,
        evaluators: Iterable[Any] | None = None,
        *,
        weights: dict[str, float] | None = None,
    ) -> None:
        self._evaluators = list(evaluators) if evaluators is not None else default_evaluators()
        self._weights = self.DEFAULT_WEIGHTS.copy()
        if weights:
            self._weights.update({key: float(value) for key, value in weights.items()})
        self._logger = structlog.get_logger(__name__)

    def evaluate(
        self,
        *,
        user: UserProfile,
        job: JobPosting,
        context: dict[str, Any] | None = None,
    ) -> MatchOutcome:
        serialized_user = user.model_dump(mode="python")
        evaluation_context: dict[str, Any] = {"job": job.model_dump(mode="python")}
        if context:
            evaluation_context.update(context)

        evaluations: list[EvaluationResult] = []
        scores: dict[str, float] = {}
        for evaluator in self._evaluators:
            raw_result = evaluator.evaluate(serialized_user, evaluation_context)
            normalized = self._normalize_evaluation_result(raw_result)
            evaluations.append(normalized)
            scores.update(normalized.scores)

        score = self._compute_weighted_score(scores)
        self._logger.debug(
            "match.scored",
            user_id=user.user_id,
            job_id=job.job_id,
            score=score,
            scores=scores,
        )
        return MatchOutcome(
            user_id=user.user_id,
            job_id=job.job_id,
            score=score,
            scores=scores,
            weights=dict(self._weights),
            evaluations=evaluations,
        )

    @staticmethod
    def _normalize_evaluation_result(payload: dict[str, Any]) -> EvaluationResult:
        method = payload.get("method")
        scores = payload.get("scores") or {}
        metadata = payload.get("metadata") or {}
        if method is None:
            raise ValueError("Evaluator result must include 'method'.")
        if not isinstance(scores, dict):
            raise ValueError("Evaluator result 'scores' must be a mapping.")
        return EvaluationResult(
            method=str(method),
            scores={k: float(v) for k, v in scores.items()},
            metadata=dict(metadata),
        )

    def _compute_weighted_score(self, scores: dict[str, float]) -> float:
        # only factors that were actually scored count towards the denominator
        weighted = [(scores[metric], weight) for metric, weight in self._weights.items() if metric in scores]
        weight_sum = sum(weight for _, weight in weighted)
        if weight_sum <= 0:
            return 0.0
        return sum(value * weight for value, weight in weighted) / weight_sum


_DEFAULT_SCORER = MatchScorer()


def calculate_match_score(
    user: UserProfile | dict[str, Any],
    job: JobPosting | dict[str, Any],
    *,
    as_of: date | str | None = None,
) -> float:
    """Return the weighted compatibility score in [0, 1] for a user and a posting.

    Skills weigh 0.4, experience 0.3, location 0.2 and job type 0.1. ``as_of``
    replaces the current date when totalling ongoing experience.
    """
    outcome = _DEFAULT_SCORER.evaluate(
        user=UserProfile.model_validate(user),
        job=JobPosting.model_validate(job),
        context={"as_of": as_of} if as_of is not None else None,
    )
    return outcome.score
