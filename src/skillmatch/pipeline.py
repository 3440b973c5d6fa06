"\"\"\"Batch extraction and matching pipelines.\"\"\""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import date
from pathlib import Path

import pendulum
import structlog
from pydantic import ValidationError

from .core import MatchScorer, MissingJobLocationError, SkillExtractor
from .schemas import JobPosting, UserProfile
from . import __version__


class ProfileLoadError(ValueError):
    """Raised when profile loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[UserProfile]):
        super().__init__("Profile loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Profile loading failed: {self.errors}"


class ProfileLoader:
    """Load user profiles from a JSON lines file."""

    def load(self, path: Path) -> list[UserProfile]:
        profiles: list[UserProfile] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(record, dict):
                    errors.append(f"line {idx}: expected a JSON object")
                    continue
                try:
                    profile = UserProfile.model_validate(record)
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc}")
                    continue
                if profile.user_id is None:
                    profile.user_id = f"line-{idx}"
                profiles.append(profile)
        if errors:
            raise ProfileLoadError(errors, profiles)
        return profiles


class JobLoader:
    """Load a job posting document."""

    def load(self, path: Path) -> JobPosting:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid job JSON: {exc}") from exc
        return JobPosting.model_validate(data)


class OutputWriter:
    """Persist pipeline output."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, default=_json_default),
            encoding="utf-8",
        )


class MatchPipeline:
    """Score every profile in a file against one job posting and rank them."""

    def __init__(
        self,
        *,
        scorer: MatchScorer,
        profile_loader: ProfileLoader | None = None,
        job_loader: JobLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._scorer = scorer
        self._profiles = profile_loader or ProfileLoader()
        self._jobs = job_loader or JobLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        users_path: Path,
        job_path: Path,
        output_path: Path,
        as_of: str | date | None = None,
    ) -> list[dict]:
        job = self._jobs.load(job_path)
        errors: list[str] = []
        try:
            profiles = self._profiles.load(users_path)
        except ProfileLoadError as exc:
            profiles = exc.partial
            errors.extend(exc.errors)
            self._logger.warning("profiles.partial_load", errors=exc.errors)

        results: list[dict] = []
        for profile in profiles:
            try:
                outcome = self._scorer.evaluate(
                    user=profile,
                    job=job,
                    context={"as_of": as_of} if as_of else None,
                )
            except MissingJobLocationError as exc:
                errors.append(f"user {profile.user_id}: {exc}")
                self._logger.warning("match.skipped", user_id=profile.user_id, error=str(exc))
                continue

            results.append(json.loads(json.dumps(asdict(outcome), default=_json_default)))
            self._logger.info(
                "match.result",
                user_id=profile.user_id,
                job_id=job.job_id,
                score=outcome.score,
            )

        # stable: equal scores keep input order
        results.sort(key=lambda item: item["score"], reverse=True)
        for rank, item in enumerate(results, start=1):
            item["rank"] = rank

        payload = {
            "metadata": {
                "job_id": job.job_id,
                "user_count": len(profiles),
                "errors": errors,
                "as_of": str(as_of) if as_of else None,
                "timestamp": pendulum.now().to_iso8601_string(),
                "app_version": __version__,
            },
            "results": results,
        }
        self._writer.write(output_path, payload)
        return results


class ExtractionPipeline:
    """Extract skills from a plain-text document."""

    def __init__(
        self,
        *,
        extractor: SkillExtractor,
        writer: OutputWriter | None = None,
    ) -> None:
        self._extractor = extractor
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(self, *, input_path: Path, output_path: Path) -> list[dict]:
        text = input_path.read_text(encoding="utf-8")
        records = self._extractor.extract(text)
        skills = [record.model_dump(mode="json", by_alias=True) for record in records]
        self._logger.info("skills.result", source=str(input_path), count=len(skills))

        payload = {
            "metadata": {
                "source": str(input_path),
                "skill_count": len(skills),
                "timestamp": pendulum.now().to_iso8601_string(),
                "app_version": __version__,
            },
            "skills": skills,
        }
        self._writer.write(output_path, payload)
        return skills


def _json_default(value):  # type: ignore[override]
    if isinstance(value, pendulum.DateTime):
        return value.to_iso8601_string()
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
