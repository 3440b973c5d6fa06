"\"\"\"Dependency injection container for extraction and matching.\"\"\""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import (
    ExperienceEvaluator,
    JobTypeEvaluator,
    LocationEvaluator,
    MatchScorer,
    SkillExtractor,
    SkillsEvaluator,
)
from .core.evaluators.experience import ExperienceConfig
from .core.evaluators.job_type import JobTypeConfig
from .core.evaluators.location import LocationConfig
from .core.evaluators.skills import SkillsMatchConfig
from .core.extraction import SkillExtractorConfig
from .pipeline import ExtractionPipeline, MatchPipeline


class MatchingContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    skill_extractor = providers.Singleton(SkillExtractor)

    skills_evaluator = providers.Singleton(SkillsEvaluator)
    experience_evaluator = providers.Singleton(ExperienceEvaluator)
    location_evaluator = providers.Singleton(LocationEvaluator)
    job_type_evaluator = providers.Singleton(JobTypeEvaluator)

    evaluators = providers.List(
        skills_evaluator,
        experience_evaluator,
        location_evaluator,
        job_type_evaluator,
    )

    match_scorer = providers.Singleton(
        MatchScorer,
        evaluators=evaluators,
        weights=config.weights,
    )

    match_pipeline = providers.Factory(MatchPipeline, scorer=match_scorer)

    extraction_pipeline = providers.Factory(ExtractionPipeline, extractor=skill_extractor)


def create_container(*, settings: dict | None = None) -> MatchingContainer:
    """Instantiate container with optional overrides."""

    container = MatchingContainer()

    if not settings:
        return container

    core_settings = settings.get("core", {}) if isinstance(settings, dict) else {}
    if core_settings:
        container.config.override(core_settings)

    evaluator_settings = settings.get("evaluators", {}) if isinstance(settings, dict) else {}

    if "skills" in evaluator_settings:
        skills_config = SkillsMatchConfig(**evaluator_settings["skills"])
        container.skills_evaluator.override(
            providers.Singleton(SkillsEvaluator, config=skills_config)
        )

    if "experience" in evaluator_settings:
        experience_config = ExperienceConfig(**evaluator_settings["experience"])
        container.experience_evaluator.override(
            providers.Singleton(ExperienceEvaluator, config=experience_config)
        )

    if "location" in evaluator_settings:
        location_config = LocationConfig(**evaluator_settings["location"])
        container.location_evaluator.override(
            providers.Singleton(LocationEvaluator, config=location_config)
        )

    if "job_type" in evaluator_settings:
        job_type_config = JobTypeConfig(**evaluator_settings["job_type"])
        container.job_type_evaluator.override(
            providers.Singleton(JobTypeEvaluator, config=job_type_config)
        )

    extractor_settings = settings.get("extractor", {}) if isinstance(settings, dict) else {}
    if extractor_settings:
        if "skills" in extractor_settings:
            extractor_settings = {
                **extractor_settings,
                "skills": tuple(extractor_settings["skills"]),
            }
        extractor_config = SkillExtractorConfig(**extractor_settings)
        container.skill_extractor.override(
            providers.Singleton(SkillExtractor, config=extractor_config)
        )

    return container
