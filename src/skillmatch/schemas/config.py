"\"\"\"Pydantic configuration schema for CLI YAML input.\"\"\""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError


class CoreConfig(BaseModel):
    weights: dict[str, float] | None = None


class EvaluatorConfig(BaseModel):
    skills: dict[str, Any] | None = None
    experience: dict[str, Any] | None = None
    location: dict[str, Any] | None = None
    job_type: dict[str, Any] | None = None


class ExtractorConfig(BaseModel):
    skills: list[str] | None = None
    pattern_confidence: float | None = Field(default=None, ge=0.0, le=1.0)


class AppConfig(BaseModel):
    core: CoreConfig = Field(default_factory=CoreConfig)
    evaluators: EvaluatorConfig = Field(default_factory=EvaluatorConfig)
    extractor: ExtractorConfig = Field(default_factory=ExtractorConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        if self.core.weights:
            settings["core"] = self.core.model_dump(exclude_none=True)
        evaluator_settings = self.evaluators.model_dump(exclude_none=True)
        if evaluator_settings:
            settings["evaluators"] = evaluator_settings
        extractor_settings = self.extractor.model_dump(exclude_none=True)
        if extractor_settings:
            settings["extractor"] = extractor_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
