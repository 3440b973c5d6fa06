from __future__ import annotations

import pytest
from pydantic import ValidationError

from skillmatch.container import create_container
from skillmatch.schemas import JobPosting, UserProfile
from skillmatch.schemas.config import AppConfig, load_config


def test_create_container_with_overrides():
    container = create_container(
        settings={
            "core": {"weights": {"skills": 0.5}},
            "evaluators": {
                "skills": {"mandatory_weight": 3.0},
                "experience": {"neutral_score": 0.4, "ranges": {"mid": [3, 6]}},
                "location": {"mismatch_score": 0.2},
                "job_type": {"neutral_score": 0.9},
            },
            "extractor": {"skills": ["Terraform"], "pattern_confidence": 0.7},
        }
    )

    skills = container.skills_evaluator()
    experience = container.experience_evaluator()
    location = container.location_evaluator()
    job_type = container.job_type_evaluator()
    extractor = container.skill_extractor()
    scorer = container.match_scorer()

    assert skills._config.mandatory_weight == 3.0
    assert experience._config.neutral_score == 0.4
    assert experience._config.range_for("mid") == (3.0, 6.0)
    assert location._config.mismatch_score == 0.2
    assert job_type._config.neutral_score == 0.9
    assert extractor._config.skills == ("terraform",)
    assert extractor._config.pattern_confidence == 0.7
    assert scorer._weights["skills"] == 0.5
    assert scorer._weights["experience"] == 0.3


def test_create_container_defaults():
    container = create_container()

    scorer = container.match_scorer()

    assert scorer._weights == {"skills": 0.4, "experience": 0.3, "location": 0.2, "job_type": 0.1}
    assert container.match_pipeline() is not container.match_pipeline()


def test_load_config_validation():
    data = {
        "core": {"weights": {"skills": 0.6}},
        "evaluators": {"location": {"neutral_score": 0.4}},
        "extractor": {"pattern_confidence": 0.5},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings["core"]["weights"]["skills"] == 0.6
    assert settings["evaluators"] == {"location": {"neutral_score": 0.4}}
    assert settings["extractor"] == {"pattern_confidence": 0.5}


def test_load_config_rejects_non_mapping():
    with pytest.raises(ValidationError):
        load_config(["not", "a", "mapping"])


def test_empty_config_produces_no_settings():
    assert load_config({}).to_settings() == {}


def test_weight_override_changes_container_scores():
    user = UserProfile(skills=[{"name": "python"}])
    job = JobPosting(required_skills=[{"name": "python"}, {"name": "go"}], remote=True)

    default_score = create_container().match_scorer().evaluate(user=user, job=job).score
    skills_only = create_container(
        settings={
            "core": {
                "weights": {"skills": 1.0, "experience": 0.0, "location": 0.0, "job_type": 0.0}
            }
        }
    ).match_scorer()

    # skills 0.5, experience 0.5, remote location 1.0, job type 0.8
    assert default_score == pytest.approx(0.5 * 0.4 + 0.5 * 0.3 + 1.0 * 0.2 + 0.8 * 0.1)
    assert skills_only.evaluate(user=user, job=job).score == pytest.approx(0.5)


def test_experience_range_override_keeps_default_levels():
    container = create_container(
        settings={"evaluators": {"experience": {"ranges": {"mid": [3, 6]}}}}
    )

    experience = container.experience_evaluator()

    assert experience._config.range_for("mid") == (3.0, 6.0)
    assert experience._config.range_for("senior") == (5.0, 10.0)
