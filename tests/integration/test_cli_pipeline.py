from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from skillmatch.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


def test_cli_match_ranks_profiles(tmp_path: Path, runner: CliRunner) -> None:
    users_path = tmp_path / "users.jsonl"
    job_path = tmp_path / "job.json"
    output_path = tmp_path / "results.json"

    users = [
        {"userId": "U-sparse"},
        {
            "userId": "U-fit",
            "skills": [{"name": "Python"}, {"name": "docker"}],
            "experience": [{"startDate": "2021-01-01"}],
            "preferences": {"locations": ["Remote"], "jobTypes": ["full-time"]},
        },
    ]
    users_path.write_text(
        "\n".join(json.dumps(item) for item in users) + "\n{broken",
        encoding="utf-8",
    )
    write_json(
        job_path,
        {
            "jobId": "J-001",
            "title": "Backend Engineer",
            "requiredSkills": [{"name": "python", "mandatory": True}],
            "experienceLevel": "mid",
            "remote": True,
            "type": "full-time",
        },
    )

    result = runner.invoke(
        app,
        [
            "match",
            "--users",
            str(users_path),
            "--job",
            str(job_path),
            "--output",
            str(output_path),
            "--as-of",
            "2024-01-01",
        ],
    )

    assert result.exit_code == 0, result.stdout
    rendered = json.loads(output_path.read_text(encoding="utf-8"))

    assert rendered["metadata"]["job_id"] == "J-001"
    assert rendered["metadata"]["user_count"] == 2
    assert len(rendered["metadata"]["errors"]) == 1

    first, second = rendered["results"]
    assert first["user_id"] == "U-fit"
    assert first["rank"] == 1
    assert first["score"] == pytest.approx(1.0)
    assert second["user_id"] == "U-sparse"
    # skills 0, experience 0.5, remote 1.0, job type 0.8
    assert second["score"] == pytest.approx(0.3 * 0.5 + 0.2 * 1.0 + 0.1 * 0.8)
    assert {evaluation["method"] for evaluation in first["evaluations"]} == {
        "skills",
        "experience",
        "location",
        "job_type",
    }


def test_cli_extract_writes_skill_records(tmp_path: Path, runner: CliRunner) -> None:
    input_path = tmp_path / "profile.txt"
    output_path = tmp_path / "skills.json"
    input_path.write_text(
        "Experienced React.js developer with 5 years in MongoDB and expert AWS skills",
        encoding="utf-8",
    )

    result = runner.invoke(
        app,
        ["extract", "--input", str(input_path), "--output", str(output_path)],
    )

    assert result.exit_code == 0, result.stdout
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    skills = {item["name"]: item for item in rendered["skills"]}

    assert {"react", "reactjs", "mongodb", "aws"} <= set(skills)
    assert skills["reactjs"] == {
        "name": "reactjs",
        "level": "Intermediate",
        "aiExtracted": True,
        "confidence": 0.8,
    }
    assert rendered["metadata"]["skill_count"] == len(rendered["skills"])


def test_cli_extract_honours_yaml_config(tmp_path: Path, runner: CliRunner) -> None:
    input_path = tmp_path / "profile.txt"
    output_path = tmp_path / "skills.json"
    config_path = tmp_path / "config.yaml"
    input_path.write_text("Terraform on AWS, some Vue.js", encoding="utf-8")
    config_path.write_text(
        "extractor:\n  skills: [terraform]\n  pattern_confidence: 0.5\n",
        encoding="utf-8",
    )

    result = runner.invoke(
        app,
        [
            "extract",
            "--input",
            str(input_path),
            "--output",
            str(output_path),
            "--config",
            str(config_path),
        ],
    )

    assert result.exit_code == 0, result.stdout
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    names = [item["name"] for item in rendered["skills"]]
    confidences = {item["name"]: item["confidence"] for item in rendered["skills"]}

    assert names == ["vuejs", "aws", "terraform"]
    assert confidences["vuejs"] == pytest.approx(0.5)
    assert confidences["terraform"] == pytest.approx(0.3)


def test_cli_rejects_non_mapping_config(tmp_path: Path, runner: CliRunner) -> None:
    input_path = tmp_path / "profile.txt"
    config_path = tmp_path / "config.yaml"
    input_path.write_text("Python", encoding="utf-8")
    config_path.write_text("- just\n- a list\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "extract",
            "--input",
            str(input_path),
            "--output",
            str(tmp_path / "skills.json"),
            "--config",
            str(config_path),
        ],
    )

    assert result.exit_code != 0
