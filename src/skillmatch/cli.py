"\"\"\"Typer CLI entrypoint for skill extraction and matching.\"\"\""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError

from .config import ConfigManager
from .container import create_container
from .logging import configure_logging
from .schemas.config import load_config

app = typer.Typer(help="Skill extraction and job match scoring CLI.")


def _load_settings(config: Optional[Path]) -> dict[str, Any]:
    if not config:
        return {}
    loaded = ConfigManager.load_path(config)
    if not isinstance(loaded, dict):
        raise typer.BadParameter("Config file must be a YAML object", param_name="config")
    try:
        return load_config(loaded).to_settings()
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc


@app.command()
def extract(
    text_file: Path = typer.Option(..., "--input", exists=True, readable=True, dir_okay=False, help="Profile text path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Extract skill records from a text file."""
    settings = _load_settings(config)
    configure_logging(log_level)

    container = create_container(settings=settings)
    skills = container.extraction_pipeline().run(input_path=text_file, output_path=output)
    typer.echo(f"Extracted {len(skills)} skills. Results saved to {output}.")


@app.command()
def match(
    users: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="User profiles JSONL path."),
    job: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Job posting JSON path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    as_of: Optional[str] = typer.Option(None, help="Reference date (YYYY-MM or ISO) for ongoing experience."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
) -> None:
    """Score user profiles against a job posting."""
    settings = _load_settings(config)
    configure_logging(log_level)

    container = create_container(settings=settings)
    results = container.match_pipeline().run(
        users_path=users,
        job_path=job,
        output_path=output,
        as_of=as_of,
    )
    typer.echo(f"Scored {len(results)} profiles. Results saved to {output}.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
