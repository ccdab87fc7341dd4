from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
import yaml

from .config import ReadabilityConfig, load_config
from .models import ALL_SELECTION, SELECTION_CHOICES, parse_selection
from .report import format_scores, summary_payload
from .session import ReadabilitySession

logger = logging.getLogger(__name__)

app = typer.Typer(help="Readability index calculator.", no_args_is_help=True)

SELECTION_PROMPT = "Enter the score you want to calculate (ARI, FK, SMOG, CL, all)"
RETRY_PROMPT = "Wrong input. Try again"


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    score: str | None = typer.Option(
        None,
        "--score",
        "-s",
        help="Score to calculate: ARI, FK, SMOG, CL or all. Prompts when omitted.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    json_output: bool = typer.Option(
        False, "--json", help="Emit counts and scores as JSON instead of text."
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override the configured logging level."
    ),
) -> None:
    """Print text statistics and the requested readability scores for a file."""
    cfg = _load_cli_config(config)
    _configure_logging(log_level or cfg.log_level)
    text = _read_text(input_path, cfg.encoding)
    session = ReadabilitySession(text, cfg)
    logger.info("Analyzed %s", input_path)

    if json_output:
        # No prompting in JSON mode.
        selection = _validated_selection(score or cfg.default_selection or ALL_SELECTION)
        results = session.scores(selection)
        typer.echo(json.dumps(summary_payload(session.counts, results), indent=2))
        return

    selection = _validated_selection(score) if score is not None else None
    typer.echo(session.statistics())
    if selection is None:
        selection = cfg.default_selection or _prompt_selection()
    typer.echo(format_scores(session.scores(selection)))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadabilityConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_cli_config(path: Path | None) -> ReadabilityConfig:
    try:
        return load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _configure_logging(level: str) -> None:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        # basicConfig is a no-op once handlers exist, so set the level directly.
        logging.getLogger().setLevel(level.upper())
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc


def _read_text(path: Path, encoding: str) -> str:
    """Read the input file, reporting unreadable content as a bad parameter."""
    try:
        # Decode raw bytes so carriage returns reach the counters untouched.
        return path.read_bytes().decode(encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise typer.BadParameter(
            f"Could not read text file {path}: {exc}", param_hint="--input-path"
        ) from exc


def _validated_selection(value: str) -> str:
    try:
        parse_selection(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--score") from exc
    return value


def _prompt_selection() -> str:
    """Ask for a score selector until a valid one is entered."""
    value = typer.prompt(SELECTION_PROMPT)
    while value not in SELECTION_CHOICES:
        value = typer.prompt(RETRY_PROMPT)
    return value


if __name__ == "__main__":
    main()
