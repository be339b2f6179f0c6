"""Command-line interface for the emotiontone client."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO, Tuple

import click
import structlog

from emotiontone import __version__
from emotiontone.client import EmotionAnalyzer
from emotiontone.config.config import ClientConfig, Config, find_config_file
from emotiontone.errors import (
    ApiError,
    EmotionAnalyzerError,
    NetworkError,
    RateLimitError,
    RequestTimeoutError,
    ValidationError,
)
from emotiontone.models import BatchEmotionResult, EmotionResult
from emotiontone.observability.logging import configure_logging

logger = structlog.get_logger(__name__)

EXIT_CODES = {
    ValidationError: 2,
    RateLimitError: 3,
    ApiError: 4,
    RequestTimeoutError: 5,
    NetworkError: 6,
}


def exit_code_for(error: EmotionAnalyzerError) -> int:
    for error_cls, code in EXIT_CODES.items():
        if isinstance(error, error_cls):
            return code
    return 1


def load_config(config_path: Optional[Path], base_url: Optional[str], timeout: Optional[int]) -> Config:
    """Load settings from a YAML file (explicit or discovered) or the environment, then apply CLI overrides."""
    path = config_path or find_config_file()
    config = Config.from_yaml(path) if path else Config()

    overrides: Dict[str, Any] = {}
    if base_url is not None:
        overrides["base_url"] = base_url
    if timeout is not None:
        overrides["timeout_ms"] = timeout
    if overrides:
        client = ClientConfig.model_validate({**config.client.model_dump(), **overrides})
        config = config.model_copy(update={"client": client})
    return config


def _format_result(result: EmotionResult) -> str:
    lines = [f"{result.primary_emotion} ({result.confidence:.2f})"]
    for score in result.all_emotions:
        lines.append(f"  {score.emotion:<12} {score.score:.2f}")
    return "\n".join(lines)


def _echo_result(result: EmotionResult | BatchEmotionResult, output_format: str) -> None:
    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif isinstance(result, BatchEmotionResult):
        for index, item in enumerate(result.results):
            click.echo(f"[{index}] {_format_result(item)}")
    else:
        click.echo(_format_result(result))


def _run(ctx: click.Context, coro: Any) -> Any:
    try:
        return asyncio.run(coro)
    except EmotionAnalyzerError as e:
        logger.debug("Command failed", error_type=type(e).__name__, error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(exit_code_for(e))


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Configuration file path")
@click.option("--base-url", default=None, help="Base URL of the emotion API")
@click.option("--timeout", default=None, type=click.IntRange(min=1), help="Request timeout in milliseconds")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level (overrides the configured one)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[str],
    base_url: Optional[str],
    timeout: Optional[int],
    log_level: Optional[str],
) -> None:
    """emotiontone - Analyze the emotional tone of text."""
    ctx.ensure_object(dict)
    config = load_config(Path(config_path) if config_path else None, base_url, timeout)
    if log_level:
        config.monitoring.log_level = log_level
    configure_logging(config.monitoring)

    ctx.obj["config"] = config
    ctx.obj["analyzer"] = EmotionAnalyzer.from_config(config)


output_option = click.option(
    "--output",
    "-o",
    "output_format",
    default="text",
    type=click.Choice(["text", "json"]),
    help="Output format",
)


@cli.command()
@click.argument("text")
@output_option
@click.pass_context
def analyze(ctx: click.Context, text: str, output_format: str) -> None:
    """Analyze a single TEXT (max 100 words)."""
    analyzer: EmotionAnalyzer = ctx.obj["analyzer"]
    result = _run(ctx, analyzer.analyze(text))
    _echo_result(result, output_format)


@cli.command()
@click.argument("file", type=click.File("r"), required=False)
@click.option("--text", "-t", "texts", multiple=True, help="Text to analyze (can be used multiple times)")
@output_option
@click.pass_context
def batch(ctx: click.Context, file: Optional[TextIO], texts: Tuple[str, ...], output_format: str) -> None:
    """Analyze up to 10 texts, one per line in FILE ('-' for stdin) and/or given with --text."""
    items: List[str] = list(texts)
    if file is not None:
        items.extend(line.rstrip("\n") for line in file if line.strip())
    if not items:
        raise click.UsageError("Provide a FILE or at least one --text.")

    analyzer: EmotionAnalyzer = ctx.obj["analyzer"]
    result = _run(ctx, analyzer.analyze_batch(items))
    _echo_result(result, output_format)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
