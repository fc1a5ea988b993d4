"""Typer-based command line interface for the randkit helpers.

Every command loads configuration first (package defaults, optional
``--config`` YAML, environment) and lets explicit options override it.

Exit codes
----------
0 success
2 usage error (raised by Typer)
4 configuration error
5 invalid input (empty lexicon, malformed range, unparseable date, ...)
"""

from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, DateFormatConfig, load_config
from .dates import format_date
from .rand import (
    GenerationRequest,
    generate_text,
    load_lexicon,
    next_int,
    pick_one,
    random_string,
)
from .text import slugify
from .utils.errors import RandkitError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

app = typer.Typer(
    name="randkit",
    help="Random numbers, strings and filler text.",
)

logger = get_logger(__name__)

EXIT_CONFIG = 4
EXIT_INPUT = 5

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None, verbose: bool) -> ConfigModel:
    """Load configuration and set up logging, exiting with 4 on failure."""

    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError, ValueError) as exc:
        _safe_exit(EXIT_CONFIG, str(exc).splitlines()[0])
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    logger.debug("loaded config (path=%s)", config_path)
    return cfg


ConfigOption = typer.Option(None, "--config", help="YAML config to override defaults")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log debug messages to stderr")
SecureOption = typer.Option(
    None, "--secure/--fast", help="Use cryptographically strong randomness"
)


@app.callback()
def main() -> None:
    """Entry point for the randkit command group."""
    pass


@app.command()
def text(
    length: Optional[int] = typer.Option(None, "--length", "-n", help="Number of units"),
    unit: Optional[str] = typer.Option(
        None, "--unit", "-u", help="Granularity [word|sentence|paragraph]"
    ),
    secure: Optional[bool] = SecureOption,
    lexicon_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--lexicon", help="Newline-separated word list"
    ),
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print synthetic filler text."""

    cfg = _load(config_path, verbose)
    try:
        request = GenerationRequest.from_config(cfg, length=length, unit=unit, secure=secure)
    except ValidationError as exc:
        _safe_exit(EXIT_INPUT, str(exc).splitlines()[0])

    path = lexicon_path or cfg.lexicon.path
    try:
        lexicon = load_lexicon(path) if path is not None else None
        output = generate_text(request, lexicon, settings=cfg.generation.text)
    except (RandkitError, OSError) as exc:
        _safe_exit(EXIT_INPUT, str(exc))
    typer.echo(output)


@app.command("int")
def int_(
    minimum: int = typer.Argument(..., help="Inclusive minimum, or exclusive maximum if alone"),
    maximum: Optional[int] = typer.Argument(None, help="Exclusive maximum"),
    secure: Optional[bool] = SecureOption,
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print a random integer in ``[MINIMUM, MAXIMUM)``."""

    cfg = _load(config_path, verbose)
    use_secure = cfg.generation.secure if secure is None else secure
    try:
        value = next_int(minimum, maximum, use_secure)
    except RandkitError as exc:
        _safe_exit(EXIT_INPUT, str(exc))
    typer.echo(str(value))


@app.command()
def string(
    length: int = typer.Argument(..., help="Number of characters"),
    charset: Optional[str] = typer.Option(None, "--charset", help="Characters to draw from"),
    secure: Optional[bool] = SecureOption,
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print a random string."""

    cfg = _load(config_path, verbose)
    use_secure = cfg.generation.secure if secure is None else secure
    try:
        value = random_string(length, charset or cfg.random.charset, use_secure)
    except RandkitError as exc:
        _safe_exit(EXIT_INPUT, str(exc))
    typer.echo(value)


@app.command()
def pick(
    choices: List[str] = typer.Argument(None, help="Candidates to choose from"),
    secure: Optional[bool] = SecureOption,
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print one of CHOICES at random."""

    cfg = _load(config_path, verbose)
    use_secure = cfg.generation.secure if secure is None else secure
    try:
        value = pick_one(choices or [], use_secure)
    except RandkitError as exc:
        _safe_exit(EXIT_INPUT, str(exc))
    typer.echo(value)


@app.command()
def slug(
    value: str = typer.Argument(..., help="Text to slugify"),
    replace: str = typer.Option("-", "--replace", help="Separator replacing other characters"),
    lower: bool = typer.Option(True, "--lower/--keep-case"),
    trim: bool = typer.Option(True, "--trim/--no-trim"),
    deduplicate: bool = typer.Option(True, "--dedupe/--no-dedupe"),
) -> None:
    """Print a URL-friendly slug of VALUE."""

    typer.echo(slugify(value, replace=replace, lower=lower, trim=trim, deduplicate=deduplicate))


@app.command("date")
def date_(
    values: List[str] = typer.Argument(None, help="ISO dates to format (default: now)"),
    fmt: str = typer.Option(
        "default", "--format", "-f", help="Preset name or token pattern, e.g. 'dddd D MMMM'"
    ),
    locale: Optional[str] = typer.Option(None, "--locale", help="Month and weekday names [en|fr]"),
    config_path: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print VALUES formatted with the ``dates`` configuration section."""

    cfg = _load(config_path, verbose)
    dates_cfg = cfg.dates
    if locale is not None:
        try:
            dates_cfg = DateFormatConfig.model_validate(
                {**cfg.dates.model_dump(), "locale": locale}
            )
        except ValidationError as exc:
            _safe_exit(EXIT_INPUT, str(exc).splitlines()[0])
    try:
        output = format_date(values or [datetime.now()], fmt, dates_cfg)
    except RandkitError as exc:
        _safe_exit(EXIT_INPUT, str(exc))
    typer.echo(output)
