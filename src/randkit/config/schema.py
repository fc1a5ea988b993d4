"""Typed configuration schema and loader for the randkit package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, TypeAdapter, confloat, conint, field_validator

Unit = Literal["word", "sentence", "paragraph"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class GenerationSettings(BaseModel):
    """Shape of generated text: words per sentence, sentences per paragraph.

    Both count ranges are closed-open ``(low, high)`` pairs.
    """

    sentence_words: tuple[int, int] = (5, 15)
    paragraph_sentences: tuple[int, int] = (3, 7)
    comma_probability: confloat(ge=0.0, le=1.0) = 0.1

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("sentence_words", "paragraph_sentences")
    @classmethod
    def _check_bounds(cls, value: tuple[int, int]) -> tuple[int, int]:
        low, high = value
        if not 1 <= low < high:
            raise ValueError("count range must satisfy 1 <= low < high")
        return value


class GenerationOptions(BaseModel):
    """Defaults used to build a generation request from configuration."""

    length: conint(ge=0)
    unit: Unit
    secure: bool
    secure_env: str
    text: GenerationSettings = GenerationSettings()

    model_config = ConfigDict(extra="forbid")


class RandomSettings(BaseModel):
    """Settings for random string generation."""

    charset: str = ""

    model_config = ConfigDict(extra="forbid")


class LexiconSettings(BaseModel):
    """Where the generator's word list comes from."""

    path: Path | None = None

    model_config = ConfigDict(extra="forbid")


class DateFormatConfig(BaseModel):
    """Per-call options for :func:`randkit.dates.format_date`."""

    utc: bool = False
    separator: str = ", "
    unique: bool = False
    locale: Literal["en", "fr"] = "fr"

    model_config = ConfigDict(extra="forbid", frozen=True)


class LoggingSettings(BaseModel):
    """Log level for the command line interface."""

    level: LogLevel
    level_env: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    generation: GenerationOptions
    random: RandomSettings
    lexicon: LexiconSettings
    dates: DateFormatConfig
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------

_BOOL = TypeAdapter(bool)
_LEVEL = TypeAdapter(LogLevel)


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variables.  Malformed values raise
    :class:`pydantic.ValidationError`.
    """

    with (
        importlib_resources.files("randkit.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    secure_env = cfg.generation.secure_env
    if secure_env in environ:
        cfg.generation.secure = _BOOL.validate_python(environ[secure_env])
    level_env = cfg.logging.level_env
    if level_env in environ:
        cfg.logging.level = _LEVEL.validate_python(environ[level_env].upper())

    return cfg


__all__ = [
    "ConfigModel",
    "GenerationSettings",
    "GenerationOptions",
    "RandomSettings",
    "LexiconSettings",
    "DateFormatConfig",
    "LoggingSettings",
    "Unit",
    "deep_merge_dicts",
    "load_config",
]
