"""Configuration settings and loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationInfo, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from regwalk.errors import ConfigValidationError, ErrorContext


class WalkSettings(BaseSettings):
    """Configuration for regwalk generation runs."""

    model_config = SettingsConfigDict(
        env_prefix="REGWALK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    seed: int | None = Field(default=None, description="Seed for reproducible walks")
    min_length: int | None = Field(default=None, description="Lower length bound")
    max_length: int | None = Field(default=None, description="Upper length bound")
    count: int = Field(default=1, description="Strings to generate per run")
    max_attempts: int = Field(default=10, description="Walks tried per bounded string")
    verbose: bool = False

    @field_validator("count", "max_attempts")
    @classmethod
    def validate_positive(cls, v: int, info: ValidationInfo) -> int:
        if v < 1:
            raise ConfigValidationError(
                message=f"{info.field_name} must be at least 1",
                field=info.field_name,
                value=v,
                expected=">= 1",
            )
        return v

    @field_validator("min_length", "max_length")
    @classmethod
    def validate_length(cls, v: int | None, info: ValidationInfo) -> int | None:
        if v is not None and v < 0:
            raise ConfigValidationError(
                message=f"{info.field_name} must be non-negative",
                field=info.field_name,
                value=v,
                expected=">= 0",
            )
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> WalkSettings:
        if (self.min_length is None) != (self.max_length is None):
            raise ConfigValidationError(
                message="min_length and max_length must be set together",
                field="min_length" if self.min_length is None else "max_length",
                value=None,
                context=ErrorContext(min_length=self.min_length, max_length=self.max_length),
            )
        if self.min_length is not None and self.max_length is not None:
            if self.min_length > self.max_length:
                raise ConfigValidationError(
                    message=f"min_length ({self.min_length}) exceeds max_length ({self.max_length})",
                    field="max_length",
                    value=self.max_length,
                    expected=f">= {self.min_length}",
                    context=ErrorContext(min_length=self.min_length, max_length=self.max_length),
                )
        return self

    @property
    def bounded(self) -> bool:
        """Whether runs use length-bounded generation."""
        return self.min_length is not None


def load_settings(config_path: str | Path | None = None, **overrides: Any) -> WalkSettings:
    """Load settings from file and environment.

    Priority: explicit overrides (CLI args) > env vars > config file > defaults.
    Overrides whose value is None are ignored.
    """
    config_data: dict[str, Any] = {}
    source = None

    if config_path is not None:
        config_path = Path(config_path)
        source = str(config_path)
        if config_path.exists():
            try:
                with open(config_path, encoding="utf-8") as f:
                    loaded = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigValidationError(
                    message=f"Cannot read config file: {e}",
                    context=ErrorContext(source=source),
                    cause=e,
                ) from e
            if not isinstance(loaded, dict):
                raise ConfigValidationError(
                    message="Config file must contain a mapping",
                    value=type(loaded).__name__,
                    context=ErrorContext(source=source),
                )
            config_data = loaded

    config_data.update(_get_env_overrides())
    config_data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return WalkSettings(**config_data)
    except PydanticValidationError as e:
        raise ConfigValidationError(
            message=f"Invalid configuration: {e.error_count()} error(s)",
            value=e.errors(include_url=False),
            context=ErrorContext(source=source),
            cause=e,
        ) from e


def _get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: dict[str, Any] = {}

    env_mappings = {
        "REGWALK_SEED": ("seed", int),
        "REGWALK_MIN_LENGTH": ("min_length", int),
        "REGWALK_MAX_LENGTH": ("max_length", int),
        "REGWALK_COUNT": ("count", int),
        "REGWALK_MAX_ATTEMPTS": ("max_attempts", int),
        "REGWALK_VERBOSE": ("verbose", lambda x: x.lower() in ("true", "1", "yes")),
    }

    for env_key, (key, converter) in env_mappings.items():
        value = os.environ.get(env_key)
        if value is not None:
            try:
                overrides[key] = converter(value)
            except ValueError as e:
                raise ConfigValidationError(
                    message=f"Invalid value for {env_key}: {value!r}",
                    field=key,
                    value=value,
                    context=ErrorContext(source=env_key),
                    cause=e,
                ) from e

    return overrides
