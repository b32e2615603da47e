"""Application configuration with YAML + env vars + CLI override support."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from roster_settings.domain.exceptions import ConfigurationException
from roster_settings.domain.value_objects import PATH_NAME_LENGTH

logger = logging.getLogger(__name__)

VALID_FORMATS = ("text", "json")


@dataclass
class ReaderConfig:
    max_token_length: int = PATH_NAME_LENGTH
    encoding: str = "utf-8"


@dataclass
class OutputConfig:
    format: str = "text"  # text | json
    strict: bool = False


@dataclass
class LoggingConfig:
    verbose: bool = False


@dataclass
class AppConfig:
    reader: ReaderConfig = field(default_factory=ReaderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Mapping: env var name -> (section, field)
_ENV_MAPPING: dict[str, tuple[str, str]] = {
    "ROSTER_SETTINGS_MAX_TOKEN_LENGTH": ("reader", "max_token_length"),
    "ROSTER_SETTINGS_ENCODING": ("reader", "encoding"),
    "ROSTER_SETTINGS_FORMAT": ("output", "format"),
    "ROSTER_SETTINGS_STRICT": ("output", "strict"),
    "ROSTER_SETTINGS_VERBOSE": ("logging", "verbose"),
}


def load_config(
    config_path: str | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Load configuration with priority: YAML < env vars < CLI overrides.

    Args:
        config_path: Path to YAML config file. None to skip.
        cli_overrides: Dict of CLI overrides in format {"section.field": value}.
            None values are skipped (means CLI option was not provided).

    Raises:
        ConfigurationException: if the resulting values are out of range.
    """
    config = AppConfig()

    if config_path:
        _apply_yaml(config, config_path)

    _apply_env_vars(config)

    if cli_overrides:
        _apply_overrides(config, cli_overrides)

    _validate(config)
    return config


def _apply_yaml(config: AppConfig, config_path: str) -> None:
    """Load YAML file and apply values to config."""
    path = Path(config_path)
    if not path.is_file():
        logger.warning("Config file not found: %s, using defaults", config_path)
        return

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigurationException(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        logger.warning("Config file is not a valid YAML mapping: %s", config_path)
        return

    for section_name, section_data in data.items():
        if not isinstance(section_data, dict):
            continue
        section = getattr(config, section_name, None)
        if section is None:
            logger.debug("Unknown config section: %s", section_name)
            continue
        _set_section_fields(section, section_data)

    logger.info("Loaded config from %s", config_path)


def _apply_env_vars(config: AppConfig) -> None:
    """Apply environment variables to config."""
    for env_name, (section_name, field_name) in _ENV_MAPPING.items():
        value = os.environ.get(env_name)
        if value is None:
            continue
        section = getattr(config, section_name, None)
        if section is None:
            continue
        _set_field_value(section, field_name, value)


def _apply_overrides(config: AppConfig, overrides: dict[str, Any]) -> None:
    """Apply CLI overrides in format {'section.field': value}."""
    for key, value in overrides.items():
        if value is None:
            continue
        parts = key.split(".", 1)
        if len(parts) != 2:
            continue
        section_name, field_name = parts
        section = getattr(config, section_name, None)
        if section is None:
            continue
        _set_field_value(section, field_name, value)


def _set_section_fields(section: Any, data: dict[str, Any]) -> None:
    """Set fields on a section dataclass from a dict."""
    section_fields = {f.name: f for f in fields(section)}
    for key, value in data.items():
        if key in section_fields and value is not None:
            _set_field_value(section, key, value)


def _set_field_value(obj: Any, field_name: str, value: Any) -> None:
    """Set a field on a dataclass, coercing the value to the correct type."""
    field_info = {f.name: f for f in fields(obj)}.get(field_name)
    if field_info is None:
        return

    coerced = _coerce_value(field_name, value, field_info.type)
    object.__setattr__(obj, field_name, coerced)


def _coerce_value(field_name: str, value: Any, type_hint: str | type | None) -> Any:
    """Coerce a value to match the target type hint."""
    if value is None:
        return None

    type_str = str(type_hint) if type_hint else ""

    if "bool" in type_str:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value)

    if "int" in type_str:
        try:
            return int(value)
        except (ValueError, TypeError) as exc:
            raise ConfigurationException(
                f"Config field '{field_name}' expects an integer, got {value!r}"
            ) from exc

    return value


def _validate(config: AppConfig) -> None:
    if config.reader.max_token_length < 1:
        raise ConfigurationException(
            f"reader.max_token_length must be at least 1, got {config.reader.max_token_length}"
        )
    if config.output.format not in VALID_FORMATS:
        raise ConfigurationException(
            f"output.format must be one of {', '.join(VALID_FORMATS)}, got '{config.output.format}'"
        )
