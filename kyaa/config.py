"""Utilities for reading kyaa configuration from YAML."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kyaa.errors import FlagRegistryError, KyaaConfigError
from kyaa.models import Arity, ExitStatuses, FlagDescriptor, FlagRegistry

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = 'kyaa.config.yaml'
CONFIG_ENV_VAR = 'KYAA_CONFIG'


class FlagDefinition(BaseModel):
    """A flag declared in kyaa.config.yaml."""

    model_config = ConfigDict(extra='forbid', populate_by_name=True)

    long_name: str = Field(alias='long')
    short_char: str | None = Field(default=None, alias='short')
    arity: Arity = 'none'
    help_text: str = Field(default='', alias='help')


class KyaaConfig(BaseModel):
    """Top-level configuration documented in kyaa.config.yaml."""

    model_config = ConfigDict(extra='forbid')

    statuses: ExitStatuses = Field(default_factory=ExitStatuses)
    verbose: bool = False
    flags: list[FlagDefinition] = Field(default_factory=list)


def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        msg = f'configuration file not found: {config_path}'
        raise KyaaConfigError(msg)

    try:
        with config_path.open() as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        msg = f'failed to parse YAML: {exc}'
        raise KyaaConfigError(msg) from exc

    if not isinstance(data, dict):
        msg = f'configuration root must be a mapping in {config_path}'
        raise KyaaConfigError(msg)

    return data


def load_config(config_path: Path) -> KyaaConfig:
    """Load kyaa configuration from YAML."""
    logger.debug('loading config from %s', config_path)
    config_data = _load_yaml_config(config_path)

    try:
        return KyaaConfig.model_validate(config_data)
    except ValidationError as exc:
        logger.debug('config validation failed: %s', exc.errors())
        msg = f'invalid kyaa configuration in {config_path}'
        raise KyaaConfigError(msg) from exc


def load_config_from_env(environ: Mapping[str, str] | None = None) -> KyaaConfig:
    """Load the file named by KYAA_CONFIG.

    When the variable is unset, ./kyaa.config.yaml is used if it exists, and
    the defaults otherwise.
    """
    environ = os.environ if environ is None else environ
    raw_path = environ.get(CONFIG_ENV_VAR)
    if raw_path:
        return load_config(Path(raw_path))

    default_path = Path.cwd() / DEFAULT_CONFIG_FILENAME
    if default_path.exists():
        return load_config(default_path)
    return KyaaConfig()


def build_registry(config: KyaaConfig) -> FlagRegistry:
    """Create a flag registry from the configured flag table."""
    try:
        descriptors = [
            FlagDescriptor(
                long_name=definition.long_name,
                short_char=definition.short_char,
                arity=definition.arity,
                help_text=definition.help_text,
            )
            for definition in config.flags
        ]
    except ValidationError as exc:
        msg = f'invalid flag definition: {exc.errors()[0]["msg"]}'
        raise KyaaConfigError(msg) from exc

    try:
        return FlagRegistry.of(*descriptors)
    except FlagRegistryError as exc:
        raise KyaaConfigError(str(exc)) from exc


__all__ = [
    'CONFIG_ENV_VAR',
    'DEFAULT_CONFIG_FILENAME',
    'FlagDefinition',
    'KyaaConfig',
    'build_registry',
    'load_config',
    'load_config_from_env',
]
