"""Configuration loading - defaults, optional file, environment expansion."""
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from creational_patterns.config.defaults import CONFIG_FILE_ENV_VAR, DEFAULT_CONFIG
from creational_patterns.config.schemas.app_schema import AppConfig, validate_config
from creational_patterns.config.utils.env_expansion import expand_config_env_vars
from creational_patterns.domain.core.exceptions import ConfigurationError


class ConfigurationLoader:
    """
    Builds the raw configuration dictionary.

    Precedence, lowest first:
        1. DEFAULT_CONFIG
        2. The configuration file (explicit path, else $PATTERNS_CONFIG_FILE)
        3. Environment variables referenced by ${VAR} placeholders
    """

    SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> Dict[str, Any]:
        config = cls._deep_copy(DEFAULT_CONFIG)

        path = config_path or os.environ.get(CONFIG_FILE_ENV_VAR)
        if path:
            cls._merge_config(config, cls._load_file(path))

        return expand_config_env_vars(config)

    @classmethod
    def create_app_config(cls, raw_config: Dict[str, Any]) -> AppConfig:
        """Validate a raw configuration dictionary into the typed AppConfig."""
        try:
            return validate_config(raw_config)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e

    @classmethod
    def _load_file(cls, config_path: str) -> Dict[str, Any]:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        suffix = path.suffix.lower()
        if suffix not in cls.SUPPORTED_SUFFIXES:
            raise ConfigurationError(
                f"Unsupported configuration file type '{suffix}', expected one of {list(cls.SUPPORTED_SUFFIXES)}"
            )

        try:
            with path.open("r", encoding="utf-8") as f:
                if suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")
        return data

    @classmethod
    def _merge_config(cls, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Merge ``override`` into ``base`` in place, recursing into nested dicts."""
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                cls._merge_config(base[key], value)
            else:
                base[key] = value

    @staticmethod
    def _deep_copy(config: Dict[str, Any]) -> Dict[str, Any]:
        return copy.deepcopy(config)
