"""Configuration manager - typed and dotted-key access to configuration."""
from typing import Any, Dict, Optional

from creational_patterns.config.loader import ConfigurationLoader
from creational_patterns.config.schemas.app_schema import AppConfig
from creational_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ConfigurationManager:
    """
    Holds the loaded configuration.

    ``config`` exposes the validated ``AppConfig``; ``get`` reads the raw
    dictionary with dot notation for nested keys.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to a JSON or YAML configuration file

        Raises:
            ConfigurationError: If the file cannot be read or the configuration is invalid
        """
        self.config_path = config_path
        self.raw_config = ConfigurationLoader.load(config_path)
        self._app_config = ConfigurationLoader.create_app_config(self.raw_config)

        logger.debug("Configuration loaded", config_path=config_path)

    @property
    def config(self) -> AppConfig:
        """Get typed application configuration."""
        return self._app_config

    def get_raw_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return ConfigurationLoader._deep_copy(self.raw_config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self.raw_config

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value


def get_config_manager(config_path: Optional[str] = None) -> ConfigurationManager:
    """Create a configuration manager for the given file."""
    return ConfigurationManager(config_path)
