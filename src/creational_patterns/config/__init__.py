"""Configuration package - defaults, schemas and loading.

The manager is imported from ``creational_patterns.config.manager`` directly
because it depends on the logging infrastructure, which itself depends on the
schemas exported here.
"""

from .defaults import DEFAULT_CONFIG, LogDestination, LogLevel, OutputFormat
from .schemas import AppConfig, LoggingConfig, OutputConfig, PrototypeDemoConfig

__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG",
    "LogDestination",
    "LogLevel",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "PrototypeDemoConfig",
]
