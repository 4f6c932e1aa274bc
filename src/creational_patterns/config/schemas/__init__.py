"""Configuration schemas."""

from .app_schema import AppConfig, validate_config
from .demo_schema import FactoryDemoConfig, OutputConfig, PrototypeDemoConfig
from .logging_schema import LogFileConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "FactoryDemoConfig",
    "LogFileConfig",
    "LoggingConfig",
    "OutputConfig",
    "PrototypeDemoConfig",
    "validate_config",
]
