"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .demo_schema import FactoryDemoConfig, OutputConfig, PrototypeDemoConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    prototype: PrototypeDemoConfig = Field(default_factory=lambda: PrototypeDemoConfig())
    abstract_factory: FactoryDemoConfig = Field(default_factory=lambda: FactoryDemoConfig())
    factory_method: FactoryDemoConfig = Field(default_factory=lambda: FactoryDemoConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    return AppConfig(**config)
