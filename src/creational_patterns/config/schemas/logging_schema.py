"""Logging configuration schema."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from creational_patterns.config.defaults import LogDestination, LogLevel


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/creational_patterns.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum size of a log file before rotation")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Log file sizes and counts must not be negative")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Log level")
    destination: str = Field("console", description="Where logs are written: console, file or both")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        description="Format string for the standard library handlers",
    )
    json_output: bool = Field(False, description="Render structured log events as JSON")
    file: LogFileConfig = Field(default_factory=lambda: LogFileConfig())
    logger_name: Optional[str] = Field(None, description="Name of the application logger")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """
        Validate log level.

        Raises:
            ValueError: If the level is not a standard logging level
        """
        valid_levels = [level.value for level in LogLevel]
        level = v.upper()
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        valid_destinations = [destination.value for destination in LogDestination]
        if v not in valid_destinations:
            raise ValueError(f"Log destination must be one of {valid_destinations}")
        return v
