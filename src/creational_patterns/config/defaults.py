# src/creational_patterns/config/defaults.py
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    CONSOLE = "console"
    FILE = "file"
    BOTH = "both"


class OutputFormat(str, Enum):
    """Console output format enumeration."""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


CONFIG_FILE_ENV_VAR = "PATTERNS_CONFIG_FILE"

DEFAULT_CONFIG = {
    "version": "1.0.0",

    # Logging configuration
    "logging": {
        "level": "${LOG_LEVEL:WARNING}",
        "destination": "${LOG_DESTINATION:console}",
        "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        "json_output": "${LOG_JSON:false}",
        "file": {
            "path": "${PATTERNS_LOGDIR:logs}/creational_patterns.log",
            "max_size_mb": 10,
            "backup_count": 5,
        },
    },

    # Prototype demonstration
    "prototype": {
        "primitive": "${PROTOTYPE_PRIMITIVE:245}",
    },

    # Factory demonstrations
    "abstract_factory": {
        "default_variant": None,
    },
    "factory_method": {
        "default_variant": None,
    },

    # Console output
    "output": {
        "format": "${PATTERNS_OUTPUT_FORMAT:text}",
    },
}
