# src/config/defaults.py
from typing import Dict, Any
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
    FILE = "file"
    STDERR = "stderr"
    STDOUT = "stdout"
    BOTH = "both"


class OutputFormat(str, Enum):
    """CLI output format enumeration."""
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"
    LIST = "list"


# Environment variable pointing at a configuration file
CONFIG_PATH_ENV_VAR = "PATTERNS_CONFIG"

# Direct environment overrides, highest priority
ENV_OVERRIDES = {
    "PATTERNS_LOG_LEVEL": ("logging", "level"),
    "PATTERNS_LOG_DESTINATION": ("logging", "destination"),
    "PATTERNS_SINGLETON_DELAY_MS": ("demo", "singleton_delay_ms"),
    "PATTERNS_MEMENTO_SEED": ("demo", "memento_seed"),
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",

    # Logging goes to stderr so demonstration transcripts on stdout stay clean
    "logging": {
        "level": "${PATTERNS_LOG_LEVEL:WARNING}",
        "destination": "stderr",
        "file_path": "${PATTERNS_LOG_DIR:logs}/patterns.log",
        "max_size_mb": 10,
        "backup_count": 5,
        "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    },

    # Knobs for the few demonstrations that depend on time or randomness
    "demo": {
        "singleton_delay_ms": 1000,
        "memento_state_length": 30,
        "memento_seed": None,
    },
}
