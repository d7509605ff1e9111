"""Logging configuration schema."""
from pydantic import BaseModel, Field, field_validator

from src.config.defaults import LogDestination, LogLevel


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(LogLevel.WARNING.value, description="Root log level")
    destination: str = Field(LogDestination.STDERR.value, description="Where log records go")
    file_path: str = Field("logs/patterns.log", description="Log file path for file destinations")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(5, description="Number of rotated log files to keep")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        description="Record format for stdlib handlers",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalise the log level."""
        level = v.upper()
        if level not in LogLevel.__members__:
            raise ValueError(f"Log level must be one of {list(LogLevel.__members__)}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        valid = [d.value for d in LogDestination]
        if v not in valid:
            raise ValueError(f"Log destination must be one of {valid}")
        return v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 0:
            raise ValueError("Rotation settings must not be negative")
        return v
