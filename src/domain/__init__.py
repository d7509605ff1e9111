"""
Domain Layer - shared kernel of the catalogue.

- core/exceptions.py: error taxonomy raised by demonstrations, configuration
  and the registry
"""

from .core.exceptions import (
    ConfigurationError,
    DomainException,
    MementoRestoreError,
    PatternConfigurationError,
    PatternNotFoundError,
)

__all__ = [
    "ConfigurationError",
    "DomainException",
    "MementoRestoreError",
    "PatternConfigurationError",
    "PatternNotFoundError",
]
