"""Registry infrastructure."""

from .pattern_registry import (
    PatternCategory,
    PatternRegistration,
    PatternRegistry,
    get_pattern_registry,
    normalize_name,
)

__all__ = [
    "PatternCategory",
    "PatternRegistration",
    "PatternRegistry",
    "get_pattern_registry",
    "normalize_name",
]
