"""Pattern Registry - Registry pattern for catalogue demonstrations.

Each demonstration registers its entry point under a kebab-case name so the
CLI can list, describe and run it without hard-coded module imports.
"""

import threading
from enum import Enum
from typing import Callable, Dict, List, Optional

from src.config.schemas import AppConfig
from src.domain.core.exceptions import PatternNotFoundError
from src.infrastructure.logging.logger import get_logger


class PatternCategory(str, Enum):
    """Gang-of-Four pattern families."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


_CATEGORY_ORDER = list(PatternCategory)

PatternRunner = Callable[[Optional[AppConfig]], int]


def normalize_name(name: str) -> str:
    """Normalize a pattern name for lookup ('Factory_Method' -> 'factory-method')."""
    return name.strip().lower().replace("_", "-").replace(" ", "-")


class PatternRegistration:
    """Container for pattern registration information."""

    def __init__(self,
                 name: str,
                 category: PatternCategory,
                 module: str,
                 summary: str,
                 runner: PatternRunner):
        """
        Initialize pattern registration.

        Args:
            name: Kebab-case pattern name (e.g., 'factory-method')
            category: Pattern family
            module: Dotted module path of the demonstration
            summary: One-line description of the pattern
            runner: Entry point taking an optional AppConfig, returning an exit code
        """
        self.name = name
        self.category = category
        self.module = module
        self.summary = summary
        self.runner = runner

    def to_dict(self) -> Dict[str, str]:
        """Serializable view used by the CLI formatters."""
        return {
            "name": self.name,
            "category": self.category.value,
            "module": self.module,
            "summary": self.summary,
        }


class PatternRegistry:
    """
    Registry for pattern demonstrations.

    Thread-safe singleton implementation.
    """

    _instance: Optional['PatternRegistry'] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize pattern registry."""
        self._registrations: Dict[str, PatternRegistration] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> 'PatternRegistry':
        """Get singleton instance of pattern registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton instance (used by tests and re-bootstrapping)."""
        with cls._lock:
            cls._instance = None

    def register(self,
                 name: str,
                 category: PatternCategory,
                 module: str,
                 summary: str,
                 runner: PatternRunner) -> None:
        """
        Register a demonstration.

        Raises:
            ValueError: If the name is already registered
        """
        key = normalize_name(name)
        with self._registration_lock:
            if key in self._registrations:
                raise ValueError(f"Pattern '{key}' is already registered")

            self._registrations[key] = PatternRegistration(
                name=key,
                category=PatternCategory(category),
                module=module,
                summary=summary,
                runner=runner,
            )
            self._logger.debug("Registered pattern", pattern=key, category=str(PatternCategory(category).value))

    def is_registered(self, name: str) -> bool:
        """Check whether a pattern is registered."""
        return normalize_name(name) in self._registrations

    def get(self, name: str) -> PatternRegistration:
        """
        Get registration for a pattern.

        Raises:
            PatternNotFoundError: If no pattern is registered under the name
        """
        registration = self._registrations.get(normalize_name(name))
        if registration is None:
            raise PatternNotFoundError(name)
        return registration

    def list(self, category: Optional[PatternCategory] = None) -> List[PatternRegistration]:
        """List registrations ordered by category then name."""
        registrations = [
            r for r in self._registrations.values()
            if category is None or r.category == PatternCategory(category)
        ]
        return sorted(registrations, key=lambda r: (_CATEGORY_ORDER.index(r.category), r.name))

    def names(self) -> List[str]:
        """Registered names in listing order."""
        return [r.name for r in self.list()]

    def run(self, name: str, config: Optional[AppConfig] = None) -> int:
        """Run a demonstration and return its exit code."""
        registration = self.get(name)
        self._logger.info("Running pattern demonstration", pattern=registration.name)
        return registration.runner(config)

    def clear(self) -> None:
        """Remove all registrations."""
        with self._registration_lock:
            self._registrations.clear()


def get_pattern_registry() -> PatternRegistry:
    """Get the process-wide pattern registry."""
    return PatternRegistry.get_instance()
