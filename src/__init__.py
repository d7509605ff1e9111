"""Design Patterns Catalogue - Root Package.

Self-contained demonstrations of the classic object-oriented design patterns,
each runnable on its own and printing a fixed narration of its calls.

Key Components:
    - patterns: the demonstrations, grouped by creational, structural and
      behavioral families
    - config: defaults, schemas and the configuration manager
    - infrastructure: structured logging and the pattern registry
    - cli: command-line launcher for listing and running demonstrations

Usage:
    >>> python -m src.patterns.structural.decorator
    >>> patterns list --category behavioral
    >>> patterns run --all --singleton-delay-ms 0
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
