"""Design pattern demonstrations.

Each demonstration module exposes ``main(config=None) -> int`` that prints a
scripted narration of its participants' calls and returns 0. The catalogue
below lets the registry discover them without importing every module up front.
"""
import importlib
from typing import List, Optional, Tuple

from src.infrastructure.registry.pattern_registry import (
    PatternCategory,
    PatternRegistry,
    get_pattern_registry,
)

CREATIONAL = PatternCategory.CREATIONAL
STRUCTURAL = PatternCategory.STRUCTURAL
BEHAVIORAL = PatternCategory.BEHAVIORAL

# (name, category, module, summary)
PATTERN_CATALOGUE: List[Tuple[str, PatternCategory, str, str]] = [
    ("builder", CREATIONAL, "src.patterns.creational.builder",
     "Construct complex objects step by step through a director"),
    ("factory-method", CREATIONAL, "src.patterns.creational.factory_method",
     "Let subclasses decide which product to instantiate"),
    ("prototype", CREATIONAL, "src.patterns.creational.prototype",
     "Create objects by cloning registered prototypes"),
    ("singleton", CREATIONAL, "src.patterns.creational.singleton",
     "Share one lazily created instance across threads"),
    ("adapter", STRUCTURAL, "src.patterns.structural.adapter",
     "Make an incompatible interface usable by the client"),
    ("bridge", STRUCTURAL, "src.patterns.structural.bridge",
     "Vary abstraction and implementation independently"),
    ("composite", STRUCTURAL, "src.patterns.structural.composite",
     "Treat leaves and trees of objects uniformly"),
    ("decorator", STRUCTURAL, "src.patterns.structural.decorator",
     "Wrap objects to extend their behavior"),
    ("flyweight", STRUCTURAL, "src.patterns.structural.flyweight",
     "Share intrinsic state between many objects"),
    ("command", BEHAVIORAL, "src.patterns.behavioral.command",
     "Encapsulate requests as objects run by an invoker"),
    ("iterator", BEHAVIORAL, "src.patterns.behavioral.iterator",
     "Traverse a container without exposing its internals"),
    ("mediator", BEHAVIORAL, "src.patterns.behavioral.mediator",
     "Route component interactions through a mediator"),
    ("memento", BEHAVIORAL, "src.patterns.behavioral.memento",
     "Snapshot and roll back an object's state"),
    ("observer", BEHAVIORAL, "src.patterns.behavioral.observer",
     "Notify subscribers when a subject changes"),
    ("state", BEHAVIORAL, "src.patterns.behavioral.state",
     "Change behavior by switching state objects"),
    ("strategy", BEHAVIORAL, "src.patterns.behavioral.strategy",
     "Swap interchangeable algorithms at runtime"),
    ("template-method", BEHAVIORAL, "src.patterns.behavioral.template_method",
     "Fix an algorithm's skeleton, override its steps"),
    ("visitor", BEHAVIORAL, "src.patterns.behavioral.visitor",
     "Add operations to components via double dispatch"),
]


def register_patterns(registry: Optional[PatternRegistry] = None) -> PatternRegistry:
    """Register every demonstration that is not registered yet."""
    registry = registry or get_pattern_registry()
    for name, category, module_path, summary in PATTERN_CATALOGUE:
        if registry.is_registered(name):
            continue
        module = importlib.import_module(module_path)
        registry.register(name, category, module_path, summary, module.main)
    return registry


__all__ = ["PATTERN_CATALOGUE", "register_patterns"]
