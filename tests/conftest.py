import os
import pytest
from unittest.mock import patch

from src.config.manager import reset_config_manager
from src.config.schemas import AppConfig, DemoConfig
from src.infrastructure.registry.pattern_registry import PatternRegistry
from src.patterns.creational.singleton import Singleton


@pytest.fixture(autouse=True)
def isolated_environment():
    """Keep PATTERNS_* variables and the cached config manager out of tests."""
    clean_env = {k: v for k, v in os.environ.items() if not k.startswith("PATTERNS_")}
    with patch.dict(os.environ, clean_env, clear=True):
        reset_config_manager()
        yield
    reset_config_manager()


@pytest.fixture
def fast_config():
    """Application config with no thread delay and a fixed memento seed."""
    return AppConfig(demo=DemoConfig(singleton_delay_ms=0, memento_seed=1234))


@pytest.fixture
def fresh_registry():
    """A new, empty pattern registry installed as the process singleton."""
    PatternRegistry.reset_instance()
    registry = PatternRegistry.get_instance()
    yield registry
    PatternRegistry.reset_instance()


@pytest.fixture
def reset_singleton():
    """Forget the demonstration singleton before and after a test."""
    Singleton._instance = None
    yield
    Singleton._instance = None
