"""Shared helpers for demonstration entry points."""
from typing import Optional

from src.config.manager import get_config_manager
from src.config.schemas import AppConfig, DemoConfig


def resolve_demo_config(config: Optional[AppConfig] = None) -> DemoConfig:
    """Demo settings from an explicit AppConfig, else from the process-wide manager."""
    if config is not None:
        return config.demo
    return get_config_manager().get_typed(DemoConfig)
