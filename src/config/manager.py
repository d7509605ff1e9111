"""Unified configuration management for the catalogue."""
from __future__ import annotations

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import ValidationError as PydanticValidationError

from src.config.defaults import CONFIG_PATH_ENV_VAR, DEFAULT_CONFIG, ENV_OVERRIDES
from src.config.schemas import AppConfig, DemoConfig, LoggingConfig
from src.config.utils.env_expansion import expand_config_env_vars
from src.domain.core.exceptions import ConfigurationError

T = TypeVar("T")
logger = logging.getLogger(__name__)


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if key in target and isinstance(target[key], dict) and isinstance(value, dict):
            _deep_update(target[key], value)
        else:
            target[key] = value


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    Sources, lowest priority first:
    - DEFAULT_CONFIG
    - a JSON or YAML configuration file (explicit path or PATTERNS_CONFIG)
    - PATTERNS_* environment variables
    - explicit overrides passed by the caller (e.g. CLI flags)

    The merged dictionary is expanded for ``${VAR:default}`` references and
    validated into an ``AppConfig`` lazily on first access.
    """

    def __init__(self, config_path: Optional[str] = None,
                 overrides: Optional[Dict[str, Any]] = None):
        self._config_path = config_path or os.environ.get(CONFIG_PATH_ENV_VAR)
        self._overrides = overrides or {}
        self._lock = threading.RLock()
        self._raw_config: Optional[Dict[str, Any]] = None
        self._app_config: Optional[AppConfig] = None

    @property
    def raw_config(self) -> Dict[str, Any]:
        """Merged and expanded configuration dictionary."""
        if self._raw_config is None:
            with self._lock:
                if self._raw_config is None:
                    self._raw_config = self._load_raw_config()
        return self._raw_config

    @property
    def app_config(self) -> AppConfig:
        """Lazy load typed application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._create_app_config(self.raw_config)
        return self._app_config

    def _load_raw_config(self) -> Dict[str, Any]:
        config = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_path:
            _deep_update(config, self._load_config_file(self._config_path))

        _deep_update(config, self._load_env_vars())
        _deep_update(config, self._overrides)

        return expand_config_env_vars(config)

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from a JSON or YAML file."""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                if config_path.endswith((".yml", ".yaml")):
                    user_config = yaml.safe_load(f) or {}
                else:
                    user_config = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}")

        if not isinstance(user_config, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {config_path}")

        logger.debug("Loaded configuration file %s", config_path)
        return user_config

    def _load_env_vars(self) -> Dict[str, Any]:
        """Collect PATTERNS_* environment variable overrides."""
        env_config: Dict[str, Any] = {}
        for env_var, path in ENV_OVERRIDES.items():
            if env_var in os.environ:
                section, key = path
                env_config.setdefault(section, {})[key] = os.environ[env_var]
        return env_config

    @staticmethod
    def _create_app_config(config: Dict[str, Any]) -> AppConfig:
        try:
            return AppConfig(**config)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value: Any = self.raw_config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_typed(self, config_type: Type[T] = AppConfig) -> T:  # type: ignore[assignment]
        """Get typed configuration, either the whole AppConfig or one section."""
        type_mapping = {
            AppConfig: lambda c: c,
            LoggingConfig: lambda c: c.logging,
            DemoConfig: lambda c: c.demo,
        }
        if config_type not in type_mapping:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")
        return type_mapping[config_type](self.app_config)

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._raw_config = None
            self._app_config = None


_config_manager: Optional[ConfigurationManager] = None
_config_manager_lock = threading.Lock()


def get_config_manager(config_path: Optional[str] = None) -> ConfigurationManager:
    """Get the process-wide configuration manager, creating it on first use."""
    global _config_manager
    if _config_manager is None:
        with _config_manager_lock:
            if _config_manager is None:
                _config_manager = ConfigurationManager(config_path)
    return _config_manager


def reset_config_manager() -> None:
    """Drop the process-wide configuration manager."""
    global _config_manager
    with _config_manager_lock:
        _config_manager = None
