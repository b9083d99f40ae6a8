"""Configuration management for the pattern catalog."""
from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, cast

import yaml

from pattern_catalog.config.schemas import AppConfig, LoggingConfig, RunnerConfig, validate_config
from pattern_catalog.domain.base.exceptions import ConfigurationError

T = TypeVar("T")


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration comes from built-in defaults, optionally overlaid by a
    JSON or YAML file. The file is only read on first access.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        """Path of the configuration file, if any."""
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def get_typed(self, config_type: Type[T]) -> T:
        """
        Get a configuration section by its schema type.

        Args:
            config_type: AppConfig, LoggingConfig or RunnerConfig

        Returns:
            The matching configuration object

        Raises:
            ConfigurationError: If the type is not a known section
        """
        sections: Dict[Type, Any] = {
            AppConfig: self.app_config,
            LoggingConfig: self.app_config.logging,
            RunnerConfig: self.app_config.runner,
        }
        if config_type not in sections:
            raise ConfigurationError(f"Unknown configuration section: {config_type.__name__}")
        return cast(T, sections[config_type])

    def reload(self) -> None:
        """Drop the cached configuration so the next access reloads it."""
        with self._lock:
            self._app_config = None

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from defaults and the optional file."""
        if not self._config_file:
            return AppConfig()
        return validate_config(self._read_config_file(Path(self._config_file)))

    @staticmethod
    def _read_config_file(path: Path) -> Dict[str, Any]:
        """Parse a JSON or YAML configuration file into a mapping."""
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return data
