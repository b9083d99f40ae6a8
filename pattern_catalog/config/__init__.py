"""Configuration package with clean public API."""

from .schemas import AppConfig, LoggingConfig, OUTPUT_FORMATS, RunnerConfig, validate_config
from .manager import ConfigurationManager

__all__ = [
    "AppConfig",
    "validate_config",
    "LoggingConfig",
    "RunnerConfig",
    "OUTPUT_FORMATS",
    "ConfigurationManager",
]
