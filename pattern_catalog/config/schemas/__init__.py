"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .logging_schema import LoggingConfig
from .runner_schema import OUTPUT_FORMATS, RunnerConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "LoggingConfig",
    "RunnerConfig",
    "OUTPUT_FORMATS",
]
