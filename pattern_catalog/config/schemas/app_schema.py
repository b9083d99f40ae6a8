"""Main application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pattern_catalog.domain.base.exceptions import ConfigurationError
from .logging_schema import LoggingConfig
from .runner_schema import RunnerConfig


class AppConfig(BaseModel):
    """Application configuration."""
    model_config = ConfigDict(extra="forbid")

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    runner: RunnerConfig = Field(default_factory=lambda: RunnerConfig())


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """
    Validate raw configuration data.

    Args:
        data: Configuration mapping, typically parsed from a JSON or YAML file

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: If the data does not match the schema
    """
    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e
