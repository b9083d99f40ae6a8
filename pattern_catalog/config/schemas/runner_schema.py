"""Runner configuration schema."""
from pydantic import BaseModel, ConfigDict, Field, field_validator

OUTPUT_FORMATS = ["text", "json", "yaml", "table"]


class RunnerConfig(BaseModel):
    """Configuration for running pattern examples."""
    model_config = ConfigDict(extra="forbid")

    stop_on_error: bool = Field(False, description="Abort run_all on the first failing example")
    default_format: str = Field("text", description="Default CLI output format")

    @field_validator("default_format")
    @classmethod
    def validate_default_format(cls, v: str) -> str:
        """Validate output format."""
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Output format must be one of {OUTPUT_FORMATS}")
        return v
