"""Pattern example model - the uniform wrapper around one demonstration."""
from enum import Enum
from typing import Callable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PatternCategory(str, Enum):
    """GoF grouping of a design pattern."""

    CREATIONAL = "creational"
    STRUCTURAL = "structural"


class PatternExample(BaseModel):
    """
    A named, runnable demonstration of one design pattern.

    The model is frozen: once created (and registered) neither the name nor
    the execute callable can be reassigned.
    """
    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True
    )

    name: str = Field(..., min_length=1, description="Unique example name")
    execute: Callable[[], Sequence[str]] = Field(..., description="Produces the output lines")
    category: Optional[PatternCategory] = Field(None, description="GoF pattern category")
    summary: str = Field("", description="One-line description for listings")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names containing whitespace."""
        if any(ch.isspace() for ch in v):
            raise ValueError("Example name must not contain whitespace")
        return v

    def run(self) -> List[str]:
        """Execute the demonstration and return its output lines."""
        lines = self.execute()
        if isinstance(lines, str):
            return [lines]
        return [str(line) for line in lines]
