"""Context attached to errors raised while running pattern examples."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class ExceptionContext:
    """
    Where an error happened in the catalog.

    operation names the action that failed (for example "run_example"),
    layer the part of the application it ran in, and example the pattern
    example involved, when there is one.
    """

    def __init__(self,
                 operation: str,
                 layer: str = "application",
                 example: Optional[str] = None,
                 **extra: Any):
        self.operation = operation
        self.layer = layer
        self.example = example
        self.occurred_at = datetime.now(timezone.utc)
        self.extra = extra

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into log fields; example is omitted when unset."""
        data: Dict[str, Any] = {
            "operation": self.operation,
            "layer": self.layer,
            "occurred_at": self.occurred_at.isoformat(),
        }
        if self.example is not None:
            data["example"] = self.example
        data.update(self.extra)
        return data
