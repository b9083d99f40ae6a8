"""Runner - executes registered pattern examples and collects their output."""
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from pattern_catalog.config.schemas.runner_schema import RunnerConfig
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.infrastructure.error.context import ExceptionContext
from pattern_catalog.infrastructure.error.exception_handler import (
    ErrorResponse,
    ExceptionHandler,
    get_exception_handler,
)
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry


class ExampleResult(BaseModel):
    """Outcome of running one example."""

    name: str
    lines: List[str] = Field(default_factory=list)
    error: Optional[ErrorResponse] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary for output formatting."""
        return {
            "name": self.name,
            "status": "ok" if self.succeeded else "failed",
            "lines": list(self.lines),
            "error": self.error.to_dict() if self.error else None,
        }


class PatternRunner:
    """
    Runs examples from a registry.

    run_all() isolates failures: an example that raises is reported on its
    own result and the remaining examples still run, unless the runner is
    configured with stop_on_error.
    """

    def __init__(self,
                 registry: PatternRegistry,
                 config: Optional[RunnerConfig] = None,
                 error_handler: Optional[ExceptionHandler] = None):
        self._registry = registry
        self._config = config or RunnerConfig()
        self._error_handler = error_handler or get_exception_handler()
        self._logger = get_logger(__name__)

    def run_one(self, name: str) -> List[str]:
        """
        Run a single example.

        Raises:
            NotFoundError: If name is not registered
        """
        example = self._registry.get(name)
        self._logger.info("Running pattern example", name=name)
        return example.run()

    def run_all(self) -> Dict[str, ExampleResult]:
        """Run every registered example in registration order."""
        return self._run_examples(list(self._registry))

    def run_selected(self, names: Iterable[str]) -> Dict[str, ExampleResult]:
        """
        Run a subset of examples, in registration order.

        Raises:
            NotFoundError: If any name is not registered; nothing is run
        """
        return self._run_examples(self._registry.filter(names))

    def _run_examples(self, examples: List[PatternExample]) -> Dict[str, ExampleResult]:
        self._logger.info("Starting pattern run", count=len(examples))
        results: Dict[str, ExampleResult] = {}
        for example in examples:
            results[example.name] = self._run_isolated(example)

        failed = [name for name, result in results.items() if not result.succeeded]
        self._logger.info(
            "Finished pattern run",
            count=len(results),
            failed=len(failed),
        )
        return results

    def _run_isolated(self, example: PatternExample) -> ExampleResult:
        try:
            return ExampleResult(name=example.name, lines=example.run())
        except Exception as e:
            if self._config.stop_on_error:
                raise
            context = ExceptionContext("run_example", layer="application", example=example.name)
            error = self._error_handler.handle_error(e, context)
            return ExampleResult(name=example.name, error=error)


def run_all(registry: PatternRegistry, config: Optional[RunnerConfig] = None) -> Dict[str, ExampleResult]:
    """Run every example in registry, isolating failures per example."""
    return PatternRunner(registry, config).run_all()


def run_one(registry: PatternRegistry, name: str) -> List[str]:
    """Run the named example and return its output lines."""
    return PatternRunner(registry).run_one(name)
