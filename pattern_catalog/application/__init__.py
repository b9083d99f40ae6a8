"""Application layer - running pattern examples."""

from .runner import ExampleResult, PatternRunner, run_all, run_one

__all__ = ["ExampleResult", "PatternRunner", "run_all", "run_one"]
