"""Tests for the pattern runner."""

from unittest.mock import Mock

import pytest

from pattern_catalog.application.runner import ExampleResult, PatternRunner, run_all, run_one
from pattern_catalog.catalog import decorator
from pattern_catalog.config.schemas import RunnerConfig
from pattern_catalog.domain.base.exceptions import NotFoundError
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.infrastructure.error.exception_handler import ErrorCode, ExceptionHandler


class TestRunOne:
    """Test running a single example."""

    def test_factory_scenario(self, registry, factory_example):
        registry.register(factory_example)

        assert run_one(registry, "factory") == [
            "Created product: Product A",
            "Created product: Product B",
        ]

    def test_missing_example(self, registry):
        with pytest.raises(NotFoundError):
            run_one(registry, "missing")

    def test_errors_propagate(self, registry, failing_example):
        registry.register(failing_example)

        with pytest.raises(RuntimeError, match="boom"):
            run_one(registry, "broken")


class TestRunAll:
    """Test running every example."""

    def test_runs_in_registration_order(self, registry):
        calls = []
        for name in ["second", "first"]:
            registry.register(PatternExample(name=name, execute=lambda n=name: calls.append(n) or [n]))

        results = run_all(registry)

        assert list(results) == ["second", "first"]
        assert calls == ["second", "first"]
        assert results["first"].lines == ["first"]

    def test_failure_is_isolated(self, registry, factory_example, failing_example):
        registry.register(failing_example)
        registry.register(factory_example)

        results = run_all(registry)

        assert not results["broken"].succeeded
        assert results["broken"].lines == []
        assert results["broken"].error.error_code == ErrorCode.INTERNAL_ERROR
        assert results["factory"].succeeded
        assert results["factory"].lines == ["Created product: Product A", "Created product: Product B"]

    def test_stop_on_error_reraises(self, registry, factory_example, failing_example):
        registry.register(failing_example)
        registry.register(factory_example)

        with pytest.raises(RuntimeError, match="boom"):
            run_all(registry, RunnerConfig(stop_on_error=True))

    def test_failures_go_through_error_handler(self, registry, failing_example):
        registry.register(failing_example)
        handler = Mock(spec=ExceptionHandler)
        handler.handle_error.side_effect = lambda error, context: ExceptionHandler().classify(error)

        results = PatternRunner(registry, error_handler=handler).run_all()

        handler.handle_error.assert_called_once()
        error, context = handler.handle_error.call_args.args
        assert isinstance(error, RuntimeError)
        assert context.example == "broken"
        assert context.operation == "run_example"
        assert results["broken"].error.error_code == ErrorCode.INTERNAL_ERROR

    def test_empty_registry(self, registry):
        assert run_all(registry) == {}


class TestRunSelected:
    """Test running a subset of examples."""

    def test_subset_in_registration_order(self, registry, factory_example):
        registry.register(PatternExample(name="decorator", execute=decorator.execute))
        registry.register(factory_example)

        results = PatternRunner(registry).run_selected(["factory", "decorator"])

        assert list(results) == ["decorator", "factory"]
        assert results["decorator"].lines[0] == "Cost: $8"

    def test_unknown_name_runs_nothing(self, registry):
        execute = Mock(return_value=["ran"])
        registry.register(PatternExample(name="known", execute=execute))

        with pytest.raises(NotFoundError):
            PatternRunner(registry).run_selected(["known", "unknown"])

        execute.assert_not_called()


class TestExampleResult:
    """Test ExampleResult serialization."""

    def test_to_dict_success(self):
        result = ExampleResult(name="factory", lines=["a"])

        assert result.to_dict() == {"name": "factory", "status": "ok", "lines": ["a"], "error": None}

    def test_to_dict_failure(self, registry, failing_example):
        registry.register(failing_example)

        data = run_all(registry)["broken"].to_dict()

        assert data["status"] == "failed"
        assert data["error"]["error_code"] == "INTERNAL_ERROR"
        assert data["error"]["message"] == "RuntimeError: boom"
