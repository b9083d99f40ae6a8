"""Singleton: one shared instance, reached only through an explicit accessor."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.base.validation import require_instance
from pattern_catalog.domain.example import PatternCategory, PatternExample
from pattern_catalog.infrastructure.patterns.singleton_access import get_singleton


class SingletonInterface(ABC):
    @abstractmethod
    def show_message(self) -> str:
        pass


class Greeter(SingletonInterface):
    """
    Process-wide greeter.

    Do not construct directly; use get_greeter(). The instance is created
    once by the singleton registry and then reused for the whole process.
    """

    def show_message(self) -> str:
        return "Hello from Singleton!"


def get_greeter() -> Greeter:
    """Accessor for the shared Greeter instance."""
    return get_singleton(Greeter)


class SingletonClient:
    def __init__(self, singleton: SingletonInterface):
        self._singleton = require_instance(singleton, SingletonInterface, "singleton")

    def run(self) -> str:
        return self._singleton.show_message()


def execute() -> List[str]:
    first = get_greeter()
    second = get_greeter()
    lines = [SingletonClient(first).run(), SingletonClient(second).run()]
    if first is second:
        lines.append("Both instances are the same.")
    else:
        lines.append("Instances are different.")
    return lines


EXAMPLE = PatternExample(
    name="singleton",
    execute=execute,
    category=PatternCategory.CREATIONAL,
    summary="Ensure a class has one instance with a single access point",
)
