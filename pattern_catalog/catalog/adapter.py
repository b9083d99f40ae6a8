"""Adapter: make an existing class usable through the interface a client expects."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.base.validation import require_instance
from pattern_catalog.domain.example import PatternCategory, PatternExample


class Target(ABC):
    """Interface the client expects."""

    @abstractmethod
    def request(self) -> str:
        pass


class Adaptee:
    """Existing class with an incompatible interface."""

    def specific_request(self) -> str:
        return "Adaptee's specific request"


class Adapter(Target):
    def __init__(self, adaptee: Adaptee):
        self._adaptee = require_instance(adaptee, Adaptee, "adaptee")

    def request(self) -> str:
        return self._adaptee.specific_request()


class AdapterClient:
    def execute_request(self, target: Target) -> str:
        return require_instance(target, Target, "target").request()


def execute() -> List[str]:
    adapter = Adapter(Adaptee())
    return [AdapterClient().execute_request(adapter)]


EXAMPLE = PatternExample(
    name="adapter",
    execute=execute,
    category=PatternCategory.STRUCTURAL,
    summary="Convert the interface of a class into the one clients expect",
)
