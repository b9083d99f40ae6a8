"""Prototype: new objects are made by copying an existing instance."""
import copy
from abc import ABC, abstractmethod
from typing import Any, List

from pattern_catalog.domain.base.validation import require_instance
from pattern_catalog.domain.example import PatternCategory, PatternExample


class Prototype(ABC):
    @abstractmethod
    def clone(self) -> "Prototype":
        pass


class ConcretePrototype(Prototype):
    """
    Prototype holding a single property.

    clone() builds a new instance from a deep copy of the state, so mutable
    properties are never shared between the original and the copy.
    """

    def __init__(self, value: Any):
        self._property = value

    def clone(self) -> "ConcretePrototype":
        return ConcretePrototype(copy.deepcopy(self._property))

    def get_property(self) -> Any:
        return self._property


class PrototypeClient:
    def create_copy(self, prototype: Prototype) -> Prototype:
        return require_instance(prototype, Prototype, "prototype").clone()


def execute() -> List[str]:
    original = ConcretePrototype("Original Property")
    clone = PrototypeClient().create_copy(original)
    return [
        f"Original Property: {original.get_property()}",
        f"Cloned Property: {clone.get_property()}",
    ]


EXAMPLE = PatternExample(
    name="prototype",
    execute=execute,
    category=PatternCategory.CREATIONAL,
    summary="Create new objects by copying a prototypical instance",
)
