"""Decorator: add responsibilities to a coffee by wrapping it."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.base.validation import require_instance
from pattern_catalog.domain.example import PatternCategory, PatternExample


class Coffee(ABC):
    """Component interface."""

    @abstractmethod
    def cost(self) -> float:
        pass

    @abstractmethod
    def description(self) -> str:
        pass


class SimpleCoffee(Coffee):
    def cost(self) -> float:
        return 5.0

    def description(self) -> str:
        return "Simple Coffee"


class CoffeeDecorator(Coffee):
    """
    Base decorator: delegates to the wrapped coffee and adds its own
    price and description suffix on top.
    """

    extra_cost: float = 0.0
    label: str = ""

    def __init__(self, coffee: Coffee):
        self._coffee = require_instance(coffee, Coffee, "coffee")

    def cost(self) -> float:
        return self._coffee.cost() + self.extra_cost

    def description(self) -> str:
        return f"{self._coffee.description()}, {self.label}"


class MilkDecorator(CoffeeDecorator):
    extra_cost = 2.0
    label = "Milk"


class SugarDecorator(CoffeeDecorator):
    extra_cost = 1.0
    label = "Sugar"


class CoffeeClient:
    def order_coffee(self, coffee: Coffee) -> List[str]:
        require_instance(coffee, Coffee, "coffee")
        return [
            f"Cost: ${coffee.cost():g}",
            f"Description: {coffee.description()}",
        ]


def execute() -> List[str]:
    coffee = SugarDecorator(MilkDecorator(SimpleCoffee()))
    return CoffeeClient().order_coffee(coffee)


EXAMPLE = PatternExample(
    name="decorator",
    execute=execute,
    category=PatternCategory.STRUCTURAL,
    summary="Attach additional responsibilities to an object dynamically",
)
