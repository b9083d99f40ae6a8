"""Bridge: shapes (abstraction) and drawing APIs (implementation) vary independently."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.base.validation import require_instance
from pattern_catalog.domain.example import PatternCategory, PatternExample


class DrawingAPI(ABC):
    """Implementor interface."""

    @abstractmethod
    def draw(self) -> str:
        pass


class DrawingAPI1(DrawingAPI):
    def draw(self) -> str:
        return "DrawingAPI1"


class DrawingAPI2(DrawingAPI):
    def draw(self) -> str:
        return "DrawingAPI2"


class Shape(ABC):
    """Abstraction holding a reference to its implementor."""

    def __init__(self, implementation: DrawingAPI):
        self._implementation = require_instance(implementation, DrawingAPI, "implementation")

    @abstractmethod
    def draw(self) -> str:
        pass


class Circle(Shape):
    def draw(self) -> str:
        return f"Circle drawn using {self._implementation.draw()}"


class Square(Shape):
    def draw(self) -> str:
        return f"Square drawn using {self._implementation.draw()}"


def execute() -> List[str]:
    shapes: List[Shape] = [Circle(DrawingAPI1()), Square(DrawingAPI2())]
    return [shape.draw() for shape in shapes]


EXAMPLE = PatternExample(
    name="bridge",
    execute=execute,
    category=PatternCategory.STRUCTURAL,
    summary="Decouple an abstraction from its implementation so both can vary",
)
