"""Composite: leaves and groups of graphics share one interface."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.base.validation import require_instance
from pattern_catalog.domain.example import PatternCategory, PatternExample


class Graphic(ABC):
    """Component interface. draw() returns the lines it renders."""

    @abstractmethod
    def draw(self) -> List[str]:
        pass


class Circle(Graphic):
    def draw(self) -> List[str]:
        return ["Drawing a circle"]


class Square(Graphic):
    def draw(self) -> List[str]:
        return ["Drawing a square"]


class CompositeGraphic(Graphic):
    """A graphic made of child graphics, drawn in the order they were added."""

    def __init__(self):
        self._graphics: List[Graphic] = []

    def add_graphic(self, graphic: Graphic) -> None:
        self._graphics.append(require_instance(graphic, Graphic, "graphic"))

    def remove_graphic(self, graphic: Graphic) -> None:
        self._graphics.remove(graphic)

    @property
    def children(self) -> List[Graphic]:
        return list(self._graphics)

    def draw(self) -> List[str]:
        lines = ["Drawing a composite graphic:"]
        for graphic in self._graphics:
            lines.extend(graphic.draw())
        return lines


class CompositeClient:
    def render(self, graphic: Graphic) -> List[str]:
        return require_instance(graphic, Graphic, "graphic").draw()


def execute() -> List[str]:
    composite = CompositeGraphic()
    composite.add_graphic(Circle())
    composite.add_graphic(Square())
    return CompositeClient().render(composite)


EXAMPLE = PatternExample(
    name="composite",
    execute=execute,
    category=PatternCategory.STRUCTURAL,
    summary="Treat individual objects and compositions of objects uniformly",
)
