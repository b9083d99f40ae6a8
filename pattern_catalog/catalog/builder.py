"""Builder: a director drives a step-by-step construction through a builder interface."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.base.validation import require_instance
from pattern_catalog.domain.example import PatternCategory, PatternExample


class Product:
    """The object under construction."""

    def __init__(self):
        self._parts: List[str] = []

    def add_part(self, part: str) -> None:
        self._parts.append(part)

    @property
    def parts(self) -> List[str]:
        return list(self._parts)

    def list_parts(self) -> str:
        return ", ".join(self._parts)


class Builder(ABC):
    """Steps needed to build a Product."""

    @abstractmethod
    def build_part_a(self) -> None:
        pass

    @abstractmethod
    def build_part_b(self) -> None:
        pass

    @abstractmethod
    def get_result(self) -> Product:
        pass


class ConcreteBuilder(Builder):
    """
    Builds products part by part.

    get_result() hands out the finished product and starts a fresh one, so
    one builder can be reused for several constructions.
    """

    def __init__(self):
        self._product = Product()

    def reset(self) -> None:
        self._product = Product()

    def build_part_a(self) -> None:
        self._product.add_part("Part A")

    def build_part_b(self) -> None:
        self._product.add_part("Part B")

    def get_result(self) -> Product:
        result = self._product
        self.reset()
        return result


class Director:
    """Knows the order in which the build steps run."""

    def construct(self, builder: Builder) -> None:
        require_instance(builder, Builder, "builder")
        builder.build_part_a()
        builder.build_part_b()


class BuilderClient:
    def build_product(self, builder: Builder) -> str:
        Director().construct(builder)
        product = builder.get_result()
        return f"Product parts: {product.list_parts()}"


def execute() -> List[str]:
    return [BuilderClient().build_product(ConcreteBuilder())]


EXAMPLE = PatternExample(
    name="builder",
    execute=execute,
    category=PatternCategory.CREATIONAL,
    summary="Separate the construction of an object from its representation",
)
