"""Factory Method: each factory decides which concrete product to create."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.base.validation import require_instance
from pattern_catalog.domain.example import PatternCategory, PatternExample


class Product(ABC):
    @abstractmethod
    def get_name(self) -> str:
        pass


class ConcreteProductA(Product):
    def get_name(self) -> str:
        return "Product A"


class ConcreteProductB(Product):
    def get_name(self) -> str:
        return "Product B"


class Factory(ABC):
    @abstractmethod
    def create_product(self) -> Product:
        pass


class ConcreteFactoryA(Factory):
    def create_product(self) -> Product:
        return ConcreteProductA()


class ConcreteFactoryB(Factory):
    def create_product(self) -> Product:
        return ConcreteProductB()


class FactoryClient:
    """Depends only on the Factory interface; the factory is injected."""

    def run(self, factory: Factory) -> str:
        product = require_instance(factory, Factory, "factory").create_product()
        return f"Created product: {product.get_name()}"


def execute() -> List[str]:
    client = FactoryClient()
    return [client.run(ConcreteFactoryA()), client.run(ConcreteFactoryB())]


EXAMPLE = PatternExample(
    name="factory",
    execute=execute,
    category=PatternCategory.CREATIONAL,
    summary="Let subclasses decide which class to instantiate",
)
