"""Abstract Factory: families of related products created through one factory interface."""
from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.domain.base.validation import require_instance
from pattern_catalog.domain.example import PatternCategory, PatternExample


class Button(ABC):
    """Abstract product."""

    @abstractmethod
    def render(self) -> str:
        pass


class WindowsButton(Button):
    def render(self) -> str:
        return "Rendering a Windows button"


class MacOSButton(Button):
    def render(self) -> str:
        return "Rendering a MacOS button"


class GUIFactory(ABC):
    """Abstract factory for platform widgets."""

    @abstractmethod
    def create_button(self) -> Button:
        pass


class WindowsFactory(GUIFactory):
    def create_button(self) -> Button:
        return WindowsButton()


class MacOSFactory(GUIFactory):
    def create_button(self) -> Button:
        return MacOSButton()


class GUIClient:
    """Works with any GUIFactory without knowing the concrete platform."""

    def __init__(self, factory: GUIFactory):
        self._factory = require_instance(factory, GUIFactory, "factory")

    def create_button(self) -> str:
        button = self._factory.create_button()
        return button.render()


def execute() -> List[str]:
    clients = [GUIClient(WindowsFactory()), GUIClient(MacOSFactory())]
    return [client.create_button() for client in clients]


EXAMPLE = PatternExample(
    name="abstract-factory",
    execute=execute,
    category=PatternCategory.CREATIONAL,
    summary="Create families of related objects without naming their concrete classes",
)
