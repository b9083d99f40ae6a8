"""Pattern Registry - Registry pattern for runnable pattern examples.

New examples are added by registering them; nothing that looks examples up
(runner, CLI) needs to change when the catalog grows.
"""

import threading
from typing import Dict, Iterable, Iterator, List

from pattern_catalog.domain.base.exceptions import DuplicateNameError, InvalidArgumentError, NotFoundError
from pattern_catalog.domain.example import PatternExample
from pattern_catalog.infrastructure.logging.logger import get_logger


class PatternRegistry:
    """
    Registry mapping example names to PatternExample objects.

    Names are unique and registration order is preserved, so iterating the
    registry always yields examples in the order they were added.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._registrations: Dict[str, PatternExample] = {}
        self._registration_lock = threading.RLock()
        self._logger = get_logger(__name__)

    def register(self, example: PatternExample) -> None:
        """
        Register a pattern example.

        Args:
            example: The example to register

        Raises:
            InvalidArgumentError: If example is not a PatternExample
            DuplicateNameError: If an example with the same name is registered
        """
        if not isinstance(example, PatternExample):
            raise InvalidArgumentError("example", PatternExample.__name__, example)

        with self._registration_lock:
            if example.name in self._registrations:
                raise DuplicateNameError(example.name)
            self._registrations[example.name] = example

        self._logger.debug("Registered pattern example", name=example.name)

    def get(self, name: str) -> PatternExample:
        """
        Get a registered example by name.

        Raises:
            NotFoundError: If no example is registered under name
        """
        with self._registration_lock:
            example = self._registrations.get(name)
        if example is None:
            raise NotFoundError(name)
        return example

    def list_names(self) -> List[str]:
        """Get the registered names in registration order."""
        with self._registration_lock:
            return list(self._registrations.keys())

    def is_registered(self, name: str) -> bool:
        """Check if an example name is registered."""
        with self._registration_lock:
            return name in self._registrations

    def filter(self, names: Iterable[str]) -> List[PatternExample]:
        """
        Get the examples for a subset of names.

        The result follows registration order, not the order of names, and
        contains each example once.

        Raises:
            NotFoundError: If any of the names is not registered
        """
        wanted = set()
        for name in names:
            if not self.is_registered(name):
                raise NotFoundError(name)
            wanted.add(name)
        return [example for example in self if example.name in wanted]

    def clear_registrations(self) -> None:
        """Clear all registrations (mainly for testing)."""
        with self._registration_lock:
            self._registrations.clear()
        self._logger.debug("Cleared all pattern registrations")

    def __len__(self) -> int:
        with self._registration_lock:
            return len(self._registrations)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)

    def __iter__(self) -> Iterator[PatternExample]:
        with self._registration_lock:
            examples = list(self._registrations.values())
        return iter(examples)
