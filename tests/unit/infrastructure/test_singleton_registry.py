"""Tests for process-wide singleton access."""

import threading

from pattern_catalog.infrastructure.patterns.singleton_access import get_singleton, reset_singletons
from pattern_catalog.infrastructure.patterns.singleton_registry import SingletonRegistry


class Counter:
    created = 0

    def __init__(self, start=0):
        Counter.created += 1
        self.value = start


class TestSingletonRegistry:
    """Test SingletonRegistry and get_singleton."""

    def setup_method(self):
        Counter.created = 0

    def test_registry_itself_is_a_singleton(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_get_singleton_creates_once(self):
        first = get_singleton(Counter)
        second = get_singleton(Counter)

        assert first is second
        assert Counter.created == 1

    def test_constructor_arguments_only_used_on_first_creation(self):
        first = get_singleton(Counter, start=5)
        second = get_singleton(Counter, start=99)

        assert second is first
        assert second.value == 5

    def test_reset_drops_instances(self):
        first = get_singleton(Counter)

        reset_singletons()

        assert not SingletonRegistry.get_instance().has(Counter)
        assert get_singleton(Counter) is not first

    def test_reset_single_class(self):
        registry = SingletonRegistry()
        counter = registry.get(Counter)
        marker = registry.get(object)

        registry.reset(Counter)

        assert not registry.has(Counter)
        assert registry.get(object) is marker
        assert registry.get(Counter) is not counter

    def test_concurrent_access_creates_single_instance(self):
        registry = SingletonRegistry()
        instances = []

        def worker():
            instances.append(registry.get(Counter))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(instance) for instance in instances}) == 1
        assert Counter.created == 1
