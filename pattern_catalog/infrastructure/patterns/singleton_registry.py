"""Process-wide registry of singleton instances."""
import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

T = TypeVar("T")


class SingletonRegistry:
    """
    Holds at most one instance per registered class for the whole process.

    The registry itself is created once through get_instance(). Instances
    are created lazily on the first get() for a class; later calls return
    the same object and ignore any constructor arguments.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._instances_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the process-wide singleton registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of singleton_class, creating it on first use.

        Args:
            singleton_class: The class to get an instance of
            *args: Constructor arguments, only used on first creation
            **kwargs: Constructor keyword arguments, only used on first creation

        Returns:
            The single instance of singleton_class
        """
        instance = self._instances.get(singleton_class)
        if instance is None:
            with self._instances_lock:
                instance = self._instances.get(singleton_class)
                if instance is None:
                    instance = singleton_class(*args, **kwargs)
                    self._instances[singleton_class] = instance
        return cast(T, instance)

    def has(self, singleton_class: Type) -> bool:
        """Check whether an instance of singleton_class has been created."""
        return singleton_class in self._instances

    def reset(self, singleton_class: Optional[Type] = None) -> None:
        """Forget one instance, or every instance when no class is given."""
        with self._instances_lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)
