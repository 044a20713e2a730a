# Standard library imports
from typing import Any, Callable, Dict


class BaseContainer:
    """
    Minimal dependency injection container.

    Keys are usually classes; singletons are returned as registered, factories
    are called on every get().
    """

    def __init__(self) -> None:
        self._singletons: Dict[Any, Any] = {}
        self._factories: Dict[Any, Callable[[], Any]] = {}

    def register_singleton(self, key: Any, instance: Any) -> None:
        self._singletons[key] = instance

    def register_factory(self, key: Any, factory: Callable[[], Any]) -> None:
        self._factories[key] = factory

    def get(self, key: Any) -> Any:
        """
        Resolve a dependency

        Raises:
            ValueError: If nothing is registered under the key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise ValueError(f"No registration found for {name}")
