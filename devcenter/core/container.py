"""
Process-wide service container for devcenter.

bootstrap() registers the logger and the run reporter here; services look
them up by interface through resolve_or_default().
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Maps an interface type to the dependency-injector provider serving it."""

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the global container; the next lookup starts empty."""
        cls._instance = None

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Serve one shared instance for ``interface``.

        Args:
            interface: Key to register under
            implementation: Ready-made instance
            factory: Builds the instance on first resolve instead
        """
        if implementation is not None:
            provider: providers.Provider = providers.Object(implementation)
        elif factory is not None:
            provider = providers.Singleton(factory)
        else:
            raise ValueError(f"No implementation or factory given for {interface.__name__}")
        self._providers[interface] = provider

    def try_resolve(self, interface: type[T]) -> T | None:
        """Instance for ``interface``, or None before it is registered."""
        provider = self._providers.get(interface)
        return None if provider is None else provider()

    def resolve(self, interface: type[T]) -> T:
        """
        Instance for ``interface``.

        Raises:
            KeyError: If nothing is registered for it
        """
        if interface not in self._providers:
            raise KeyError(f"Nothing registered for {interface.__name__}")
        return self._providers[interface]()


def get_container() -> ServiceContainer:
    return ServiceContainer.get_instance()


def resolve(interface: type[T]) -> T:
    """Resolve from the global container."""
    return get_container().resolve(interface)


def try_resolve(interface: type[T]) -> T | None:
    return get_container().try_resolve(interface)
