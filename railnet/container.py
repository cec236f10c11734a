"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It wires the network source, the segment store built from it, and the
query service.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap the network source
3. Lazy loading - the network is loaded on first resolution
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        finder = container.resolve(RouteFinderService)

        # Testing
        container = Container()
        container.register(NetworkSourcePort, lambda: InMemoryNetworkSource())

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Any singletons already built are dropped, since they may depend on
        the binding being replaced.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.clear()

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.network import CSVNetworkSource
        from .graph.store import SegmentStore, build_store
        from .ports.network import NetworkSourcePort
        from .services.route_finder import RouteFinderService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            NetworkSourcePort,
            lambda: CSVNetworkSource(config.network),
        )

        def create_store() -> SegmentStore:
            source = container.resolve(NetworkSourcePort)
            return build_store(source.load_segments(), source.load_step_free())

        container.register(SegmentStore, create_store)
        container.register(
            RouteFinderService,
            lambda: RouteFinderService(store=container.resolve(SegmentStore)),
        )

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
