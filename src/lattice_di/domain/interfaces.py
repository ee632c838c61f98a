from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from lattice_di.domain.models import TypeKey


class IContainer(ABC):
    """Abstract interface for dependency injection container operations."""

    @abstractmethod
    def resolve(self, type_key: TypeKey, *args: Any) -> Any:
        """Resolve and return a value for the requested type key.

        Args:
            type_key: The class or string name to resolve.
            *args: Explicit constructor (or resolver) arguments, by position.
        """

    @abstractmethod
    def singleton(self, type_key: TypeKey, resolver_fn: Optional[Callable[..., Any]] = None) -> None:
        """Mark a type key as a singleton.

        Args:
            type_key: The key to cache and reuse.
            resolver_fn: Optional custom resolver (or class to bind) for the key.
        """

    @abstractmethod
    def instance(self, type_key: TypeKey, value: Any) -> None:
        """Register an existing value as the singleton instance of a type key."""

    @abstractmethod
    def bind(self, from_key: TypeKey, to_key: Any) -> None:
        """Construct ``to_key`` whenever ``from_key`` is requested."""

    @abstractmethod
    def resolver(self, type_key: TypeKey, fn: Callable[..., Any]) -> None:
        """Register a fully custom construction function for a type key."""

    @abstractmethod
    def decorator(self, type_key: TypeKey, decorate_fn: Callable[[Any], Any]) -> None:
        """Append a transformation applied to the constructible before instantiation."""

    @abstractmethod
    def hook(self, name: str, callback: Callable[[Any], Any]) -> None:
        """Register a callback under an extension point name."""

    @abstractmethod
    def walk(self, name: str, initial_value: Any) -> Any:
        """Fold ``initial_value`` through the callbacks registered under ``name``."""

    @abstractmethod
    def fork(self) -> "IContainer":
        """Create a child container inheriting the current singleton keys."""
