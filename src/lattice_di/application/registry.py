from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional, Tuple

from lattice_di.domain import TypeKey


class Registry:
    """Per-container registry of singleton flags, bindings, instances, resolvers and decorators.

    Each capability lives in its own mapping. Every write builds a new dict
    and rebinds the attribute, so a mapping handed out earlier (for example
    the singleton snapshot taken by a fork) never changes afterwards.

    Attributes:
        _singletons: Keys flagged as singletons.
        _bindings: Replacement constructibles per key.
        _instances: Cached singleton instances.
        _resolvers: Custom construction functions.
        _decorators: Ordered decorator chains.
    """

    def __init__(self) -> None:
        """Initialize the registry with empty mappings."""
        self._singletons: Dict[TypeKey, bool] = {}
        self._bindings: Dict[TypeKey, Any] = {}
        self._instances: Dict[TypeKey, Any] = {}
        self._resolvers: Dict[TypeKey, Callable[..., Any]] = {}
        self._decorators: Dict[TypeKey, Tuple[Callable[[Any], Any], ...]] = {}

    # Writes

    def mark_singleton(self, type_key: TypeKey) -> None:
        self._singletons = {**self._singletons, type_key: True}

    def set_binding(self, type_key: TypeKey, target: Any) -> None:
        self._bindings = {**self._bindings, type_key: target}

    def set_instance(self, type_key: TypeKey, value: Any) -> None:
        self._instances = {**self._instances, type_key: value}

    def set_resolver(self, type_key: TypeKey, fn: Callable[..., Any]) -> None:
        self._resolvers = {**self._resolvers, type_key: fn}

    def add_decorator(self, type_key: TypeKey, decorate_fn: Callable[[Any], Any]) -> None:
        chain = self._decorators.get(type_key, ()) + (decorate_fn,)
        self._decorators = {**self._decorators, type_key: chain}

    # Reads

    def is_singleton(self, type_key: TypeKey) -> bool:
        return self._singletons.get(type_key, False)

    def has_binding(self, type_key: TypeKey) -> bool:
        return type_key in self._bindings

    def get_binding(self, type_key: TypeKey) -> Optional[Any]:
        return self._bindings.get(type_key)

    def has_instance(self, type_key: TypeKey) -> bool:
        return type_key in self._instances

    def get_instance(self, type_key: TypeKey) -> Any:
        return self._instances[type_key]

    def get_resolver(self, type_key: TypeKey) -> Optional[Callable[..., Any]]:
        return self._resolvers.get(type_key)

    def get_decorators(self, type_key: TypeKey) -> Tuple[Callable[[Any], Any], ...]:
        return self._decorators.get(type_key, ())

    def singleton_keys(self) -> FrozenSet[TypeKey]:
        """Return the keys currently flagged as singletons, as an immutable set."""
        return frozenset(key for key, flagged in self._singletons.items() if flagged)

    @property
    def singletons(self) -> Mapping[TypeKey, bool]:
        return MappingProxyType(self._singletons)

    @property
    def bindings(self) -> Mapping[TypeKey, Any]:
        return MappingProxyType(self._bindings)

    @property
    def instances(self) -> Mapping[TypeKey, Any]:
        return MappingProxyType(self._instances)

    @property
    def resolvers(self) -> Mapping[TypeKey, Callable[..., Any]]:
        return MappingProxyType(self._resolvers)
