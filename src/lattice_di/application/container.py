import inspect
import logging
import warnings
from typing import Any, Callable, FrozenSet, Iterable, Optional

from lattice_di.application.fakes import Fake, MockFactory, default_mock_factory
from lattice_di.application.hooks import HookRegistry
from lattice_di.application.registry import Registry
from lattice_di.application.resolver import DependencyResolver
from lattice_di.domain import (
    DecorationError,
    IContainer,
    TypeKey,
    TypeNotFoundError,
    get_metadata,
    validate_type_key,
)

logger = logging.getLogger(__name__)


class Container(IContainer):
    """Main dependency injection container.

    Maps type keys (classes or strings) to construction strategies and builds
    object graphs on demand. Supports singletons, bindings, custom resolvers,
    decorator chains, named hooks, fakes and forking.

    Attributes:
        _registry: Singleton flags, bindings, instances, resolvers and decorators.
        _resolver: Component responsible for instantiation and auto-wiring.
        _hooks: Named extension points.
        _parent: Container this one was forked from, if any.
        _inherited_singletons: Parent singleton keys captured at fork time.
        _fake_factory: Factory producing mock callables for ``fake``.
    """

    def __init__(
        self,
        parent: Optional["Container"] = None,
        inherited_singletons: Iterable[TypeKey] = (),
        fake_factory: Optional[MockFactory] = None,
    ) -> None:
        """Initialize the container and register it as its own instance.

        Args:
            parent: Parent container, set by ``fork``.
            inherited_singletons: Keys whose resolution is delegated to ``parent``.
            fake_factory: Mock factory used by ``fake``; defaults to ``MagicMock``.
        """
        self._registry = Registry()
        self._resolver = DependencyResolver()
        self._hooks = HookRegistry()
        self._parent = parent
        self._inherited_singletons: FrozenSet[TypeKey] = frozenset(inherited_singletons)
        self._fake_factory: MockFactory = fake_factory or default_mock_factory

        self.instance(Container, self)
        if type(self) is not Container:
            self.instance(type(self), self)

    @property
    def parent(self) -> Optional["Container"]:
        return self._parent

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def inherited_singletons(self) -> FrozenSet[TypeKey]:
        return self._inherited_singletons

    # Resolution

    def resolve(self, type_key: TypeKey, *args: Any) -> Any:
        """Resolve a type key to a value.

        Order of precedence: custom resolver, inherited singleton (forks
        only), local singleton cache, fresh instance.

        Args:
            type_key: Class or string name to resolve.
            *args: Explicit arguments. Passed verbatim to a resolver; used
                positionally as constructor arguments otherwise.

        Returns:
            The resolved value.

        Raises:
            InvalidTypeError: If ``type_key`` is neither a class nor a string.
            TypeNotFoundError: If a string key has nothing registered for it.

        Example:
            >>> container = Container()
            >>> service = container.resolve(UserService)
            >>> service = container.resolve(UserService, explicit_repository)
        """
        validate_type_key(type_key)

        resolver_fn = self._registry.get_resolver(type_key)
        if resolver_fn is not None:
            return resolver_fn(*args)

        if isinstance(type_key, str) and not self._is_known_name(type_key):
            raise TypeNotFoundError(type_key)

        self._register_as_singleton_if_flagged(type_key)

        if self._parent is not None and type_key in self._inherited_singletons:
            logger.debug("Delegating %r to parent container", type_key)
            return self._parent.resolve(type_key, *args)

        if self._registry.is_singleton(type_key):
            return self._get_singleton(type_key)

        return self._resolver.instantiate(self, self._registry, type_key, args)

    def make(self, type_key: TypeKey, *args: Any) -> Any:
        """Deprecated alias of ``resolve``."""
        warnings.warn(
            "Container.make() is deprecated, use Container.resolve() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.resolve(type_key, *args)

    def _is_known_name(self, name: str) -> bool:
        return (
            self._registry.has_binding(name)
            or self._registry.has_instance(name)
            or (self._parent is not None and name in self._inherited_singletons)
        )

    def _register_as_singleton_if_flagged(self, type_key: TypeKey) -> None:
        target = self._resolver.get_constructible(self._registry, type_key)
        if get_metadata(target).use_as_singleton and not self._registry.is_singleton(type_key):
            self.singleton(type_key)

    def _get_singleton(self, type_key: TypeKey) -> Any:
        if not self._registry.has_instance(type_key):
            logger.debug("Creating singleton instance for %r", type_key)
            self._registry.set_instance(type_key, self._resolver.instantiate(self, self._registry, type_key))
        return self._registry.get_instance(type_key)

    # Registration

    def singleton(self, type_key: TypeKey, resolver_fn: Optional[Callable[..., Any]] = None) -> None:
        """Mark ``type_key`` as a singleton.

        Args:
            type_key: Key to cache and reuse once created.
            resolver_fn: Optional construction strategy. A class is recorded as
                a binding, so the singleton is still cached and decoratable;
                any other callable is registered as a custom resolver.

        Example:
            >>> container.singleton(DatabaseConnection)
            >>> container.singleton("Greeter", EnglishGreeter)
            >>> container.singleton("clock", lambda: SystemClock())
        """
        validate_type_key(type_key)
        self._registry.mark_singleton(type_key)
        logger.debug("Registered singleton %r", type_key)

        if inspect.isclass(resolver_fn):
            self.bind(type_key, resolver_fn)
        elif resolver_fn is not None:
            self.resolver(type_key, resolver_fn)

    def instance(self, type_key: TypeKey, value: Any) -> None:
        """Register ``value`` as the singleton instance of ``type_key``.

        Example:
            >>> container.instance(Settings, Settings(debug=True))
            >>> container.instance("config", {"debug": True})
        """
        validate_type_key(type_key)
        self._registry.mark_singleton(type_key)
        self._registry.set_instance(type_key, value)

    def bind(self, from_key: TypeKey, to_key: Any) -> None:
        """Construct ``to_key`` whenever ``from_key`` is instantiated.

        Example:
            >>> container.bind(Repository, SqlRepository)
            >>> container.bind("Greeter", EnglishGreeter)
        """
        validate_type_key(from_key)
        self._registry.set_binding(from_key, to_key)
        logger.debug("Bound %r to %r", from_key, to_key)

    def resolver(self, type_key: TypeKey, fn: Callable[..., Any]) -> None:
        """Register a custom construction function for ``type_key``.

        The function receives the arguments given to ``resolve`` and its
        result is returned as-is: no caching, binding or decoration applies.

        Example:
            >>> container.resolver("greeting", lambda name: f"Hello, {name}")
            >>> container.resolve("greeting", "World")
            'Hello, World'
        """
        validate_type_key(type_key)
        self._registry.set_resolver(type_key, fn)
        logger.debug("Registered resolver for %r", type_key)

    def decorator(self, type_key: TypeKey, decorate_fn: Callable[[Any], Any]) -> None:
        """Append ``decorate_fn`` to the decorator chain of ``type_key``.

        Each decorator receives the constructible produced so far (the binding
        or the key itself for the first one) and returns the one to use next.

        Raises:
            DecorationError: If ``type_key`` has a custom resolver, is a
                singleton whose instance already exists, or is a singleton
                inherited from the parent container.

        Example:
            >>> container.decorator("Greeter", lambda Greeter: type("Loud", (Greeter,), {}))
        """
        validate_type_key(type_key)
        if self._registry.get_resolver(type_key) is not None:
            raise DecorationError(type_key, "Cannot decorate a resolver")
        if self._registry.is_singleton(type_key) and self._registry.has_instance(type_key):
            raise DecorationError(type_key, "Cannot decorate an instantiated singleton")
        if self._parent is not None and type_key in self._inherited_singletons:
            raise DecorationError(type_key, "Cannot decorate a singleton inherited from the parent container")

        self._registry.add_decorator(type_key, decorate_fn)
        logger.debug("Added decorator to %r", type_key)

    # Hooks

    def hook(self, name: str, callback: Callable[[Any], Any]) -> None:
        """Register ``callback`` under the extension point ``name``."""
        self._hooks.hook(name, callback)

    def walk(self, name: str, initial_value: Any) -> Any:
        """Fold ``initial_value`` through the callbacks of ``name``.

        Example:
            >>> container.hook("app/routes", lambda routes: {**routes, "/": "index"})
            >>> container.walk("app/routes", {})
            {'/': 'index'}
        """
        return self._hooks.walk(name, initial_value)

    # Fakes

    def set_fake_function_creator(self, factory: MockFactory) -> None:
        """Set the zero-argument factory producing mocks for ``fake``.

        Example:
            >>> container.set_fake_function_creator(lambda: Mock(return_value=None))
        """
        self._fake_factory = factory

    def fake(self, type_key: TypeKey) -> Fake:
        """Resolve ``type_key`` to a single shared ``Fake`` from now on.

        Returns:
            The fake, whose attributes are memoized mocks.

        Example:
            >>> container.fake("mailer")
            >>> container.resolve("mailer").send("to@example.com")
            >>> container.resolve("mailer").send.assert_called_once_with("to@example.com")
        """
        fake = Fake(self._fake_factory)
        self.resolver(type_key, lambda *args: fake)
        return fake

    # Forking

    def fork(self) -> "Container":
        """Create a child container.

        The child inherits the keys flagged as singletons here at this moment
        and delegates their resolution back to this container, so the pair
        shares one instance per key. Singletons registered later on either
        side stay private to that side. Only the immediate parent is
        consulted; a grandchild sees what the intermediate fork itself
        flagged before being forked. Hooks, bindings, resolvers and decorators
        are not carried over; the fork starts without any.

        Returns:
            New container of the same class with this container as parent.

        Example:
            >>> container.singleton(Database)
            >>> request_container = container.fork()
            >>> request_container.resolve(Database) is container.resolve(Database)
            True
        """
        inherited = self._registry.singleton_keys() - {Container, type(self)}
        logger.debug("Forking container with %d inherited singleton(s)", len(inherited))
        return type(self)(
            parent=self,
            inherited_singletons=inherited,
            fake_factory=self._fake_factory,
        )

    # Introspection

    def is_singleton(self, type_key: TypeKey) -> bool:
        """Return True if ``type_key`` is flagged as a singleton locally."""
        return self._registry.is_singleton(type_key)

    def has_instance(self, type_key: TypeKey) -> bool:
        """Return True if a singleton instance for ``type_key`` exists locally."""
        return self._registry.has_instance(type_key)

    def has_resolver(self, type_key: TypeKey) -> bool:
        return self._registry.get_resolver(type_key) is not None

    def get_binding(self, type_key: TypeKey) -> Optional[Any]:
        return self._registry.get_binding(type_key)
