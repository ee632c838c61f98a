import logging
from functools import reduce
from typing import Any, Callable, List, Sequence

from lattice_di.application.registry import Registry
from lattice_di.domain import IContainer, InvalidTypeError, TypeKey, get_metadata

logger = logging.getLogger(__name__)


class DependencyResolver:
    """Builds instances from constructor metadata.

    Picks the constructible for a key (its binding, or the key itself), runs
    the key's decorator chain over it, and calls it with explicit arguments
    where given and container-resolved dependencies everywhere else.
    """

    def get_constructible(self, registry: Registry, type_key: TypeKey) -> Any:
        """Return the binding for ``type_key``, or the key itself when unbound."""
        if registry.has_binding(type_key):
            return registry.get_binding(type_key)
        return type_key

    def decorate(self, constructible: Any, decorators: Sequence[Callable[[Any], Any]]) -> Any:
        """Apply ``decorators`` left to right; each one receives the previous result."""
        return reduce(lambda current, decorate_fn: decorate_fn(current), decorators, constructible)

    def build_arguments(self, container: IContainer, constructible: Any, args: Sequence[Any]) -> List[Any]:
        """Assemble positional constructor arguments.

        An explicit argument always wins, falsy values included. ``None`` at a
        position with a declared dependency is a placeholder asking for that
        dependency to be resolved.

        Args:
            container: Container used to resolve declared dependencies.
            constructible: The (decorated) class whose metadata is read.
            args: Explicit arguments, by position.

        Returns:
            One value per position, up to the longer of the declared
            dependencies and the explicit arguments.
        """
        types = get_metadata(constructible).constructor_types
        arguments = []
        for index in range(max(len(types), len(args))):
            if index < len(args) and not (args[index] is None and index < len(types)):
                arguments.append(args[index])
            else:
                arguments.append(container.resolve(types[index]))
        return arguments

    def instantiate(self, container: IContainer, registry: Registry, type_key: TypeKey, args: Sequence[Any] = ()) -> Any:
        """Create a new instance for ``type_key``.

        Raises:
            InvalidTypeError: If the bound constructible cannot be called.

        Example:
            >>> @inject(Bar, Baz)
            ... class Foo:
            ...     def __init__(self, bar, baz): ...
            >>> foo = resolver.instantiate(container, registry, Foo)
        """
        constructible = self.decorate(
            self.get_constructible(registry, type_key),
            registry.get_decorators(type_key),
        )
        if not callable(constructible):
            raise InvalidTypeError(constructible)

        arguments = self.build_arguments(container, constructible, args)
        logger.debug("Instantiating %r with %d argument(s)", constructible, len(arguments))
        return constructible(*arguments)
