"""Constructor metadata side channel.

Metadata lives on the class itself under ``__lattice_meta__``. Reads go
through the MRO, so a subclass sees its parent's metadata until it is
annotated; the first write on a subclass stores a new model on the subclass
only, leaving the parent untouched.
"""

import inspect
from typing import Any, Callable, Optional, Type, TypeVar, overload

from lattice_di.domain.models import ConstructorMetadata, TypeKey

META_ATTRIBUTE = "__lattice_meta__"

C = TypeVar("C", bound=type)

_EMPTY = ConstructorMetadata()


def get_metadata(target: Any) -> ConstructorMetadata:
    """Return the constructor metadata of ``target``.

    Strings, callables that are not classes and unannotated classes all yield
    the default metadata.
    """
    if not inspect.isclass(target):
        return _EMPTY
    metadata = getattr(target, META_ATTRIBUTE, None)
    if isinstance(metadata, ConstructorMetadata):
        return metadata
    return _EMPTY


def set_metadata(cls: Type, metadata: ConstructorMetadata) -> None:
    """Attach ``metadata`` to ``cls`` without touching any base class."""
    setattr(cls, META_ATTRIBUTE, metadata)


def inject(*type_keys: TypeKey) -> Callable[[C], C]:
    """Class decorator declaring constructor dependencies.

    Stacked decorators merge in the order they are applied, and a subclass
    extends whatever its parent declared.

    Example:
        >>> @inject(Database, Logger)
        ... class UserService:
        ...     def __init__(self, db, logger):
        ...         self.db = db
        ...         self.logger = logger
    """

    def decorate(cls: C) -> C:
        set_metadata(cls, get_metadata(cls).with_types(*type_keys))
        return cls

    return decorate


@overload
def injectable(cls: C) -> C: ...


@overload
def injectable(cls: None = ..., *, singleton: bool = ...) -> Callable[[C], C]: ...


def injectable(cls: Optional[C] = None, *, singleton: bool = False) -> Any:
    """Class decorator flagging how the container should treat ``cls``.

    Usable bare (``@injectable``) or with arguments (``@injectable(singleton=True)``).
    """

    def decorate(target: C) -> C:
        set_metadata(target, get_metadata(target).as_singleton(singleton))
        return target

    if cls is None:
        return decorate
    return decorate(cls)
