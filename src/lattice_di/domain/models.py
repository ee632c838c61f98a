import inspect
from typing import Any, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from lattice_di.domain.exceptions import InvalidTypeError

TypeKey = Union[type, str]


def is_type_key(value: Any) -> bool:
    """Return True if ``value`` can be used as a registry key (a class or a string)."""
    return inspect.isclass(value) or isinstance(value, str)


def validate_type_key(value: Any) -> TypeKey:
    """Return ``value`` unchanged if it is a valid type key.

    Raises:
        InvalidTypeError: If ``value`` is neither a class nor a string.
    """
    if not is_type_key(value):
        raise InvalidTypeError(value)
    return value


class ConstructorMetadata(BaseModel):
    """Value object describing how a class wants to be constructed.

    Attributes:
        use_as_singleton: Register the class as a singleton the first time it is resolved.
        constructor_types: Type keys resolved for each constructor position, in order.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    use_as_singleton: bool = Field(
        default=False,
        description="Whether the container should cache and reuse the instance.",
    )
    constructor_types: Tuple[Any, ...] = Field(
        default=(),
        description="Type keys of the constructor parameters, one per position.",
    )

    def with_types(self, *type_keys: TypeKey) -> "ConstructorMetadata":
        """Return a copy with ``type_keys`` appended to the constructor types."""
        return self.model_copy(update={"constructor_types": self.constructor_types + tuple(type_keys)})

    def as_singleton(self, flag: bool = True) -> "ConstructorMetadata":
        """Return a copy with the singleton flag set to ``flag``."""
        return self.model_copy(update={"use_as_singleton": flag})
