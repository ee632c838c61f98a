from typing import Any


def _describe(type_key: Any) -> str:
    return getattr(type_key, "__name__", repr(type_key))


class DIException(Exception):
    """Base exception for DI-related errors."""


class InvalidTypeError(DIException, TypeError):
    """Raised when a value that is neither a class nor a string is used as a type key.

    Attributes:
        type_key: The offending value.
    """

    def __init__(self, type_key: Any) -> None:
        self.type_key = type_key
        super().__init__(f"Invalid type key: {type_key!r}")


class TypeNotFoundError(DIException, LookupError):
    """Raised when a string type key has neither a binding nor an instance.

    String keys are never constructible on their own, so something must be
    registered under them before they can be resolved.

    Attributes:
        type_key: The string key that could not be found.
    """

    def __init__(self, type_key: str) -> None:
        self.type_key = type_key
        super().__init__(f'Type "{type_key}" does not exist')


class DecorationError(DIException):
    """Raised when a decorator cannot be attached to a type key.

    This occurs when:
    - The key has a custom resolver.
    - The key is a singleton whose instance was already created.

    Attributes:
        type_key: The key that was being decorated.
        reason: Why the decoration was rejected.
    """

    def __init__(self, type_key: Any, reason: str) -> None:
        self.type_key = type_key
        self.reason = reason
        super().__init__(f"{reason}: {_describe(type_key)}")
