"""Application layer - Lazily populated fake objects."""

from typing import Any, Callable, Dict, Iterator
from unittest.mock import MagicMock

MockFactory = Callable[[], Callable[..., Any]]

default_mock_factory: MockFactory = MagicMock


class Fake:
    """Stand-in object whose attributes are mocks created on first access.

    Every attribute name maps to exactly one mock, so ``fake.send`` returns
    the same callable each time and calls on it can be asserted afterwards.
    The same mapping is reachable with item access for names that are not
    valid identifiers.

    Attributes:
        _factory: Zero-argument callable returning a fresh mock.
        _members: Mocks created so far, by attribute name.

    Example:
        >>> fake = Fake(MagicMock)
        >>> fake.send("hello")
        >>> fake.send.assert_called_once_with("hello")
    """

    def __init__(self, factory: MockFactory = default_mock_factory) -> None:
        self._factory = factory
        self._members: Dict[str, Any] = {}

    def __getattr__(self, name: str) -> Any:
        # private and dunder names never become mocks; use fake["_name"] for those
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    def __getitem__(self, name: str) -> Any:
        members = self._members
        if name not in members:
            members[name] = self._factory()
        return members[name]

    def __contains__(self, name: object) -> bool:
        return name in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._members))

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return f"<Fake members={sorted(self._members)}>"
