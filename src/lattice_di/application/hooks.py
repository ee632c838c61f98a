"""Application layer - Named extension points."""

from functools import reduce
from typing import Any, Callable, Dict, Tuple

Callback = Callable[[Any], Any]


class HookRegistry:
    """Ordered callbacks grouped under string names.

    A caller publishes a value with ``walk`` and every module that registered
    a callback with ``hook`` gets to transform it, in registration order.

    Attributes:
        _hooks: Mapping from extension point name to its callbacks.
    """

    def __init__(self) -> None:
        self._hooks: Dict[str, Tuple[Callback, ...]] = {}

    def hook(self, name: str, callback: Callback) -> None:
        """Append ``callback`` to the extension point ``name``.

        Args:
            name: Extension point name, e.g. ``"namespace/extensions"``.
            callback: Receives the current value and returns the next one.
        """
        self._hooks = {**self._hooks, name: self._hooks.get(name, ()) + (callback,)}

    def walk(self, name: str, initial_value: Any) -> Any:
        """Fold ``initial_value`` through the callbacks of ``name``.

        Returns:
            The last callback's result, or ``initial_value`` itself when
            nothing is registered under ``name``.

        Example:
            >>> hooks = HookRegistry()
            >>> hooks.hook("menu", lambda items: [*items, "about"])
            >>> hooks.walk("menu", ["home"])
            ['home', 'about']
        """
        return reduce(lambda value, callback: callback(value), self._hooks.get(name, ()), initial_value)

    def callbacks(self, name: str) -> Tuple[Callback, ...]:
        return self._hooks.get(name, ())
