"""Handler registry for command lookup and registration.

The registry maps command names to their handler callbacks. Names are
registered once for the lifetime of the registry: a second registration
under the same name is rejected and there is no removal.

Example:
    >>> registry = HandlerRegistry()
    >>> registry.register("bind", on_bind)
    >>> registry.get("bind") is on_bind
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quackit.errors import AlreadyRegisteredError
from quackit.utils.logger import get_logger

if TYPE_CHECKING:
    from quackit.protocols import CommandHandler

logger = get_logger(__name__)


class HandlerRegistry:
    """Mapping of command name to handler callback.

    Thread Safety:
        Not synchronized. Register handlers before parsing starts.
    """

    __slots__ = ("_by_name",)

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._by_name: dict[str, CommandHandler] = {}

    def register(self, name: str, handler: CommandHandler) -> None:
        """Register a handler for a command name.

        Args:
            name: Command name (e.g., "bind", "exec")
            handler: Callable implementing the CommandHandler protocol

        Raises:
            TypeError: If handler is not callable
            AlreadyRegisteredError: If name already has a handler
        """
        if not callable(handler):
            msg = f"Handler for '{name}' must be callable, got {type(handler).__name__}"
            raise TypeError(msg)

        if name in self._by_name:
            raise AlreadyRegisteredError(name)

        self._by_name[name] = handler
        logger.debug("Registered handler for %r", name)

    def get(self, name: str) -> CommandHandler | None:
        """Get handler for command name.

        Args:
            name: Command name

        Returns:
            Handler if registered, None otherwise
        """
        return self._by_name.get(name)

    def has(self, name: str) -> bool:
        """Check if command name is registered."""
        return name in self._by_name

    @property
    def names(self) -> frozenset[str]:
        """Get all registered command names."""
        return frozenset(self._by_name)

    def __contains__(self, name: object) -> bool:
        """Support 'name in registry' syntax."""
        return name in self._by_name

    def __len__(self) -> int:
        """Number of registered command names."""
        return len(self._by_name)
