"""Protocols for Quackit.

Defines the contract for command handler callbacks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from quackit.engine import Quackit
    from quackit.tokens import Token


class CommandHandler(Protocol):
    """Callback invoked when a command with a registered name is dispatched.

    Handlers run synchronously, before the scanner moves past the command.
    They receive the engine itself so they can call ``queue_content()`` or
    read ``current_position``. Failure is reported by raising; the return
    value is ignored.

    Example:
        >>> def bind(engine, name, arguments):
        ...     key, action = arguments
        ...     engine.queue_content(action.text)

    """

    def __call__(
        self,
        engine: Quackit,
        name: str,
        arguments: tuple[Token, ...],
    ) -> Any:
        """Handle one command.

        Args:
            engine: The engine dispatching the command
            name: Command name (text of the first token)
            arguments: Remaining tokens of the command
        """
        ...
