"""Exception classes for Quackit.

Provides standardized exceptions for error handling throughout Quackit.

Fatal errors (ParseError and its subclasses) abort the whole top-level
parse, including any queued content still waiting to be drained.
AlreadyRegisteredError is local to handler registration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quackit.command import Command
    from quackit.location import SourceLocation


class QuackitError(Exception):
    """Base exception for all Quackit errors.

    Subclass this for specific error categories.
    """

    pass


class AlreadyRegisteredError(QuackitError):
    """A handler is already registered under this command name.

    Registration never overwrites; the first handler stays in place.
    """

    def __init__(self, name: str) -> None:
        """Initialize registration error.

        Args:
            name: The command name that was registered twice
        """
        self.name = name
        super().__init__(f"Handler for command '{name}' is already registered")


class ParseError(QuackitError):
    """Error during config parsing.

    Raised when the engine encounters input or a handler it cannot proceed with.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @classmethod
    def _at(cls, location: SourceLocation | None) -> dict[str, object]:
        if location is None:
            return {}
        return {
            "lineno": location.lineno,
            "col_offset": location.col_offset,
            "source_file": location.source_file,
        }


class MalformedCommandError(ParseError):
    """A command does not start with a Word token.

    Example: `"foo" bar` starts with a quoted string.
    """

    def __init__(self, command: Command) -> None:
        """Initialize malformed command error.

        Args:
            command: The offending command
        """
        self.command = command
        super().__init__(
            f"Command must start with a word, got {command.head}",
            **self._at(command.location),
        )


class HandlerFailedError(ParseError):
    """A registered handler raised while processing its command.

    The handler's exception is available as ``cause`` and as ``__cause__``.
    """

    def __init__(
        self,
        name: str,
        cause: BaseException,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize handler failure.

        Args:
            name: Command name whose handler failed
            cause: The exception raised by the handler
            location: Where the command started (optional)
        """
        self.name = name
        self.cause = cause
        super().__init__(f"Handler for '{name}' failed: {cause}", **self._at(location))


class QueueDepthExceededError(ParseError):
    """Queued content nested deeper than ParseConfig.max_queue_depth.

    Usually a config that execs itself, directly or through a cycle.
    """

    def __init__(self, depth: int, location: SourceLocation | None = None) -> None:
        """Initialize depth error.

        Args:
            depth: The configured maximum nesting depth
            location: Location of the command that queued the content (optional)
        """
        self.depth = depth
        super().__init__(
            f"Queued content nested deeper than {depth} levels", **self._at(location)
        )


class ParseInProgressError(QuackitError):
    """parse() was called on an engine that is already parsing.

    Handlers should use queue_content() to feed more text instead.
    """

    pass
