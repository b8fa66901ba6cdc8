"""Quackit engine: scanning, synchronous dispatch and queued content.

The engine drives a Scanner over the input and, for each command the
scanner yields, looks up and runs the registered handler before scanning
continues. Handlers may call ``queue_content()`` to schedule more text
(an ``exec``-style include). Queued text is parsed after the scan that
queued it finishes, in the order it was queued, and each entry is fully
resolved (including whatever it queues in turn) before the next one starts.

Result order is therefore a pre-order walk of the include tree:

    top-level commands
    entry 1 commands
        entry 1.1 commands ...
    entry 2 commands
    ...

Thread Safety:
Not synchronized. One parse at a time per engine; handlers get exclusive
access to the engine while they run.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, TYPE_CHECKING

from quackit.config import ParseConfig, get_parse_config
from quackit.errors import (
    HandlerFailedError,
    MalformedCommandError,
    ParseInProgressError,
    QuackitError,
    QueueDepthExceededError,
)
from quackit.lexer import Scanner
from quackit.location import SourceLocation
from quackit.registry import HandlerRegistry
from quackit.tokens import Word
from quackit.utils.logger import get_logger

if TYPE_CHECKING:
    from quackit.command import Command
    from quackit.protocols import CommandHandler

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class QueuedContent:
    """Text waiting to be parsed after the scan that queued it.

    Attributes:
        text: Raw config text
        depth: Nesting depth (top-level text is 0)
        source_file: Optional name used in locations and errors
        origin: Cursor of the scan that queued it, if any
    """

    text: str
    depth: int
    source_file: str | None = None
    origin: SourceLocation | None = None


class Quackit:
    """Quake/Valve .cfg parser instance.

    Usage:
        >>> engine = Quackit()
        >>> engine.register_handler("exec", lambda q, name, args: q.queue_content("god"))
        >>> engine.parse('exec "cheats"')
        >>> [cmd.name for cmd in engine.parsed_commands]
        ['exec', 'god']

    """

    __slots__ = (
        "_config",
        "_registry",
        "_parsed",
        "_parsing",
        "_scanner",
        "_queue",
        "_depth",
        "_held",
        "_position",
    )

    def __init__(
        self,
        config: ParseConfig | None = None,
        registry: HandlerRegistry | None = None,
    ) -> None:
        """Initialize engine.

        Args:
            config: Parse configuration (snapshot of the ambient config if None)
            registry: Handler registry to dispatch through (empty if None)
        """
        self._config = config if config is not None else get_parse_config()
        self._registry = registry if registry is not None else HandlerRegistry()
        self._parsed: tuple[Command, ...] = ()
        self._parsing = False

        # Per-scan state, only set while a parse is running
        self._scanner: Scanner | None = None
        self._queue: list[QueuedContent] | None = None
        self._depth = 0

        # Content queued while no parse was running
        self._held: list[QueuedContent] = []

        self._position = SourceLocation.start()

    def __repr__(self) -> str:
        return (
            f"Quackit(handlers={sorted(self._registry.names)!r}, "
            f"parsed={len(self._parsed)})"
        )

    # =========================================================================
    # Public API
    # =========================================================================

    @property
    def config(self) -> ParseConfig:
        """Parse configuration this engine was created with."""
        return self._config

    @property
    def handlers(self) -> HandlerRegistry:
        """Handler registry used for dispatch."""
        return self._registry

    @property
    def parsed_commands(self) -> tuple[Command, ...]:
        """Flattened commands from the last successful parse.

        Empty after a failed parse.
        """
        return self._parsed

    @property
    def current_position(self) -> SourceLocation:
        """Cursor of the scan currently dispatching.

        While a handler runs this is the position of the scan that yielded
        its command (a queued entry's own text when inside queued content).
        Once parse() returns it is the end of the top-level text, or the
        point where scanning stopped if the parse failed.
        """
        if self._scanner is not None:
            return self._scanner.position
        return self._position

    @property
    def depth(self) -> int:
        """Queue nesting depth of the scan currently dispatching (0 = top level)."""
        return self._depth

    def register_handler(self, name: str, handler: CommandHandler) -> None:
        """Register a handler for a command name.

        Raises:
            AlreadyRegisteredError: If name already has a handler
        """
        self._registry.register(name, handler)

    add_handler = register_handler

    def queue_content(self, text: str, *, source_file: str | None = None) -> None:
        """Schedule text to be parsed as if appended to the current input.

        Called from a handler, the text is parsed once the current scan
        finishes. Called while no parse is running, it is held and parsed
        right after the next top-level scan.

        Args:
            text: Config text
            source_file: Optional name for locations and error messages
        """
        if self._queue is None:
            self._held.append(QueuedContent(text, 1, source_file))
            logger.debug("Held %d characters for the next parse", len(text))
            return

        origin = self._scanner.position if self._scanner is not None else None
        self._queue.append(QueuedContent(text, self._depth + 1, source_file, origin))
        logger.debug("Queued %d characters at depth %d", len(text), self._depth + 1)

    def parse(self, text: str, *, source_file: str | None = None) -> None:
        """Parse config text, dispatching handlers as commands complete.

        Replaces ``parsed_commands`` with the flattened result.

        Args:
            text: Config text
            source_file: Optional source file path for locations and errors

        Raises:
            MalformedCommandError: A command starts with a quoted string
            HandlerFailedError: A handler raised
            QueueDepthExceededError: Queued content nested too deep
            ParseInProgressError: Called from inside a handler of this engine
        """
        if self._parsing:
            msg = "parse() called while a parse is already running; use queue_content()"
            raise ParseInProgressError(msg)

        self._parsing = True
        self._parsed = ()
        held, self._held = self._held, []
        try:
            commands = self._drain(QueuedContent(text, 0, source_file), held)
        except Exception:
            if self._scanner is not None:
                self._position = self._scanner.position
            raise
        finally:
            self._scanner = None
            self._queue = None
            self._depth = 0
            self._parsing = False

        self._parsed = tuple(commands)
        logger.debug("Parsed %d commands", len(commands))

    def parse_stream(self, reader: IO[str] | IO[bytes], *, source_file: str | None = None) -> None:
        """Read a stream fully, then parse it.

        Bytes are decoded with ``config.encoding``. The stream's ``name`` is
        used as source_file when none is given.

        Args:
            reader: Readable text or binary stream
            source_file: Optional source file path for locations and errors
        """
        data = reader.read()
        if isinstance(data, bytes):
            data = data.decode(self._config.encoding)
        if source_file is None:
            name = getattr(reader, "name", None)
            source_file = name if isinstance(name, str) else None
        self.parse(data, source_file=source_file)

    # =========================================================================
    # Queue draining
    # =========================================================================

    def _drain(self, root: QueuedContent, held: list[QueuedContent]) -> list[Command]:
        """Parse root and everything it queues, depth-first, in queue order."""
        commands: list[Command] = []
        stack = [root]
        while stack:
            entry = stack.pop()
            queued = self._scan(entry, commands)
            if entry is root:
                self._position = self._scanner.position
                queued = held + queued
            # Reversed so the first queued entry is popped next
            stack.extend(reversed(queued))
        return commands

    def _scan(self, entry: QueuedContent, commands: list[Command]) -> list[QueuedContent]:
        """Scan one entry, dispatching and collecting its commands.

        Returns:
            Content queued by handlers during this scan.
        """
        max_depth = self._config.max_queue_depth
        if entry.depth > max_depth:
            raise QueueDepthExceededError(max_depth, entry.origin)

        queue: list[QueuedContent] = []
        self._scanner = Scanner(entry.text, entry.source_file)
        self._queue = queue
        self._depth = entry.depth

        for command in self._scanner.scan():
            self._dispatch(command)
            commands.append(command)

        if queue:
            logger.debug("Draining %d queued entries at depth %d", len(queue), entry.depth + 1)
        return queue

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _dispatch(self, command: Command) -> None:
        """Run the handler registered for a command, if any.

        Raises:
            MalformedCommandError: First token is not a Word
            HandlerFailedError: Handler raised something other than QuackitError
        """
        head = command.head
        if not isinstance(head, Word):
            raise MalformedCommandError(command)

        handler = self._registry.get(head.text)
        if handler is None:
            return

        logger.debug("Dispatching %r at %s", head.text, command.location)
        try:
            handler(self, head.text, command.arguments)
        except QuackitError:
            raise
        except Exception as exc:
            raise HandlerFailedError(head.text, exc, command.location) from exc
