"""
Quackit: Quake/Valve .cfg parser for Python

A single-pass tokenizer and command dispatcher for Quake-style config
text: commands separated by newlines or semicolons, made of words and
"quoted strings", with `#`, `//` and `/* */` comments.

Quick Start:
    >>> from quackit import parse
    >>> [cmd.values() for cmd in parse('say "test"; sv_cheats 0')]
    [('say', 'test'), ('sv_cheats', '0')]

Handlers:
    >>> from quackit import Quackit
    >>> engine = Quackit()
    >>> engine.register_handler("bind", lambda q, name, args: print(args[0].text))
    >>> engine.parse('bind g "god"')
    g

Nested configs:
    Handlers may call ``engine.queue_content(text)``; queued text is parsed
    after the current scan and its commands follow in ``parsed_commands``.
    See quackit.handlers.make_exec_handler for a file-backed ``exec``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from quackit.command import Command
from quackit.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from quackit.engine import QueuedContent, Quackit
from quackit.errors import (
    AlreadyRegisteredError,
    HandlerFailedError,
    MalformedCommandError,
    ParseError,
    ParseInProgressError,
    QuackitError,
    QueueDepthExceededError,
)
from quackit.handlers import ExecHandler, make_exec_handler
from quackit.lexer import Scanner, ScanState
from quackit.location import SourceLocation
from quackit.registry import HandlerRegistry
from quackit.serialization import from_dict, from_json, to_dict, to_json
from quackit.tokens import QuotedString, Token, TokenKind, Word

if TYPE_CHECKING:
    from quackit.protocols import CommandHandler

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    handlers: Mapping[str, CommandHandler] | None = None,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> tuple[Command, ...]:
    """Parse config text and return the flattened commands.

    Args:
        source: Config text
        handlers: Optional mapping of command name to handler
        source_file: Optional source file path for error messages
        config: Parse configuration (ambient config if None)

    Returns:
        Commands in dispatch order, queued content included

    Example:
        >>> parse("bind g god")[0].arguments
        (Word(text='g'), Word(text='god'))
    """
    engine = Quackit(config=config)
    for name, handler in (handlers or {}).items():
        engine.register_handler(name, handler)
    engine.parse(source, source_file=source_file)
    return engine.parsed_commands


__all__ = [
    # Core
    "Quackit",
    "parse",
    "Scanner",
    "ScanState",
    "HandlerRegistry",
    "QueuedContent",
    # Model
    "Command",
    "QuotedString",
    "SourceLocation",
    "Token",
    "TokenKind",
    "Word",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Errors
    "AlreadyRegisteredError",
    "HandlerFailedError",
    "MalformedCommandError",
    "ParseError",
    "ParseInProgressError",
    "QuackitError",
    "QueueDepthExceededError",
    # Handlers
    "ExecHandler",
    "make_exec_handler",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    "__version__",
]
