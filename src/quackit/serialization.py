"""Command serialization: JSON round-trip for parsed commands.

Converts commands to/from JSON-compatible dicts. Useful for:
- Dumping parsed configs from the command line
- Caching parsed configs to disk
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from quackit import parse
    from quackit.serialization import to_json, from_json

    commands = parse('bind g "impulse 101"')
    restored = from_json(to_json(commands))
    assert restored == commands

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from quackit.command import Command
from quackit.location import SourceLocation
from quackit.tokens import QuotedString, Token, Word

# Registry of token type names to classes for deserialization
_TOKEN_TYPES: dict[str, type[Word] | type[QuotedString]] = {
    "Word": Word,
    "QuotedString": QuotedString,
}


def to_dict(command: Command) -> dict[str, Any]:
    """Convert a command to a JSON-compatible dict.

    Args:
        command: Parsed command.

    Returns:
        Dict with ``_type``, ``tokens`` and ``location``.

    """
    return {
        "_type": "Command",
        "tokens": [_token_to_dict(token) for token in command.tokens],
        "location": _location_to_dict(command.location),
    }


def _token_to_dict(token: Token) -> dict[str, Any]:
    return {"_type": type(token).__name__, "text": token.text}


def _location_to_dict(location: SourceLocation) -> dict[str, Any]:
    return {
        "lineno": location.lineno,
        "col_offset": location.col_offset,
        "offset": location.offset,
        "source_file": location.source_file,
    }


def from_dict(data: dict[str, Any]) -> Command:
    """Reconstruct a command from a dict.

    Args:
        data: Dict as produced by to_dict.

    Returns:
        Command (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    if data.get("_type") != "Command":
        msg = f"Expected serialized Command, got _type={data.get('_type')!r}"
        raise ValueError(msg)

    tokens = tuple(_token_from_dict(item) for item in data.get("tokens", ()))
    raw_location = data.get("location")
    if raw_location is None:
        return Command(tokens)
    location = SourceLocation(
        lineno=raw_location["lineno"],
        col_offset=raw_location["col_offset"],
        offset=raw_location.get("offset", 0),
        source_file=raw_location.get("source_file"),
    )
    return Command(tokens, location)


def _token_from_dict(data: dict[str, Any]) -> Token:
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized token"
        raise ValueError(msg)

    token_cls = _TOKEN_TYPES.get(type_name)
    if token_cls is None:
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg)
    return token_cls(data["text"])


def to_json(commands: Iterable[Command], *, indent: int | None = None) -> str:
    """Serialize commands to a JSON array string.

    Args:
        commands: Commands to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps([to_dict(c) for c in commands], sort_keys=True, indent=indent)


def from_json(data: str) -> tuple[Command, ...]:
    """Deserialize commands from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Tuple of commands.

    Raises:
        ValueError: If the JSON is not an array of commands.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected JSON array, got {type(raw).__name__}"
        raise ValueError(msg)
    return tuple(from_dict(item) for item in raw)
