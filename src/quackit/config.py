"""ContextVar-based parse configuration for Quackit.

Provides context-local configuration using Python's ContextVars (PEP 567).
An engine snapshots the ambient config when it is created, so changing the
context afterwards does not affect engines that already exist.

Usage:
    # Explicit config
    engine = Quackit(config=ParseConfig(max_queue_depth=8))

    # Ambient config for everything created in a block
    with parse_config_context(ParseConfig(max_queue_depth=8)):
        engine = Quackit()

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        max_queue_depth: How deep queued content may nest before the parse
            fails with QueueDepthExceededError. Top-level text is depth 0.
        encoding: Codec used by parse_stream() when the stream yields bytes

    """

    max_queue_depth: int = 64
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.max_queue_depth < 0:
            msg = f"max_queue_depth must be >= 0, got {self.max_queue_depth}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ParseConfig:
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> config = ParseConfig.from_dict({"max_queue_depth": 4, "other": 1})
            >>> config.max_queue_depth
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "quackit_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration.

    Returns:
        The active ParseConfig for this context.
    """
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    Example:
        >>> with parse_config_context(ParseConfig(max_queue_depth=2)):
        ...     engine = Quackit()
        >>> engine.config.max_queue_depth
        2

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
