"""Command: one dispatch unit produced by the scanner.

A command is the ordered, non-empty run of tokens found between two
delimiters (semicolon, newline, start or end of input). The first token
conventionally names the command and the rest are its arguments; the
scanner does not enforce that the first token is a Word.

Thread Safety:
Command is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from quackit.location import SourceLocation
from quackit.tokens import Token


@dataclass(frozen=True, slots=True)
class Command:
    """An ordered, non-empty sequence of tokens.

    Attributes:
        tokens: The command tokens, name first
        location: Where the first token starts (not part of equality)

    Example:
        >>> cmd = Command((Word("bind"), Word("g"), QuotedString("godmode")))
        >>> cmd.name
        'bind'
        >>> cmd.values()
        ('bind', 'g', 'godmode')

    """

    tokens: tuple[Token, ...]
    location: SourceLocation = field(
        default_factory=SourceLocation.start, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.tokens, tuple):
            object.__setattr__(self, "tokens", tuple(self.tokens))
        if not self.tokens:
            msg = "Command must contain at least one token"
            raise ValueError(msg)

    @property
    def head(self) -> Token:
        """First token (the command name, when well-formed)."""
        return self.tokens[0]

    @property
    def name(self) -> str:
        """Text of the first token."""
        return self.tokens[0].text

    @property
    def arguments(self) -> tuple[Token, ...]:
        """Tokens after the first."""
        return self.tokens[1:]

    def values(self) -> tuple[str, ...]:
        """Plain token texts, quotes already removed."""
        return tuple(token.text for token in self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    def __str__(self) -> str:
        return " ".join(str(token) for token in self.tokens)
