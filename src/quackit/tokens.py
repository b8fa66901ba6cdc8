"""Token definitions for the Quackit scanner.

The scanner produces two kinds of tokens: bare words and quoted strings.
The set is closed, so Token is a plain union of the two dataclasses and
handler code can match on them exhaustively:

    >>> match token:
    ...     case Word(text=name):
    ...         ...
    ...     case QuotedString(text=value):
    ...         ...

Thread Safety:
Tokens are frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TypeAlias

# Characters trimmed from both ends of every token
ASCII_WHITESPACE = " \t\n\r\v\f"


class TokenKind(Enum):
    """Discriminant for the two token variants."""

    WORD = auto()  # sv_cheats, +attack, 1
    STRING = auto()  # "say hello; wave"


@dataclass(frozen=True, slots=True)
class Word:
    """An unquoted run of non-whitespace characters.

    Attributes:
        text: The word, trimmed of surrounding ASCII whitespace
    """

    text: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", self.text.strip(ASCII_WHITESPACE))

    @property
    def kind(self) -> TokenKind:
        """Token kind (always TokenKind.WORD)."""
        return TokenKind.WORD

    def __str__(self) -> str:
        return f"Word{{'{self.text}'}}"


@dataclass(frozen=True, slots=True)
class QuotedString:
    """The content between a pair of double quotes.

    Quotes are not part of the value. Semicolons and newlines inside
    the quotes are literal content. No escape sequences are processed.

    Attributes:
        text: The quoted content, trimmed of surrounding ASCII whitespace
    """

    text: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", self.text.strip(ASCII_WHITESPACE))

    @property
    def kind(self) -> TokenKind:
        """Token kind (always TokenKind.STRING)."""
        return TokenKind.STRING

    def __str__(self) -> str:
        return f'String{{"{self.text}"}}'


Token: TypeAlias = Word | QuotedString
