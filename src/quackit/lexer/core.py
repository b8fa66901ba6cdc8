"""Single-pass scanner for Quake/Valve-style .cfg text.

Scanning is a small state machine driven by the character under the
cursor (see ScanState). Tokens accumulate until a delimiter, then the
accumulated run is yielded as one Command.

The scanner is a generator on purpose: the engine dispatches each yielded
command before it asks for the next one, so handlers always run before the
text after their command is scanned.

Boundary convention:
Every character with index < len(source) is examined exactly once by the
main loop. Whatever the accumulator holds at end of input is yielded as a
final command. Unterminated quoted strings and block comments consume to end
of input.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from quackit.command import Command
from quackit.lexer.modes import (
    BLOCK_COMMENT_END,
    BLOCK_COMMENT_START,
    DELIMITERS,
    HASH,
    LINE_COMMENT_START,
    NEWLINE,
    QUOTE,
    SPACE,
    ScanState,
)
from quackit.location import SourceLocation
from quackit.tokens import QuotedString, Token, Word
from quackit.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner:
    """Turns config text into a stream of commands.

    Usage:
        >>> scanner = Scanner('bind g "impulse 2; +attack"; say hi')
        >>> [cmd.values() for cmd in scanner.scan()]
        [('bind', 'g', 'impulse 2; +attack'), ('say', 'hi')]

    The cursor is zero-based internally and exposed 1-based through
    ``position``.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_pos",
        "_line",
        "_col",
        "_tokens",
        "_command_start",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize scanner with source text.

        Args:
            source: Config text
            source_file: Optional source file path for locations
        """
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._pos = 0
        self._line = 0
        self._col = 0
        self._tokens: list[Token] = []
        self._command_start: SourceLocation | None = None

    @property
    def position(self) -> SourceLocation:
        """Current cursor (1-indexed)."""
        return SourceLocation(
            lineno=self._line + 1,
            col_offset=self._col + 1,
            offset=self._pos,
            source_file=self._source_file,
        )

    @property
    def at_end(self) -> bool:
        """True once every character has been consumed."""
        return self._pos >= self._source_len

    def scan(self) -> Iterator[Command]:
        """Scan the source, yielding each command as it completes.

        Yields:
            Command objects in source order

        Complexity: O(n) where n = len(source)
        """
        logger.debug("Scanning %d characters from %s", self._source_len, self._describe())
        source_len = self._source_len
        while self._pos < source_len:
            state = self._classify()

            if state is ScanState.WHITESPACE:
                self._advance()
            elif state is ScanState.QUOTED_STRING:
                self._scan_quoted_string()
            elif state is ScanState.LINE_COMMENT:
                self._skip_line_comment()
            elif state is ScanState.BLOCK_COMMENT:
                self._skip_block_comment()
            elif state is ScanState.DELIMITER:
                command = self._flush()
                if command is not None:
                    yield command
                self._advance()
            else:
                self._scan_word()

        command = self._flush()
        if command is not None:
            yield command

    # =========================================================================
    # Classification
    # =========================================================================

    def _classify(self) -> ScanState:
        """Classify the character under the cursor. Pure, no position change."""
        source = self._source
        pos = self._pos
        char = source[pos]

        if char == NEWLINE:
            return ScanState.DELIMITER
        if char <= SPACE:
            return ScanState.WHITESPACE
        if char == QUOTE:
            return ScanState.QUOTED_STRING
        if char == HASH or source.startswith(LINE_COMMENT_START, pos):
            return ScanState.LINE_COMMENT
        if source.startswith(BLOCK_COMMENT_START, pos):
            return ScanState.BLOCK_COMMENT
        if char in DELIMITERS:
            return ScanState.DELIMITER
        return ScanState.WORD

    # =========================================================================
    # Scanning steps
    # =========================================================================

    def _scan_quoted_string(self) -> None:
        """Consume `"..."` and append its trimmed content as a QuotedString."""
        self._mark_command_start()
        start = self._pos + 1
        end = self._source.find(QUOTE, start)
        if end == -1:
            logger.debug("Unterminated quoted string at %s", self.position)
            end = self._source_len
            self._advance_to(end)
        else:
            self._advance_to(end + 1)
        self._tokens.append(QuotedString(self._source[start:end]))

    def _skip_line_comment(self) -> None:
        """Consume up to, not including, the next newline."""
        end = self._source.find(NEWLINE, self._pos)
        self._advance_to(end if end != -1 else self._source_len)

    def _skip_block_comment(self) -> None:
        """Consume through the matching `*/`, or to end of input."""
        end = self._source.find(BLOCK_COMMENT_END, self._pos + len(BLOCK_COMMENT_START))
        if end == -1:
            logger.debug("Unterminated block comment at %s", self.position)
            self._advance_to(self._source_len)
        else:
            self._advance_to(end + len(BLOCK_COMMENT_END))

    def _scan_word(self) -> None:
        """Consume a run of characters above space; `;` inside a word is content."""
        self._mark_command_start()
        source = self._source
        source_len = self._source_len
        start = self._pos
        end = start
        while end < source_len and source[end] > SPACE:
            end += 1
        self._advance_to(end)
        self._tokens.append(Word(source[start:end]))

    def _flush(self) -> Command | None:
        """Turn the accumulated tokens into a Command and reset the accumulator."""
        if not self._tokens:
            return None
        command = Command(tuple(self._tokens), self._command_start or self.position)
        self._tokens = []
        self._command_start = None
        return command

    def _mark_command_start(self) -> None:
        if not self._tokens:
            self._command_start = self.position

    # =========================================================================
    # Cursor navigation
    # =========================================================================

    def _advance(self) -> None:
        """Consume one character, updating line/column tracking."""
        if self._source[self._pos] == NEWLINE:
            self._line += 1
            self._col = 0
        else:
            self._col += 1
        self._pos += 1

    def _advance_to(self, end: int) -> None:
        """Consume every character up to ``end`` (exclusive).

        Args:
            end: Position to move to; never past end of source.
        """
        segment = self._source[self._pos : end]
        newline_count = segment.count(NEWLINE)
        if newline_count:
            self._line += newline_count
            self._col = len(segment) - segment.rfind(NEWLINE) - 1
        else:
            self._col += len(segment)
        self._pos = end

    def _describe(self) -> str:
        return self._source_file or "<string>"
