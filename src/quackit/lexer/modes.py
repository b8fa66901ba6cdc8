"""Scanner states and character constants.

This module defines what the scanner can do with the character under
the cursor. The scanner classifies, then runs the matching step.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanState(Enum):
    """What the character under the cursor starts.

    Classification priority, highest first:
    - WHITESPACE: control characters and space, except newline
    - QUOTED_STRING: `"`
    - LINE_COMMENT: `#` or `//`
    - BLOCK_COMMENT: `/*`
    - DELIMITER: newline, or `;` where a token would start
    - WORD: anything else

    """

    WHITESPACE = auto()
    QUOTED_STRING = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()
    DELIMITER = auto()
    WORD = auto()


NEWLINE = "\n"
SEMICOLON = ";"
QUOTE = '"'
HASH = "#"
LINE_COMMENT_START = "//"
BLOCK_COMMENT_START = "/*"
BLOCK_COMMENT_END = "*/"

# Every character with a value at or below this one is whitespace
SPACE = " "

DELIMITERS = frozenset({NEWLINE, SEMICOLON})
