"""State-machine scanner for Quake/Valve .cfg text.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, ScanState
├── core.py              # Scanner class (classification + scanning steps)
└── modes.py             # ScanState enum, character constants

Usage:
    >>> from quackit.lexer import Scanner
    >>> for command in Scanner('say "hello"; quit').scan():
    ...     print(command)
Word{'say'} String{"hello"}
Word{'quit'}

"""

from quackit.lexer.core import Scanner
from quackit.lexer.modes import ScanState

__all__ = ["ScanState", "Scanner"]
