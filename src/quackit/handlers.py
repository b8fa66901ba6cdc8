"""Built-in command handlers.

Only ``exec`` lives here: it is the one handler whose whole job is feeding
more text back to the engine. Everything else (binds, cvars, aliases) is
application semantics and belongs to the caller.

Example:
    >>> engine = Quackit()
    >>> engine.register_handler("exec", make_exec_handler("cfg/"))
    >>> engine.parse('exec autoexec')  # parses cfg/autoexec.cfg after this text
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from quackit.utils.logger import get_logger

if TYPE_CHECKING:
    from quackit.engine import Quackit
    from quackit.tokens import Token

logger = get_logger(__name__)

CONFIG_SUFFIX = ".cfg"


class ExecHandler:
    """Resolves ``exec <name>`` against search directories and queues the file.

    Attributes:
        search_paths: Directories tried in order
        encoding: Codec for reading config files
    """

    __slots__ = ("search_paths", "encoding")

    def __init__(self, search_paths: Iterable[str | Path], encoding: str = "utf-8") -> None:
        self.search_paths = tuple(Path(p) for p in search_paths)
        self.encoding = encoding
        if not self.search_paths:
            msg = "ExecHandler needs at least one search path"
            raise ValueError(msg)

    def __call__(self, engine: Quackit, name: str, arguments: tuple[Token, ...]) -> None:
        if not arguments:
            msg = f"'{name}' expects a config name"
            raise ValueError(msg)

        path = self.resolve(arguments[0].text)
        logger.debug("%s %s", name, path)
        engine.queue_content(path.read_text(encoding=self.encoding), source_file=str(path))

    def resolve(self, config_name: str) -> Path:
        """Find the file for a config name.

        A name without a suffix gets ``.cfg`` appended.

        Raises:
            ValueError: Name points outside every search directory
            FileNotFoundError: No search directory holds the file
        """
        relative = Path(config_name)
        if not relative.suffix:
            relative = relative.with_suffix(CONFIG_SUFFIX)

        escaped = True
        for base in self.search_paths:
            root = base.resolve()
            candidate = (root / relative).resolve()
            if not candidate.is_relative_to(root):
                continue
            escaped = False
            if candidate.is_file():
                return candidate

        if escaped:
            msg = f"Config name {config_name!r} escapes the search paths"
            raise ValueError(msg)
        searched = ", ".join(str(p) for p in self.search_paths)
        msg = f"Config {str(relative)!r} not found in {searched}"
        raise FileNotFoundError(msg)


def make_exec_handler(*search_paths: str | Path, encoding: str = "utf-8") -> ExecHandler:
    """Create an ``exec`` handler reading configs from the given directories.

    Args:
        *search_paths: Directories tried in order
        encoding: Codec for reading config files

    Returns:
        Handler suitable for ``Quackit.register_handler("exec", ...)``
    """
    return ExecHandler(search_paths, encoding=encoding)
