"""Command-line entry point for quackit.

Reads a config from a file or stdin, parses it, and prints the flattened
command list as JSON or as one line of tokens per command.

    $ quackit autoexec.cfg --exec-dir cfg/
    $ echo 'bind g "god"' | quackit --format text
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from quackit.engine import Quackit
from quackit.errors import QuackitError
from quackit.handlers import make_exec_handler
from quackit.serialization import to_json
from quackit.utils.logger import get_logger

logger = get_logger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for the CLI process.

    Args:
        verbose: Enable DEBUG output from the library.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(name)s] [%(levelname)s] %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quackit",
        description="Parse Quake/Valve .cfg files and dump the commands",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Config file to parse, or - for stdin (default: -)",
    )
    parser.add_argument(
        "--format",
        choices=("json", "text"),
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    parser.add_argument(
        "--exec-dir",
        action="append",
        default=[],
        metavar="DIR",
        help="Resolve 'exec' commands against DIR (repeatable)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    engine = Quackit()
    if args.exec_dir:
        engine.register_handler("exec", make_exec_handler(*args.exec_dir))

    try:
        if args.file == "-":
            engine.parse_stream(sys.stdin)
        else:
            with open(args.file, encoding=engine.config.encoding) as f:
                engine.parse_stream(f)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except QuackitError as exc:
        logger.debug("Parse failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(to_json(engine.parsed_commands, indent=args.indent))
    else:
        for command in engine.parsed_commands:
            print(command)
    return 0
