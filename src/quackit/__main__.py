"""Allow ``python -m quackit``."""

import sys

from quackit.cli import main

if __name__ == "__main__":
    sys.exit(main())
