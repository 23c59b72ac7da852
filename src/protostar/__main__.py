"""Entry point for ``python -m protostar``."""

import sys

from protostar.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
