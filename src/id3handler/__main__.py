"""Allow ``python -m id3handler`` to run the CLI."""

import sys

from id3handler.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
