"""Allow ``python -m resyslib``."""

import sys

from resyslib.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
