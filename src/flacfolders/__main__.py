"""Allow ``python -m flacfolders``."""

import sys

from flacfolders.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
