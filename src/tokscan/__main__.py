"""Allows running the scanner with `python -m tokscan`."""

import sys

from tokscan.cli import main

if __name__ == '__main__':
    sys.exit(main())
