"""Scan a file from disk, with load failures reported through logging.

Usage:
    python scan_with_logging.py README.md
"""

import logging
import sys

from tinta import scan_file

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

for token in scan_file(sys.argv[1] if len(sys.argv) > 1 else "README.md"):
    print(token)
