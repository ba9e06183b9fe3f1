"""
Main entry point for room generation and navigation.

Usage: python -m roomnav.main [command] [options]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
