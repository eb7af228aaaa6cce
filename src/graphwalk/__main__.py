"""Main entry point for graphwalk when run as a module.

This module enables running graphwalk directly using 'python -m graphwalk'.
"""

import sys

from . import cli


def main():
    """Main entry point for the package."""
    sys.exit(cli.main())


if __name__ == "__main__":
    main()
