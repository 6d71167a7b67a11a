"""Entry point for tudu when run as a module.

This allows the package to be run with: python -m tudu
"""

import sys

from tudu.cli import main

if __name__ == "__main__":
    sys.exit(main())
