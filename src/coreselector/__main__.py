"""
Entry Point - Module Execution

    python -m coreselector

Argument parsing and application start-up live in cli.py.
"""

import sys

from coreselector.cli import main

if __name__ == "__main__":
    sys.exit(main())
