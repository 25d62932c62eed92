"""Command-line Entry Point - Root Module.

Runs the disaster alert demo from a checkout without installing it.
"""

import sys

from disaster_alerts.main import main, run

__all__ = [
    "main",
    "run",
]


if __name__ == "__main__":
    sys.exit(main())
