"""
Pollen Report Entry Point

Allows execution via: python -m apps.pollen
"""

import sys

from apps.pollen.cli import main

if __name__ == "__main__":
    sys.exit(main())
