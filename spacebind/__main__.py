"""
Main entry point for running spacebind as a module.

Usage:
    python -m spacebind [move|list] [config]
"""

from .cli import main

if __name__ == "__main__":
    import sys

    sys.exit(main())
