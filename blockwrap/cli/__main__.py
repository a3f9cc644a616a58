"""
Main entry point for the blockwrap CLI when run as a module.

This allows the CLI to be executed using:
    python -m blockwrap.cli
"""

from . import main

if __name__ == '__main__':
    main()
