"""Entry point for running tickplanner as a module.

Usage:
    python -m tickplanner [command] [options]
"""

from tickplanner.cli import main


if __name__ == "__main__":
    main()
