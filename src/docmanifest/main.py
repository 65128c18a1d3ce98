"""Application entry point."""

import sys

from docmanifest.interfaces.cli import run


def main() -> None:
    """CLI entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
