"""Allow running as ``python -m gled``."""

from gled.cli.main import cli

if __name__ == "__main__":
    cli()
