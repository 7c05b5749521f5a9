"""Allow ``python -m icondiff``."""

from icondiff.cli import cli

if __name__ == "__main__":
    cli()
