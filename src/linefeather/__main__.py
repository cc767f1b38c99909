"""Allow running linefeather as ``python -m linefeather``."""

from linefeather.cli import cli

if __name__ == "__main__":
    cli()
