"""gb: browse and switch local git branches from the terminal.

See `gb --help` for details.
"""

from gb.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `gb` console script."""
    cli()
