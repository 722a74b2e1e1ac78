"""rehub CLI entry point.

rehub wraps git and turns `checkout <pull request URL>` into the remote,
fetch and checkout commands that give you a local tracking branch for the
pull request. See `rehub --help` for details.
"""

from rehub.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `rehub` console script."""
    cli()
