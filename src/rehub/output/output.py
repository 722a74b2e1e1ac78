"""User-facing output.

Messages meant for the person at the terminal go to stderr so that stdout
stays reserved for git itself.
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Print a message for the user on stderr."""
    click.echo(message, err=True, nl=nl)
