"""Printing command executor wrapper.

Echoes each command before delegating to the wrapped executor. Wrapping a
DryRunCommandExecutor gives the --noop behaviour: the user sees exactly
what would have run.
"""

import shlex
from collections.abc import Sequence

import click

from rehub.gateway.executor.abc import CommandExecutor
from rehub.output.output import user_output


class PrintingCommandExecutor(CommandExecutor):
    def __init__(self, wrapped: CommandExecutor, *, global_flags: Sequence[str]) -> None:
        self._wrapped = wrapped
        self._global_flags = tuple(global_flags)

    def run(self, args: Sequence[str]) -> int:
        line = shlex.join(["git", *self._global_flags, *args])
        user_output(click.style("$ ", dim=True) + line)
        return self._wrapped.run(args)
