"""Abstract interface for running git commands for the user."""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class CommandExecutor(ABC):
    """Runs one git command to completion and reports its exit status.

    Unlike the plumbing gateway, output is not captured: the user sees git's
    own output exactly as if they had typed the command.
    """

    @abstractmethod
    def run(self, args: Sequence[str]) -> int:
        """Run ``git <global flags> <args>``.

        Args:
            args: git subcommand and its arguments, without the program name

        Returns:
            The process exit status
        """
        ...
