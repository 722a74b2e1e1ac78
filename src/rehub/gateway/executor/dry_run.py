"""No-op command executor for --noop mode."""

from collections.abc import Sequence

from rehub.gateway.executor.abc import CommandExecutor


class DryRunCommandExecutor(CommandExecutor):
    """Pretends every command succeeded without running anything."""

    def run(self, args: Sequence[str]) -> int:
        return 0
