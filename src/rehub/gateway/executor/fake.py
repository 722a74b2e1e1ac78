"""Fake command executor for testing."""

from collections.abc import Sequence

from rehub.gateway.executor.abc import CommandExecutor


class FakeCommandExecutor(CommandExecutor):
    """Records every command instead of running it.

    Constructor Injection: ``exit_codes`` maps a command (as a tuple) to the
    status it should report; unlisted commands succeed.
    Mutation Tracking: ``executed`` lists the commands in the order run.
    """

    def __init__(self, *, exit_codes: dict[tuple[str, ...], int] | None = None) -> None:
        self._exit_codes = exit_codes if exit_codes is not None else {}
        self._executed: list[tuple[str, ...]] = []

    def run(self, args: Sequence[str]) -> int:
        key = tuple(args)
        self._executed.append(key)
        return self._exit_codes.get(key, 0)

    @property
    def executed(self) -> list[tuple[str, ...]]:
        """Read-only access to executed commands for test assertions."""
        return list(self._executed)
