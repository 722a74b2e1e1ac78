"""Mutable token buffer for one git invocation.

An Invocation is what rehub hands to the command executor: a git subcommand,
its parameters, and a FIFO of auxiliary git commands that must run first.
Rewrites edit the buffer through named operations so positions never drift
between steps.
"""

from __future__ import annotations

from dataclasses import dataclass, field


def looks_like_flag(token: str) -> bool:
    return token.startswith("-")


@dataclass
class Invocation:
    """A git subcommand plus its parameters and queued prerequisite commands.

    Attributes:
        command: git subcommand, e.g. "checkout"
        params: Tokens following the subcommand, in order
        before: Auxiliary git commands (without the "git" program name),
            executed in enqueue order ahead of the primary command
    """

    command: str
    params: list[str] = field(default_factory=list)
    before: list[tuple[str, ...]] = field(default_factory=list)

    def words(self) -> list[str]:
        """Positional parameters, i.e. the ones that do not look like flags."""
        return [p for p in self.params if not looks_like_flag(p)]

    def is_params_empty(self) -> bool:
        return not self.params

    def index_of_param(self, token: str) -> int | None:
        """Index of the first parameter equal to ``token``, or None."""
        for i, param in enumerate(self.params):
            if param == token:
                return i
        return None

    def remove_param(self, index: int) -> str:
        """Remove and return the parameter at ``index``.

        Raises:
            IndexError: If ``index`` does not address an existing parameter
        """
        self._check_index(index, upper=len(self.params) - 1)
        return self.params.pop(index)

    def insert_params(self, index: int, *tokens: str) -> None:
        """Insert ``tokens`` at ``index``, shifting later parameters right.

        ``index`` may equal ``len(params)`` to append.

        Raises:
            IndexError: If ``index`` is outside ``0..len(params)``
        """
        self._check_index(index, upper=len(self.params))
        self.params[index:index] = list(tokens)

    def queue_before(self, *tokens: str) -> None:
        """Queue one auxiliary git command to run before this invocation."""
        self.before.append(tuple(tokens))

    def to_argv(self) -> list[str]:
        return [self.command, *self.params]

    def commands(self) -> list[list[str]]:
        """Every command in execution order: queued ones, then the primary."""
        return [list(cmd) for cmd in self.before] + [self.to_argv()]

    def copy(self) -> Invocation:
        return Invocation(command=self.command, params=list(self.params), before=list(self.before))

    def _check_index(self, index: int, *, upper: int) -> None:
        if index < 0 or index > upper:
            msg = f"parameter index {index} out of range for {len(self.params)} parameters"
            raise IndexError(msg)
