"""Application context with dependency injection."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from rehub.cli.config import RehubConfig, load_config
from rehub.gateway.executor.abc import CommandExecutor
from rehub.gateway.executor.dry_run import DryRunCommandExecutor
from rehub.gateway.executor.fake import FakeCommandExecutor
from rehub.gateway.executor.printing import PrintingCommandExecutor
from rehub.gateway.executor.real import RealCommandExecutor
from rehub.gateway.git.abc import Git
from rehub.gateway.git.fake import FakeGit
from rehub.gateway.git.real import RealGit
from rehub.gateway.github.abc import PullRequestGateway
from rehub.gateway.github.fake import FakePullRequestGateway
from rehub.gateway.github.real import RealPullRequestGateway


@dataclass(frozen=True)
class RehubContext:
    """Immutable context holding all dependencies for one rehub run.

    Created at the CLI entry point and threaded through the application.
    """

    git: Git
    pull_requests: PullRequestGateway
    executor: CommandExecutor
    config: RehubConfig
    cwd: Path
    noop: bool

    @staticmethod
    def for_test(
        *,
        git: Git | None = None,
        pull_requests: PullRequestGateway | None = None,
        executor: CommandExecutor | None = None,
        config: RehubConfig | None = None,
        cwd: Path | None = None,
        noop: bool = False,
    ) -> "RehubContext":
        """Context with fakes for every gateway not supplied."""
        return RehubContext(
            git=git if git is not None else FakeGit(),
            pull_requests=pull_requests if pull_requests is not None else FakePullRequestGateway(),
            executor=executor if executor is not None else FakeCommandExecutor(),
            config=config if config is not None else RehubConfig(hosts=(), protocol=None),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            noop=noop,
        )


def create_context(*, global_flags: Sequence[str], noop: bool) -> RehubContext:
    """Create the production context.

    Args:
        global_flags: git global flags to prefix every git invocation with
        noop: Print commands instead of running them
    """
    executor: CommandExecutor
    if noop:
        executor = PrintingCommandExecutor(DryRunCommandExecutor(), global_flags=global_flags)
    else:
        executor = RealCommandExecutor(global_flags=global_flags)

    return RehubContext(
        git=RealGit(global_flags=global_flags),
        pull_requests=RealPullRequestGateway(),
        executor=executor,
        config=load_config(),
        cwd=Path.cwd(),
        noop=noop,
    )
