"""Gateway that runs the final git commands attached to the terminal."""

from rehub.gateway.executor.abc import CommandExecutor as CommandExecutor
from rehub.gateway.executor.dry_run import DryRunCommandExecutor as DryRunCommandExecutor
from rehub.gateway.executor.fake import FakeCommandExecutor as FakeCommandExecutor
from rehub.gateway.executor.printing import PrintingCommandExecutor as PrintingCommandExecutor
from rehub.gateway.executor.real import RealCommandExecutor as RealCommandExecutor
