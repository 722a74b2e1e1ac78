"""Execute an Invocation: queued commands first, then the primary command."""

import logging

from rehub.core.invocation import Invocation
from rehub.gateway.executor.abc import CommandExecutor

logger = logging.getLogger(__name__)


def run_invocation(executor: CommandExecutor, invocation: Invocation) -> int:
    """Run every command of ``invocation`` in order, stopping at the first failure.

    Queued commands run in enqueue order, each to completion. If one exits
    non-zero, neither the remaining queued commands nor the primary command
    run.

    Returns:
        0 when everything succeeded, otherwise the failing command's status
    """
    for args in invocation.commands():
        status = executor.run(args)
        if status != 0:
            logger.debug("git %s exited with %d, aborting", " ".join(args), status)
            return status
    return 0
