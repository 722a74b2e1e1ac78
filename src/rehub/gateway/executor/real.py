"""Production command executor using subprocess."""

import logging
import subprocess
from collections.abc import Sequence

from rehub.gateway.executor.abc import CommandExecutor

logger = logging.getLogger(__name__)


class RealCommandExecutor(CommandExecutor):
    """Runs git with inherited stdin/stdout/stderr."""

    def __init__(self, *, global_flags: Sequence[str], git_binary: str = "git") -> None:
        self._global_flags = tuple(global_flags)
        self._git_binary = git_binary

    def run(self, args: Sequence[str]) -> int:
        cmd = [self._git_binary, *self._global_flags, *args]
        logger.debug("executing: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, check=False)
        except FileNotFoundError:
            logger.debug("%s not found on PATH", self._git_binary)
            return 127
        return result.returncode
