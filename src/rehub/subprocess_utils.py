"""Subprocess helpers with operation context for error messages.

Every git and gh call in rehub goes through run_subprocess_with_context so a
failure always names the operation that failed (which revision range, which
config key) instead of surfacing a bare return code.
"""

import logging
import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


class CommandFailedError(RuntimeError):
    """A subprocess exited non-zero or could not be started.

    Attributes:
        operation_context: Human description of what was being attempted
        cmd: The full command that was run
        returncode: Exit status, or None when the program could not be started
        stderr: Captured stderr (stripped), may be empty
    """

    def __init__(
        self,
        message: str,
        *,
        operation_context: str,
        cmd: Sequence[str],
        returncode: int | None,
        stderr: str,
    ) -> None:
        super().__init__(message)
        self.operation_context = operation_context
        self.cmd = tuple(cmd)
        self.returncode = returncode
        self.stderr = stderr


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Copy the environment with credential prompts disabled.

    Plumbing queries must never block waiting for a password.
    """
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def run_subprocess_with_context(
    cmd: Sequence[str],
    *,
    operation_context: str,
    cwd: Path | None = None,
    timeout: float | None = None,
    env: dict[str, str] | None = None,
    error_cls: type[CommandFailedError] = CommandFailedError,
) -> subprocess.CompletedProcess[str]:
    """Run a command, capturing output, and raise with context on failure.

    Args:
        cmd: Command and arguments
        operation_context: Description used in the error message, e.g.
            "load rev-list for main...feature"
        cwd: Working directory, defaults to the process cwd
        timeout: Optional timeout in seconds
        env: Optional environment
        error_cls: CommandFailedError subclass to raise

    Returns:
        The completed process with text stdout/stderr

    Raises:
        CommandFailedError: If the command exits non-zero, times out, or the
            program is missing
    """
    logger.debug("running: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
            env=env,
        )
    except FileNotFoundError as e:
        msg = f"Failed to {operation_context}: {cmd[0]} is not installed"
        raise error_cls(
            msg, operation_context=operation_context, cmd=cmd, returncode=None, stderr=""
        ) from e
    except subprocess.TimeoutExpired as e:
        msg = f"Failed to {operation_context}: timed out after {timeout}s"
        raise error_cls(
            msg, operation_context=operation_context, cmd=cmd, returncode=None, stderr=""
        ) from e

    if result.returncode != 0:
        stderr = result.stderr.strip()
        msg = f"Failed to {operation_context}"
        if stderr:
            msg = f"{msg}\n{stderr}"
        raise error_cls(
            msg,
            operation_context=operation_context,
            cmd=cmd,
            returncode=result.returncode,
            stderr=stderr,
        )
    return result
