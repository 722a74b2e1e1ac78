"""Production Git implementation using subprocess.

Every call is prefixed with the global flags the user gave rehub (``-C``,
``-c``, ``--git-dir``...) so plumbing queries look at the same repository the
final command will operate on.
"""

import os
from collections.abc import Sequence
from pathlib import Path

from rehub.gateway.git.abc import Git, GitCommandError, split_output_lines
from rehub.gateway.git.git_dir import GitDirCache, absolute_git_dir
from rehub.subprocess_utils import copied_env_for_git_subprocess, run_subprocess_with_context


class RealGit(Git):
    """Production implementation using subprocess.

    One instance lives for one rehub run; it owns the metadata directory
    cache. Only stdout is parsed; stderr only ever appears in error messages.
    """

    def __init__(
        self,
        *,
        global_flags: Sequence[str] = (),
        git_binary: str = "git",
        git_dir_cache: GitDirCache | None = None,
    ) -> None:
        self._global_flags = tuple(global_flags)
        self._git_binary = git_binary
        self._git_dir_cache = git_dir_cache if git_dir_cache is not None else GitDirCache()

    @property
    def global_flags(self) -> tuple[str, ...]:
        return self._global_flags

    def _run(self, args: Sequence[str], *, operation_context: str) -> str:
        result = run_subprocess_with_context(
            [self._git_binary, *self._global_flags, *args],
            operation_context=operation_context,
            env=copied_env_for_git_subprocess(),
            error_cls=GitCommandError,
        )
        return result.stdout

    def _output(self, args: Sequence[str], *, operation_context: str) -> list[str]:
        return split_output_lines(self._run(args, operation_context=operation_context))

    def _first_line(self, args: Sequence[str], *, operation_context: str) -> str:
        lines = self._output(args, operation_context=operation_context)
        if not lines:
            return ""
        return lines[0]

    # ============================================================================
    # Repository layout
    # ============================================================================

    def git_dir(self) -> Path:
        return self._git_dir_cache.get(self._resolve_git_dir)

    def _resolve_git_dir(self) -> Path:
        try:
            raw = self._first_line(
                ["rev-parse", "-q", "--git-dir"], operation_context="find git dir"
            )
        except GitCommandError as e:
            msg = "Not a git repository (or any of the parent directories): .git"
            raise GitCommandError(
                msg,
                operation_context=e.operation_context,
                cmd=e.cmd,
                returncode=e.returncode,
                stderr=e.stderr,
            ) from e
        return absolute_git_dir(raw, self._global_flags)

    def workdir_name(self) -> str:
        return self._first_line(
            ["rev-parse", "--show-toplevel"], operation_context="find working tree root"
        )

    def has_file(self, *segments: str) -> bool:
        relative = os.path.join(*segments)

        # `rev-parse --git-path` is the supported way to locate files since git 2.5;
        # older versions echo the unknown option back.
        try:
            lines = self._output(
                ["rev-parse", "-q", "--git-path", relative],
                operation_context=f"resolve git path {relative}",
            )
        except GitCommandError:
            lines = []
        if lines and lines[0] != "--git-path":
            path = absolute_git_dir(lines[0], self._global_flags)
            if path.exists():
                return True

        try:
            git_dir = self.git_dir()
        except GitCommandError:
            return False
        return git_dir.joinpath(*segments).exists()

    def branch_at_ref(self, *segments: str) -> str:
        path = self.git_dir().joinpath(*segments)
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            msg = f"Can't read {path}: {e}"
            raise GitCommandError(
                msg, operation_context=f"read {path}", cmd=(), returncode=None, stderr=""
            ) from e

        prefix = "ref: "
        if not content.startswith(prefix):
            msg = f"No branch info in {path}: {content}"
            raise GitCommandError(
                msg, operation_context=f"read {path}", cmd=(), returncode=None, stderr=""
            )
        return content[len(prefix) :].strip()

    def is_git_dir(self, path: Path) -> bool:
        try:
            self._run(
                [f"--git-dir={path}", "rev-parse", "--git-dir"],
                operation_context=f"check git dir {path}",
            )
        except GitCommandError:
            return False
        return True

    # ============================================================================
    # Revisions
    # ============================================================================

    def version(self) -> str:
        return self._first_line(["version"], operation_context="load git version")

    def ref(self, name: str) -> str:
        return self._first_line(
            ["rev-parse", "-q", name],
            operation_context=f"resolve revision {name}",
        )

    def symbolic_full_name(self, name: str) -> str:
        return self._first_line(
            ["rev-parse", "--symbolic-full-name", name],
            operation_context=f"resolve symbolic name {name}",
        )

    def ref_list(self, a: str, b: str) -> list[str]:
        ref = f"{a}...{b}"
        return self._output(
            ["rev-list", "--cherry-pick", "--right-only", "--no-merges", ref],
            operation_context=f"load rev-list for {ref}",
        )

    def show(self, sha: str) -> str:
        output = self._run(
            ["show", "-s", "--format=%s%n%+b", sha],
            operation_context=f"show commit {sha}",
        )
        return output.strip()

    def log(self, sha1: str, sha2: str) -> str:
        return self._run(
            [
                "log",
                "--no-color",
                "--format=%h (%aN, %ar)%n%w(78,3,3)%s%n%+b",
                "--cherry",
                f"{sha1}...{sha2}",
            ],
            operation_context=f"load git log {sha1}..{sha2}",
        )

    # ============================================================================
    # Remotes
    # ============================================================================

    def remotes(self) -> list[str]:
        return self._output(["remote", "-v"], operation_context="list remotes")

    # ============================================================================
    # Configuration
    # ============================================================================

    def config(self, name: str) -> str:
        return self._first_line(["config", name], operation_context=f"read config {name}")

    def config_all(self, name: str) -> list[str]:
        return self._output(
            ["config", "--get-all", name], operation_context=f"read config {name}"
        )

    def global_config(self, name: str) -> str:
        return self._first_line(
            ["config", "--global", name], operation_context=f"read global config {name}"
        )

    def set_global_config(self, name: str, value: str) -> None:
        self._run(
            ["config", "--global", name, value],
            operation_context=f"write global config {name}",
        )

    def editor(self) -> str:
        raw = self._first_line(["var", "GIT_EDITOR"], operation_context="load git var GIT_EDITOR")
        return os.path.expandvars(raw)
