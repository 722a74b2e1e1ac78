"""High-level git plumbing interface.

This module provides a clean abstraction over the git subprocess calls rehub
needs to inspect a repository, making the rewrite logic testable without a
real repository.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path

from rehub.subprocess_utils import CommandFailedError


class GitCommandError(CommandFailedError):
    """A git plumbing call failed. The message names the operation."""


def split_output_lines(output: str) -> list[str]:
    """Split command output into stripped, non-blank lines, keeping order."""
    lines = []
    for line in output.split("\n"):
        line = line.strip()
        if line:
            lines.append(line)
    return lines


class Git(ABC):
    """Abstract interface for git plumbing.

    All implementations (real and fake) must implement this interface.
    Query methods raise GitCommandError when git reports a failure unless the
    docstring says otherwise.
    """

    # ============================================================================
    # Repository layout
    # ============================================================================

    @abstractmethod
    def git_dir(self) -> Path:
        """Absolute path of the repository metadata directory.

        Resolved once; later calls return the same path even if the process
        working directory has changed since.
        """
        ...

    @abstractmethod
    def workdir_name(self) -> str:
        """Top-level directory of the working tree."""
        ...

    @abstractmethod
    def has_file(self, *segments: str) -> bool:
        """Check whether a path exists inside the metadata directory.

        Never raises; a repository that cannot be inspected has no files.
        """
        ...

    @abstractmethod
    def branch_at_ref(self, *segments: str) -> str:
        """Read a symbolic ref file under the metadata directory.

        Args:
            segments: Path segments relative to the metadata directory, e.g. ("HEAD",)

        Returns:
            The ref name the file points at, e.g. "refs/heads/main"
        """
        ...

    def head(self) -> str:
        """The ref HEAD points at."""
        return self.branch_at_ref("HEAD")

    @abstractmethod
    def is_git_dir(self, path: Path) -> bool:
        """Check whether ``path`` is a git metadata directory. Never raises."""
        ...

    # ============================================================================
    # Revisions
    # ============================================================================

    @abstractmethod
    def version(self) -> str:
        """First line of ``git version``."""
        ...

    @abstractmethod
    def ref(self, name: str) -> str:
        """Resolve a revision name to an object name."""
        ...

    @abstractmethod
    def symbolic_full_name(self, name: str) -> str:
        """Resolve a revision name to its full ref name."""
        ...

    @abstractmethod
    def ref_list(self, a: str, b: str) -> list[str]:
        """Commits reachable from ``b`` but not ``a``, skipping merges and cherry-picks.

        An empty list is a valid answer.
        """
        ...

    @abstractmethod
    def show(self, sha: str) -> str:
        """Subject and body of a single commit."""
        ...

    @abstractmethod
    def log(self, sha1: str, sha2: str) -> str:
        """Human-readable log of the symmetric range ``sha1...sha2``."""
        ...

    # ============================================================================
    # Remotes
    # ============================================================================

    @abstractmethod
    def remotes(self) -> list[str]:
        """Lines of ``git remote -v``."""
        ...

    def remote_names(self) -> list[str]:
        """Unique remote names, in the order git lists them."""
        names: list[str] = []
        for line in self.remotes():
            name = line.split()[0]
            if name not in names:
                names.append(name)
        return names

    def remote_exists(self, name: str) -> bool:
        return name in self.remote_names()

    # ============================================================================
    # Configuration
    # ============================================================================

    @abstractmethod
    def config(self, name: str) -> str:
        """Value of a config key; raises GitCommandError when unset."""
        ...

    @abstractmethod
    def config_all(self, name: str) -> list[str]:
        """All values of a multi-valued config key; raises when unset."""
        ...

    @abstractmethod
    def global_config(self, name: str) -> str:
        """Value of a key in the global config; raises when unset."""
        ...

    @abstractmethod
    def set_global_config(self, name: str, value: str) -> None:
        """Write a key to the global config."""
        ...

    @abstractmethod
    def editor(self) -> str:
        """The editor git would launch, with environment variables expanded."""
        ...

    def alias(self, name: str) -> str:
        """Expansion of a git alias; raises when the alias is not defined."""
        return self.config(f"alias.{name}")

    def comment_char(self) -> str:
        """Commit message comment leader, ``#`` unless configured."""
        try:
            return self.config("core.commentchar")
        except GitCommandError:
            return "#"
