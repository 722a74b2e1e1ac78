"""Fake git plumbing for testing."""

from pathlib import Path

from rehub.gateway.git.abc import Git, GitCommandError


def _missing(operation_context: str, message: str) -> GitCommandError:
    return GitCommandError(
        message, operation_context=operation_context, cmd=(), returncode=1, stderr=""
    )


class FakeGit(Git):
    """In-memory fake implementation of git plumbing.

    State Management:
    - git_dir: metadata directory, None means "not a repository"
    - files: paths (relative to git_dir) that exist, mapped to their content
    - remotes: remote name -> URL
    - config_values: key -> list of values (repo scope)
    - global_config_values: key -> value (global scope)
    - refs: revision name -> sha
    - ref_lists: (a, b) -> commits

    Mutation Tracking:
    - global_config_writes: (key, value) pairs written via set_global_config
    """

    def __init__(
        self,
        *,
        git_dir: Path | None = Path("/repo/.git"),
        workdir: str = "/repo",
        files: dict[str, str] | None = None,
        remotes: dict[str, str] | None = None,
        config_values: dict[str, list[str]] | None = None,
        global_config_values: dict[str, str] | None = None,
        refs: dict[str, str] | None = None,
        symbolic_names: dict[str, str] | None = None,
        ref_lists: dict[tuple[str, str], list[str]] | None = None,
        commit_messages: dict[str, str] | None = None,
        version: str = "git version 2.43.0",
        editor: str = "vim",
    ) -> None:
        self._git_dir = git_dir
        self._workdir = workdir
        self._files = files if files is not None else {}
        self._remotes = remotes if remotes is not None else {}
        self._config_values = config_values if config_values is not None else {}
        self._global_config_values = (
            global_config_values if global_config_values is not None else {}
        )
        self._refs = refs if refs is not None else {}
        self._symbolic_names = symbolic_names if symbolic_names is not None else {}
        self._ref_lists = ref_lists if ref_lists is not None else {}
        self._commit_messages = commit_messages if commit_messages is not None else {}
        self._version = version
        self._editor = editor

        self._global_config_writes: list[tuple[str, str]] = []

    # ============================================================================
    # Repository layout
    # ============================================================================

    def git_dir(self) -> Path:
        if self._git_dir is None:
            raise _missing(
                "find git dir", "Not a git repository (or any of the parent directories): .git"
            )
        return self._git_dir

    def workdir_name(self) -> str:
        self.git_dir()
        return self._workdir

    def has_file(self, *segments: str) -> bool:
        if self._git_dir is None:
            return False
        return "/".join(segments) in self._files

    def branch_at_ref(self, *segments: str) -> str:
        key = "/".join(segments)
        path = self.git_dir().joinpath(*segments)
        if key not in self._files:
            raise _missing(f"read {path}", f"Can't read {path}")
        content = self._files[key]
        if not content.startswith("ref: "):
            raise _missing(f"read {path}", f"No branch info in {path}: {content}")
        return content[len("ref: ") :].strip()

    def is_git_dir(self, path: Path) -> bool:
        return path == self._git_dir

    # ============================================================================
    # Revisions
    # ============================================================================

    def version(self) -> str:
        return self._version

    def ref(self, name: str) -> str:
        if name not in self._refs:
            raise _missing(f"resolve revision {name}", f"Failed to resolve revision {name}")
        return self._refs[name]

    def symbolic_full_name(self, name: str) -> str:
        if name not in self._symbolic_names:
            raise _missing(
                f"resolve symbolic name {name}", f"Failed to resolve symbolic name {name}"
            )
        return self._symbolic_names[name]

    def ref_list(self, a: str, b: str) -> list[str]:
        if (a, b) not in self._ref_lists:
            ref = f"{a}...{b}"
            raise _missing(f"load rev-list for {ref}", f"Failed to load rev-list for {ref}")
        return list(self._ref_lists[(a, b)])

    def show(self, sha: str) -> str:
        if sha not in self._commit_messages:
            raise _missing(f"show commit {sha}", f"Failed to show commit {sha}")
        return self._commit_messages[sha].strip()

    def log(self, sha1: str, sha2: str) -> str:
        commits = self.ref_list(sha1, sha2)
        return "".join(f"{sha[:7]}\n   {self._commit_messages.get(sha, '')}\n" for sha in commits)

    # ============================================================================
    # Remotes
    # ============================================================================

    def remotes(self) -> list[str]:
        lines = []
        for name, url in self._remotes.items():
            lines.append(f"{name}\t{url} (fetch)")
            lines.append(f"{name}\t{url} (push)")
        return lines

    # ============================================================================
    # Configuration
    # ============================================================================

    def config(self, name: str) -> str:
        values = self._config_values.get(name)
        if not values:
            raise _missing(f"read config {name}", f"Failed to read config {name}")
        return values[-1]

    def config_all(self, name: str) -> list[str]:
        values = self._config_values.get(name)
        if not values:
            raise _missing(f"read config {name}", f"Failed to read config {name}")
        return list(values)

    def global_config(self, name: str) -> str:
        if name not in self._global_config_values:
            raise _missing(f"read global config {name}", f"Failed to read global config {name}")
        return self._global_config_values[name]

    def set_global_config(self, name: str, value: str) -> None:
        self._global_config_writes.append((name, value))
        self._global_config_values[name] = value

    def editor(self) -> str:
        return self._editor

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def global_config_writes(self) -> list[tuple[str, str]]:
        """Read-only access to global config writes for test assertions."""
        return list(self._global_config_writes)
