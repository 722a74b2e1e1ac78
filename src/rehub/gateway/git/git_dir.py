"""Metadata directory resolution and caching."""

import os
from collections.abc import Callable, Sequence
from pathlib import Path


def chdir_base(global_flags: Sequence[str]) -> str:
    """Directory git will run in after applying every ``-C`` global flag.

    Later flags win; a relative value is taken relative to the base built so
    far, mirroring how git itself composes repeated ``-C`` options.
    Returns "" when no ``-C`` flag is present.
    """
    base = ""
    for i, flag in enumerate(global_flags):
        if flag != "-C" or i + 1 >= len(global_flags):
            continue
        value = global_flags[i + 1]
        if os.path.isabs(value):
            base = value
        else:
            base = os.path.join(base, value)
    return base


def absolute_git_dir(raw: str, global_flags: Sequence[str]) -> Path:
    """Turn ``git rev-parse --git-dir`` output into an absolute, normalised path."""
    if os.path.isabs(raw):
        return Path(raw)
    base = chdir_base(global_flags)
    if base:
        raw = os.path.join(base, raw)
    return Path(os.path.abspath(raw))


class GitDirCache:
    """Write-once holder for the resolved metadata directory.

    The first successful resolution wins for the lifetime of the holder, so a
    working-directory change after that point is deliberately not observed.
    ``reset`` exists for test isolation.
    """

    def __init__(self) -> None:
        self._value: Path | None = None

    def get(self, resolve: Callable[[], Path]) -> Path:
        if self._value is None:
            self._value = resolve()
        return self._value

    @property
    def is_resolved(self) -> bool:
        return self._value is not None

    def reset(self) -> None:
        self._value = None
