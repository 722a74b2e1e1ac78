"""Tests for RealGit with the subprocess boundary replaced.

run_subprocess_with_context is patched so each test declares exactly which
git commands succeed and what they print.
"""

import os
from collections.abc import Callable
from pathlib import Path
from subprocess import CompletedProcess
from typing import Any
from unittest.mock import patch

import pytest

from rehub.gateway.git.abc import GitCommandError, split_output_lines
from rehub.gateway.git.real import RealGit

_RUN = "rehub.gateway.git.real.run_subprocess_with_context"


def _scripted_git(
    responses: dict[tuple[str, ...], str], calls: list[list[str]]
) -> Callable[..., CompletedProcess[str]]:
    """Fake run_subprocess_with_context answering from ``responses``.

    Keys are the command without the leading "git"; unknown commands fail.
    """

    def run(cmd: list[str], *, operation_context: str, **kwargs: Any) -> CompletedProcess[str]:
        calls.append(list(cmd))
        key = tuple(cmd[1:])
        if key not in responses:
            raise GitCommandError(
                f"Failed to {operation_context}",
                operation_context=operation_context,
                cmd=cmd,
                returncode=1,
                stderr="",
            )
        return CompletedProcess(cmd, 0, stdout=responses[key], stderr="")

    return run


def test_split_output_lines_trims_and_drops_blank_lines() -> None:
    output = "  first  \n\n\tsecond\t\n   \nthird\n"

    assert split_output_lines(output) == ["first", "second", "third"]


def test_every_call_is_prefixed_with_global_flags() -> None:
    calls: list[list[str]] = []
    git = RealGit(global_flags=["-C", "/work", "-c", "core.pager=cat"])
    responses = {("-C", "/work", "-c", "core.pager=cat", "rev-parse", "-q", "HEAD"): "abc123\n"}

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        assert git.ref("HEAD") == "abc123"

    assert calls == [["git", "-C", "/work", "-c", "core.pager=cat", "rev-parse", "-q", "HEAD"]]


def test_git_dir_resolves_relative_output_against_chdir_flags() -> None:
    """Relative -C values build on the previous base."""
    calls: list[list[str]] = []
    flags = ["-C", "/src", "-C", "project"]
    git = RealGit(global_flags=flags)
    responses = {(*flags, "rev-parse", "-q", "--git-dir"): ".git\n"}

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        assert git.git_dir() == Path("/src/project/.git")


def test_git_dir_absolute_chdir_replaces_base() -> None:
    calls: list[list[str]] = []
    flags = ["-C", "ignored", "-C", "/abs/repo"]
    git = RealGit(global_flags=flags)
    responses = {(*flags, "rev-parse", "-q", "--git-dir"): ".git\n"}

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        assert git.git_dir() == Path("/abs/repo/.git")


def test_git_dir_keeps_absolute_output() -> None:
    calls: list[list[str]] = []
    git = RealGit(global_flags=["-C", "/elsewhere"])
    responses = {("-C", "/elsewhere", "rev-parse", "-q", "--git-dir"): "/repo/.git\n"}

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        assert git.git_dir() == Path("/repo/.git")


def test_git_dir_is_resolved_once_per_instance(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A later working-directory change does not affect the cached result."""
    calls: list[list[str]] = []
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    git = RealGit()
    responses = {("rev-parse", "-q", "--git-dir"): ".git\n"}

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        monkeypatch.chdir(first)
        resolved = git.git_dir()
        monkeypatch.chdir(second)
        again = git.git_dir()

    assert resolved == again
    assert resolved == Path(os.getcwd()).parent / "first" / ".git"
    assert len(calls) == 1


def test_git_dir_failure_is_not_cached() -> None:
    calls: list[list[str]] = []
    git = RealGit()

    with patch(_RUN, side_effect=_scripted_git({}, calls)):
        with pytest.raises(GitCommandError, match="Not a git repository"):
            git.git_dir()

    responses = {("rev-parse", "-q", "--git-dir"): "/repo/.git\n"}
    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        assert git.git_dir() == Path("/repo/.git")


def test_has_file_uses_git_path(tmp_path: Path) -> None:
    target = tmp_path / "MERGE_HEAD"
    target.write_text("abc\n")
    calls: list[list[str]] = []
    git = RealGit()
    responses = {("rev-parse", "-q", "--git-path", "MERGE_HEAD"): f"{target}\n"}

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        assert git.has_file("MERGE_HEAD") is True

    # git dir was never needed
    assert len(calls) == 1


def test_has_file_falls_back_for_old_git(tmp_path: Path) -> None:
    """Old git echoes --git-path back; the path is then joined manually."""
    (tmp_path / "rebase-merge").mkdir()
    (tmp_path / "rebase-merge" / "done").write_text("")
    calls: list[list[str]] = []
    git = RealGit()
    responses = {
        ("rev-parse", "-q", "--git-path", "rebase-merge/done"): "--git-path\nrebase-merge/done\n",
        ("rev-parse", "-q", "--git-dir"): f"{tmp_path}\n",
    }

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        assert git.has_file("rebase-merge", "done") is True


def test_has_file_false_when_missing(tmp_path: Path) -> None:
    calls: list[list[str]] = []
    git = RealGit()
    responses = {
        ("rev-parse", "-q", "--git-path", "MERGE_HEAD"): f"{tmp_path / 'MERGE_HEAD'}\n",
        ("rev-parse", "-q", "--git-dir"): f"{tmp_path}\n",
    }

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        assert git.has_file("MERGE_HEAD") is False


def test_has_file_false_outside_repository() -> None:
    calls: list[list[str]] = []
    git = RealGit()

    with patch(_RUN, side_effect=_scripted_git({}, calls)):
        assert git.has_file("HEAD") is False


def test_branch_at_ref_reads_symbolic_ref(tmp_path: Path) -> None:
    (tmp_path / "HEAD").write_text("ref: refs/heads/main\n")
    calls: list[list[str]] = []
    git = RealGit()
    responses = {("rev-parse", "-q", "--git-dir"): f"{tmp_path}\n"}

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        assert git.head() == "refs/heads/main"


def test_branch_at_ref_rejects_detached_head(tmp_path: Path) -> None:
    (tmp_path / "HEAD").write_text("0123456789abcdef\n")
    calls: list[list[str]] = []
    git = RealGit()
    responses = {("rev-parse", "-q", "--git-dir"): f"{tmp_path}\n"}

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        with pytest.raises(GitCommandError, match="No branch info in .*0123456789abcdef"):
            git.head()


def test_ref_list_empty_is_not_an_error() -> None:
    calls: list[list[str]] = []
    git = RealGit()
    responses = {
        ("rev-list", "--cherry-pick", "--right-only", "--no-merges", "main...topic"): "\n",
    }

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        assert git.ref_list("main", "topic") == []


def test_ref_list_failure_names_the_range() -> None:
    calls: list[list[str]] = []
    git = RealGit()

    with patch(_RUN, side_effect=_scripted_git({}, calls)):
        with pytest.raises(GitCommandError, match=r"rev-list for main\.\.\.topic"):
            git.ref_list("main", "topic")


def test_config_failure_names_the_key() -> None:
    calls: list[list[str]] = []
    git = RealGit()

    with patch(_RUN, side_effect=_scripted_git({}, calls)):
        with pytest.raises(GitCommandError, match="user.email"):
            git.config("user.email")


def test_config_all_returns_every_value() -> None:
    calls: list[list[str]] = []
    git = RealGit()
    responses = {("config", "--get-all", "remote.origin.fetch"): "a\nb\n"}

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        assert git.config_all("remote.origin.fetch") == ["a", "b"]


def test_comment_char_defaults_to_hash() -> None:
    calls: list[list[str]] = []
    git = RealGit()

    with patch(_RUN, side_effect=_scripted_git({}, calls)):
        assert git.comment_char() == "#"

    with patch(_RUN, side_effect=_scripted_git({("config", "core.commentchar"): ";\n"}, calls)):
        assert git.comment_char() == ";"


def test_global_config_round_trip_commands() -> None:
    calls: list[list[str]] = []
    git = RealGit()
    responses = {
        ("config", "--global", "rehub.protocol", "ssh"): "",
        ("config", "--global", "rehub.protocol"): "ssh\n",
    }

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        git.set_global_config("rehub.protocol", "ssh")
        assert git.global_config("rehub.protocol") == "ssh"


def test_remote_names_are_unique_and_ordered() -> None:
    calls: list[list[str]] = []
    git = RealGit()
    output = (
        "origin\thttps://github.com/o/r.git (fetch)\n"
        "origin\thttps://github.com/o/r.git (push)\n"
        "fork\tgit@github.com:f/r.git (fetch)\n"
        "fork\tgit@github.com:f/r.git (push)\n"
    )

    with patch(_RUN, side_effect=_scripted_git({("remote", "-v"): output}, calls)):
        assert git.remote_names() == ["origin", "fork"]
        assert git.remote_exists("fork") is True
        assert git.remote_exists("upstream") is False


def test_editor_expands_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REHUB_TEST_EDITOR", "nano")
    calls: list[list[str]] = []
    git = RealGit()
    responses = {("var", "GIT_EDITOR"): "$REHUB_TEST_EDITOR -w\n"}

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        assert git.editor() == "nano -w"


def test_show_and_log_use_fixed_formats() -> None:
    calls: list[list[str]] = []
    git = RealGit()
    log_format = "--format=%h (%aN, %ar)%n%w(78,3,3)%s%n%+b"
    responses = {
        ("show", "-s", "--format=%s%n%+b", "abc"): "Subject\n\nBody\n\n",
        ("log", "--no-color", log_format, "--cherry", "a...b"): "abc (me, now)\n   Subject\n",
    }

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        assert git.show("abc") == "Subject\n\nBody"
        assert git.log("a", "b") == "abc (me, now)\n   Subject\n"


def test_is_git_dir() -> None:
    calls: list[list[str]] = []
    git = RealGit()
    responses = {("--git-dir=/repo/.git", "rev-parse", "--git-dir"): "/repo/.git\n"}

    with patch(_RUN, side_effect=_scripted_git(responses, calls)):
        assert git.is_git_dir(Path("/repo/.git")) is True
        assert git.is_git_dir(Path("/nowhere")) is False
