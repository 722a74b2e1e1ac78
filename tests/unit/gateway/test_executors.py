"""Tests for command executors."""

from subprocess import CompletedProcess
from unittest.mock import patch

import pytest

from rehub.gateway.executor.dry_run import DryRunCommandExecutor
from rehub.gateway.executor.fake import FakeCommandExecutor
from rehub.gateway.executor.printing import PrintingCommandExecutor
from rehub.gateway.executor.real import RealCommandExecutor


def test_real_executor_prefixes_global_flags() -> None:
    executor = RealCommandExecutor(global_flags=["-C", "/work"])

    with patch(
        "rehub.gateway.executor.real.subprocess.run", return_value=CompletedProcess([], 3)
    ) as mock_run:
        status = executor.run(["checkout", "main"])

    assert status == 3
    assert mock_run.call_args.args[0] == ["git", "-C", "/work", "checkout", "main"]


def test_real_executor_missing_git() -> None:
    executor = RealCommandExecutor(global_flags=[], git_binary="definitely-not-git-xyz")

    assert executor.run(["status"]) == 127


def test_printing_executor_echoes_then_delegates(capsys: pytest.CaptureFixture[str]) -> None:
    inner = FakeCommandExecutor()
    executor = PrintingCommandExecutor(inner, global_flags=["-C", "my dir"])

    status = executor.run(["checkout", "--track", "-B", "b", "o/b"])

    assert status == 0
    assert inner.executed == [("checkout", "--track", "-B", "b", "o/b")]
    assert "git -C 'my dir' checkout --track -B b o/b" in capsys.readouterr().err


def test_dry_run_executor_always_succeeds() -> None:
    assert DryRunCommandExecutor().run(["push", "--force"]) == 0
