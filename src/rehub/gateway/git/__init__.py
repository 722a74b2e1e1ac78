"""Git plumbing gateway."""

from rehub.gateway.git.abc import Git as Git
from rehub.gateway.git.abc import GitCommandError as GitCommandError
from rehub.gateway.git.abc import split_output_lines as split_output_lines
from rehub.gateway.git.fake import FakeGit as FakeGit
from rehub.gateway.git.real import RealGit as RealGit
