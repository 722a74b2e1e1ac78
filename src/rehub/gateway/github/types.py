"""Type definitions for GitHub operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HeadRepository:
    """The repository a pull request's commits come from (often a fork)."""

    name: str
    owner_login: str
    is_private: bool


@dataclass(frozen=True)
class PullRequestRef:
    """The parts of a pull request needed to check it out locally.

    head_repo is None when the fork the pull request came from was deleted.
    """

    number: int
    head_ref: str  # Branch name in the head repository
    head_repo: HeadRepository | None


@dataclass(frozen=True)
class PullRequestNotRetrieved:
    """Pull request metadata could not be fetched. Implements NonIdealState."""

    number: int
    message: str

    @property
    def error_type(self) -> str:
        return "pr-not-retrieved"
