"""Fake pull request gateway for testing."""

from rehub.gateway.github.abc import PullRequestGateway
from rehub.gateway.github.types import PullRequestNotRetrieved, PullRequestRef


class FakePullRequestGateway(PullRequestGateway):
    """In-memory fake implementation.

    Constructor Injection: ``pull_requests`` maps (host, owner, repo, number)
    to the PullRequestRef to serve. Anything else is reported as not found.
    Mutation Tracking: ``requests`` lists every lookup in order.
    """

    def __init__(
        self,
        *,
        pull_requests: dict[tuple[str, str, str, int], PullRequestRef] | None = None,
    ) -> None:
        self._pull_requests = pull_requests if pull_requests is not None else {}
        self._requests: list[tuple[str, str, str, int]] = []

    def get_pull_request(
        self, *, host: str, owner: str, repo: str, number: int
    ) -> PullRequestRef | PullRequestNotRetrieved:
        key = (host, owner, repo, number)
        self._requests.append(key)
        if key not in self._pull_requests:
            return PullRequestNotRetrieved(
                number=number,
                message=f"Could not find pull request #{number} in {owner}/{repo}",
            )
        return self._pull_requests[key]

    @property
    def requests(self) -> list[tuple[str, str, str, int]]:
        """Read-only access to lookups for test assertions."""
        return list(self._requests)
