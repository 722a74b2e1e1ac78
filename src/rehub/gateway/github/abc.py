"""Abstract interface for fetching pull request metadata."""

from abc import ABC, abstractmethod

from rehub.gateway.github.types import PullRequestNotRetrieved, PullRequestRef


class PullRequestGateway(ABC):
    """Looks up pull requests on a GitHub host.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get_pull_request(
        self, *, host: str, owner: str, repo: str, number: int
    ) -> PullRequestRef | PullRequestNotRetrieved:
        """Fetch head branch and head repository of a pull request.

        Args:
            host: GitHub host, e.g. "github.com"
            owner: Owner of the base repository
            repo: Name of the base repository
            number: Pull request number

        Returns:
            PullRequestRef, or PullRequestNotRetrieved when the lookup failed
        """
        ...
