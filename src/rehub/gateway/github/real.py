"""Production pull request gateway using the gh CLI."""

import json
import logging
from typing import Any

from rehub.gateway.github.abc import PullRequestGateway
from rehub.gateway.github.types import HeadRepository, PullRequestNotRetrieved, PullRequestRef
from rehub.subprocess_utils import CommandFailedError, run_subprocess_with_context

logger = logging.getLogger(__name__)

# Timeout in seconds for gh API calls.
_GH_COMMAND_TIMEOUT = 60


def parse_pull_request(number: int, data: dict[str, Any]) -> PullRequestRef:
    """Build a PullRequestRef from a REST ``pulls/<number>`` response.

    Raises:
        KeyError, TypeError: If the payload lacks the expected fields
    """
    head = data["head"]
    repo = head.get("repo")
    head_repo = None
    if repo is not None:
        head_repo = HeadRepository(
            name=repo["name"],
            owner_login=repo["owner"]["login"],
            is_private=bool(repo.get("private", False)),
        )
    return PullRequestRef(number=number, head_ref=head["ref"], head_repo=head_repo)


class RealPullRequestGateway(PullRequestGateway):
    """Production implementation using ``gh api``.

    Authentication, enterprise hosts and proxies are whatever gh is set up for.
    """

    def get_pull_request(
        self, *, host: str, owner: str, repo: str, number: int
    ) -> PullRequestRef | PullRequestNotRetrieved:
        endpoint = f"repos/{owner}/{repo}/pulls/{number}"
        try:
            result = run_subprocess_with_context(
                ["gh", "api", "--hostname", host, endpoint],
                operation_context=f"fetch pull request #{number} from {host}/{owner}/{repo}",
                timeout=_GH_COMMAND_TIMEOUT,
            )
        except CommandFailedError as e:
            return PullRequestNotRetrieved(number=number, message=str(e))

        try:
            pull_request = parse_pull_request(number, json.loads(result.stdout))
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            logger.debug("unexpected payload for %s: %r", endpoint, result.stdout)
            return PullRequestNotRetrieved(
                number=number,
                message=f"Unexpected response for pull request #{number}: {e}",
            )
        return pull_request
