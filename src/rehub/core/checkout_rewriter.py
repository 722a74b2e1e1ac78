"""Rewrite `git checkout <pull request URL>` into fetch/track/checkout steps.

Given

    checkout https://github.com/jingweno/gh/pull/73

the rewrite produces

    remote add -f --no-tags -t feature jingweno https://github.com/jingweno/gh.git
    checkout --track -B jingweno-feature jingweno/feature

Anything that is not a pull request URL comes back as NotApplicable so the
invocation reaches git unchanged.
"""

import logging
from dataclasses import dataclass
from typing import Literal

from rehub.cli.config import preferred_protocol
from rehub.core.context import RehubContext
from rehub.core.invocation import Invocation
from rehub.gateway.github.types import PullRequestNotRetrieved, PullRequestRef
from rehub.gateway.github.url import parse_github_url

logger = logging.getLogger(__name__)

# Flags that create a branch of their own and would fight the one the rewrite creates.
UNSUPPORTED_FLAGS = ("-b", "--orphan")

CheckoutErrorType = Literal[
    "unsupported-flag", "pr-not-retrieved", "fork-unavailable", "invalid-protocol"
]


@dataclass(frozen=True)
class NotApplicable:
    """The invocation does not target a pull request; run it as-is."""


@dataclass(frozen=True)
class CheckoutRewritten:
    """Rewritten copy of the invocation, with its setup commands queued."""

    invocation: Invocation
    pull_request: PullRequestRef


@dataclass(frozen=True)
class CheckoutRewriteError:
    """The invocation targets a pull request but cannot be rewritten.

    Implements NonIdealState.
    """

    message: str
    kind: CheckoutErrorType

    @property
    def error_type(self) -> str:
        return self.kind


def rewrite_checkout(
    ctx: RehubContext, invocation: Invocation
) -> NotApplicable | CheckoutRewritten | CheckoutRewriteError:
    """Classify a checkout invocation and rewrite it if it names a pull request.

    ``invocation`` itself is never modified; a rewrite works on a copy.
    """
    words = invocation.words()
    if not words:
        return NotApplicable()

    checkout_url = words[0]
    new_branch_name = words[1] if len(words) > 1 else None

    url = parse_github_url(checkout_url, ctx.config.hosts)
    if url is None:
        logger.debug("%r is not a GitHub URL", checkout_url)
        return NotApplicable()

    number = url.pull_request_number()
    if number is None:
        logger.debug("%r is not a pull request URL", checkout_url)
        return NotApplicable()

    for flag in UNSUPPORTED_FLAGS:
        if invocation.index_of_param(flag) is not None:
            return CheckoutRewriteError(
                message=f"Unsupported flag {flag} when checking out pull request",
                kind="unsupported-flag",
            )

    pull_request = ctx.pull_requests.get_pull_request(
        host=url.host, owner=url.owner, repo=url.name, number=number
    )
    if isinstance(pull_request, PullRequestNotRetrieved):
        return CheckoutRewriteError(message=pull_request.message, kind="pr-not-retrieved")

    rewritten = invocation.copy()
    if new_branch_name is not None:
        idx = rewritten.index_of_param(new_branch_name)
        if idx is not None:
            rewritten.remove_param(idx)

    head_repo = pull_request.head_repo
    if head_repo is None:
        return CheckoutRewriteError(
            message="that fork is not available anymore", kind="fork-unavailable"
        )

    branch = pull_request.head_ref
    user = head_repo.owner_login
    if new_branch_name is None:
        new_branch_name = f"{user}-{branch}"

    if ctx.git.remote_exists(user):
        rewritten.queue_before("remote", "set-branches", "--add", user, branch)
        rewritten.queue_before("fetch", user, f"+refs/heads/{branch}:refs/remotes/{user}/{branch}")
    else:
        try:
            protocol = preferred_protocol(ctx.git, ctx.config)
        except ValueError as e:
            return CheckoutRewriteError(message=str(e), kind="invalid-protocol")
        clone_url = url.git_url(
            name=head_repo.name,
            owner=user,
            is_private=head_repo.is_private,
            preferred_protocol=protocol,
        )
        rewritten.queue_before("remote", "add", "-f", "--no-tags", "-t", branch, user, clone_url)

    url_index = rewritten.index_of_param(checkout_url)
    # words[0] came from params, so the URL token is always present
    assert url_index is not None
    rewritten.remove_param(url_index)
    rewritten.insert_params(url_index, "--track", "-B", new_branch_name, f"{user}/{branch}")

    logger.debug("rewrote checkout of pull request #%d: %s", number, rewritten.commands())
    return CheckoutRewritten(invocation=rewritten, pull_request=pull_request)
