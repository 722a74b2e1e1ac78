"""Parsing of GitHub web URLs and derivation of clone URLs."""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal
from urllib.parse import urlparse

GitProtocol = Literal["https", "ssh", "git"]

DEFAULT_GITHUB_HOST = "github.com"

_PULL_REQUEST_PATH = re.compile(r"pull/(\d+)")


@dataclass(frozen=True)
class GitHubURL:
    """A URL pointing somewhere inside a GitHub project.

    Attributes:
        host: Lower-cased host without a leading "www."
        owner: Project owner (user or organisation)
        name: Project name without a ".git" suffix
        protocol: URL scheme the user pasted ("https" or "http")
        project_path: Path below owner/name, e.g. "pull/73"; "" for the project root
    """

    host: str
    owner: str
    name: str
    protocol: str
    project_path: str

    def pull_request_number(self) -> int | None:
        """Pull request number if the URL is exactly a pull request page."""
        match = _PULL_REQUEST_PATH.fullmatch(self.project_path)
        if match is None:
            return None
        return int(match.group(1))

    def git_url(
        self,
        *,
        name: str,
        owner: str,
        is_private: bool,
        preferred_protocol: GitProtocol | None,
    ) -> str:
        """Clone URL for another repository on the same host.

        An explicit https preference wins. Private repositories and an ssh
        preference use ssh, since anonymous transports cannot read them.
        Without a preference the protocol of the pasted URL decides.
        """
        protocol = preferred_protocol
        if protocol is None and self.protocol == "https":
            protocol = "https"

        if protocol == "https":
            return f"https://{self.host}/{owner}/{name}.git"
        if is_private or protocol == "ssh":
            return f"git@{self.host}:{owner}/{name}.git"
        return f"git://{self.host}/{owner}/{name}.git"


def normalize_host(host: str) -> str:
    host = host.lower()
    if host.startswith("www."):
        host = host[len("www.") :]
    return host


def parse_github_url(url: str, hosts: Iterable[str]) -> GitHubURL | None:
    """Parse a GitHub web URL.

    Args:
        url: Candidate URL, e.g. "https://github.com/owner/repo/pull/73"
        hosts: Accepted GitHub hosts besides github.com

    Returns:
        GitHubURL, or None when ``url`` is not a URL into a known GitHub project

    Example:
        >>> parse_github_url("https://github.com/jingweno/gh/pull/73", []).project_path
        'pull/73'
    """
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError:
        return None

    if parsed.scheme not in ("http", "https") or not hostname:
        return None

    host = normalize_host(hostname)
    known = {DEFAULT_GITHUB_HOST, *(normalize_host(h) for h in hosts)}
    if host not in known:
        return None

    segments = [s for s in parsed.path.split("/") if s]
    if len(segments) < 2:
        return None

    owner, name = segments[0], segments[1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    if not name:
        return None

    return GitHubURL(
        host=host,
        owner=owner,
        name=name,
        protocol=parsed.scheme,
        project_path="/".join(segments[2:]),
    )
