import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from rehub.gateway.git.abc import Git, GitCommandError
from rehub.gateway.github.url import GitProtocol

VALID_PROTOCOLS: tuple[GitProtocol, ...] = ("https", "ssh", "git")

PROTOCOL_CONFIG_KEY = "rehub.protocol"


@dataclass(frozen=True)
class RehubConfig:
    """In-memory representation of `~/.config/rehub/config.toml`.

    Example config.toml:
      # GitHub Enterprise hosts to recognise besides github.com
      hosts = ["github.example.com"]

      # Protocol for remotes added for pull requests: "https", "ssh" or "git"
      protocol = "ssh"
    """

    hosts: tuple[str, ...]
    protocol: GitProtocol | None


def default_config_path() -> Path:
    override = os.environ.get("REHUB_CONFIG")
    if override:
        return Path(override)
    return Path.home() / ".config" / "rehub" / "config.toml"


def _validate_protocol(value: object, source: str) -> GitProtocol | None:
    if value is None:
        return None
    if value not in VALID_PROTOCOLS:
        expected = ", ".join(VALID_PROTOCOLS)
        msg = f"Invalid protocol {value!r} in {source}; expected one of {expected}"
        raise ValueError(msg)
    return value  # type: ignore[return-value]


def load_config(path: Path | None = None) -> RehubConfig:
    """Load config.toml if present; otherwise return defaults.

    GITHUB_HOST, when set, is accepted as one more GitHub host.

    Raises:
        ValueError: If the file sets an unknown protocol or a non-list hosts
    """
    cfg_path = path if path is not None else default_config_path()
    data: dict = {}
    if cfg_path.exists():
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))

    raw_hosts = data.get("hosts", [])
    if not isinstance(raw_hosts, list):
        msg = f"Invalid hosts {raw_hosts!r} in {cfg_path}; expected a list of host names"
        raise ValueError(msg)
    hosts = [str(h) for h in raw_hosts]
    env_host = os.environ.get("GITHUB_HOST")
    if env_host and env_host not in hosts:
        hosts.append(env_host)

    return RehubConfig(
        hosts=tuple(hosts),
        protocol=_validate_protocol(data.get("protocol"), str(cfg_path)),
    )


def preferred_protocol(git: Git, config: RehubConfig) -> GitProtocol | None:
    """Protocol for new remotes: git config `rehub.protocol`, then config.toml."""
    try:
        value = git.config(PROTOCOL_CONFIG_KEY)
    except GitCommandError:
        return config.protocol
    return _validate_protocol(value, f"git config {PROTOCOL_CONFIG_KEY}")
