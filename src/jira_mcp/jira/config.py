"""Configuration module for Jira API interactions."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from ..exceptions import ConfigError
from ..utils import getenv, is_atlassian_cloud_url, is_env_ssl_verify, is_valid_http_url
from .constants import DEFAULT_EPIC_NAME_FIELD_ID

logger = logging.getLogger("jira-mcp.jira.config")

DEFAULT_TIMEOUT = 75.0

AUTH_SETUP_INSTRUCTIONS = """\
Choose one of the following authentication methods:

Method 1: Personal Access Token (PAT), for newer Jira versions
  1. Create a token in Jira under Profile > Personal Access Tokens
  2. Set the environment variables:
     JIRA_HOST=http://localhost:8080
     JIRA_PAT=your-personal-access-token

Method 2: Username/Password (basic auth), for older Jira versions (v2 API)
  1. Use your Jira username and password
  2. Set the environment variables:
     JIRA_HOST=http://localhost:8080
     JIRA_USERNAME=your-username
     JIRA_PASSWORD=your-password

Configuration options:
  Option A: put the variables in a .env file and pass it with --env path/to/.env
  Option B: export them in the shell that starts the server, e.g.
     export JIRA_HOST=http://localhost:8080
     export JIRA_PAT=your-personal-access-token"""


@dataclass(frozen=True)
class BearerAuth:
    """Personal access token sent as ``Authorization: Bearer <token>``."""

    token: str


@dataclass(frozen=True)
class BasicAuth:
    """Username and password sent as HTTP basic auth."""

    username: str
    password: str


JiraAuth = BearerAuth | BasicAuth


@dataclass(frozen=True)
class JiraConfig:
    """Jira API configuration.

    Exactly one authentication recipe is held in ``auth``: a personal access
    token (bearer mode) or a username/password pair (basic mode).
    """

    url: str  # Base URL for Jira
    auth: JiraAuth
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: float = DEFAULT_TIMEOUT  # HTTP timeout of the Jira client, in seconds
    request_timeout: float | None = None  # Deadline of a whole tool call, in seconds
    # Explicit Epic Name field id, or "discover" to look it up by name
    epic_name_field: str = DEFAULT_EPIC_NAME_FIELD_ID

    @property
    def auth_type(self) -> Literal["token", "basic"]:
        """Name of the selected authentication mode."""
        return "token" if isinstance(self.auth, BearerAuth) else "basic"

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if this is a cloud instance (atlassian.net), False otherwise.
            Localhost URLs are always considered non-cloud (Server/Data Center).
        """
        return is_atlassian_cloud_url(self.url)

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "JiraConfig":
        """Create configuration from environment variables.

        Resolution order: JIRA_HOST must be a plausible URL; JIRA_PAT selects
        bearer mode (basic credentials are then ignored with a warning);
        otherwise JIRA_USERNAME and JIRA_PASSWORD select basic mode.

        Args:
            env: Mapping consulted instead of os.environ (used by tests).

        Returns:
            The resolved JiraConfig.

        Raises:
            ConfigError: If required variables are missing or invalid. The error
                lists every missing variable.
        """
        host = getenv(env, "JIRA_HOST")
        pat = getenv(env, "JIRA_PAT")
        username = getenv(env, "JIRA_USERNAME")
        password = getenv(env, "JIRA_PASSWORD")

        missing_auth = _missing_auth_variables(pat, username, password)

        if not host:
            raise ConfigError("host missing", missing=["JIRA_HOST", *missing_auth])
        if not is_valid_http_url(host):
            raise ConfigError(f"JIRA_HOST is not a valid http(s) URL: {host}")

        auth: JiraAuth
        if pat:
            if username or password:
                logger.warning(
                    "Both JIRA_PAT and JIRA_USERNAME/JIRA_PASSWORD are set; using the PAT"
                )
            auth = BearerAuth(token=pat)
        elif username and password:
            auth = BasicAuth(username=username, password=password)
        else:
            raise ConfigError(
                "missing Jira credentials: "
                + ", ".join(missing_auth)
                + ". Set JIRA_PAT, or JIRA_USERNAME and JIRA_PASSWORD",
                missing=missing_auth,
            )

        return cls(
            url=host.rstrip("/"),
            auth=auth,
            ssl_verify=is_env_ssl_verify(env, "JIRA_SSL_VERIFY"),
            timeout=_parse_seconds(env, "JIRA_TIMEOUT", DEFAULT_TIMEOUT),
            request_timeout=_parse_seconds(env, "JIRA_REQUEST_TIMEOUT", None),
            epic_name_field=getenv(env, "JIRA_EPIC_NAME_FIELD", DEFAULT_EPIC_NAME_FIELD_ID),
        )


def _missing_auth_variables(
    pat: str | None, username: str | None, password: str | None
) -> list[str]:
    if pat or (username and password):
        return []
    missing = []
    if not username:
        missing.append("JIRA_USERNAME (for basic auth)")
    if not password:
        missing.append("JIRA_PASSWORD (for basic auth)")
    missing.append("JIRA_PAT (for token auth)")
    return missing


def _parse_seconds(
    env: Mapping[str, str] | None, name: str, default: float | None
) -> float | None:
    raw = getenv(env, name)
    if raw is None:
        return default
    try:
        seconds = float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number of seconds, got {raw!r}") from e
    if seconds <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return seconds
