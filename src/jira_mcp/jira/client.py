"""Base client module for Jira API interactions."""

import logging
from collections.abc import Callable
from functools import partial
from typing import Any, TypeVar

import anyio.to_thread
from atlassian import Jira

from .config import BasicAuth, BearerAuth, JiraConfig
from .constants import API_PREFIX

logger = logging.getLogger("jira-mcp.jira.client")

T = TypeVar("T")


class JiraClient:
    """Base client for Jira API interactions.

    The underlying ``atlassian.Jira`` client is synchronous; every call is run in
    a worker thread so that the event loop keeps serving other tool calls and a
    cancelled tool call returns without waiting for the HTTP round trip.
    """

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from environment variables.

        Raises:
            ConfigError: If no configuration is given and the environment is incomplete.
        """
        self.config = config or JiraConfig.from_env()

        match self.config.auth:
            case BearerAuth(token=token):
                logger.debug("Using Bearer authentication (PAT)")
                self.jira = Jira(
                    url=self.config.url,
                    token=token,
                    cloud=self.config.is_cloud,
                    verify_ssl=self.config.ssl_verify,
                    timeout=self.config.timeout,
                )
            case BasicAuth(username=username, password=password):
                logger.debug("Using Basic authentication (username/password)")
                self.jira = Jira(
                    url=self.config.url,
                    username=username,
                    password=password,
                    cloud=self.config.is_cloud,
                    verify_ssl=self.config.ssl_verify,
                    timeout=self.config.timeout,
                )

        # Custom field ids by field name, filled on demand by FieldsMixin
        self._field_ids: dict[str, str] = {}
        self._field_locks: dict[str, anyio.Lock] = {}

    async def _run(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run a blocking Jira client call in a worker thread."""
        return await anyio.to_thread.run_sync(
            partial(func, *args, **kwargs), abandon_on_cancel=True
        )

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET ``/rest/api/2/<path>``."""
        return await self._run(self.jira.get, f"{API_PREFIX}/{path}", params=params)

    async def _post(self, path: str, data: dict[str, Any]) -> Any:
        """POST ``data`` as JSON to ``/rest/api/2/<path>``."""
        return await self._run(self.jira.post, f"{API_PREFIX}/{path}", data=data)

    async def _put(self, path: str, data: dict[str, Any]) -> Any:
        """PUT ``data`` as JSON to ``/rest/api/2/<path>``."""
        return await self._run(self.jira.put, f"{API_PREFIX}/{path}", data=data)
