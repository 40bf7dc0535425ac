"""Dependency provider for the process-wide JiraFetcher.

The client is built lazily, on the first tool call that needs it, or at startup
when the server runs with an eager client.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from jira_mcp.jira import JiraConfig, JiraFetcher

logger = logging.getLogger("jira-mcp.servers.dependencies")


class JiraClientProvider:
    """Builds exactly one JiraFetcher per process and hands it out.

    Args:
        config: Resolved Jira configuration. Read from the environment on first
            use when None.
        factory: Callable building the client from the configuration.
    """

    def __init__(
        self,
        config: JiraConfig | None = None,
        factory: Callable[[JiraConfig | None], JiraFetcher] = JiraFetcher,
    ) -> None:
        self._config = config
        self._factory = factory
        self._client: JiraFetcher | None = None
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._client is not None

    def get(self) -> JiraFetcher:
        """Return the shared client, building it on the first call."""
        client = self._client
        if client is not None:
            return client

        with self._lock:
            if self._client is None:
                logger.debug("Building Jira client")
                self._client = self._factory(self._config)
                logger.info(f"Jira client ready for {self._client.config.url}")
            return self._client
