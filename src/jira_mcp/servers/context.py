from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jira_mcp.jira import JiraFetcher
    from jira_mcp.servers.dependencies import JiraClientProvider


@dataclass(frozen=True)
class ToolContext:
    """Per-call context handed to tool handlers."""

    clients: JiraClientProvider

    @property
    def jira(self) -> JiraFetcher:
        """The shared Jira client, built on first access."""
        return self.clients.get()
