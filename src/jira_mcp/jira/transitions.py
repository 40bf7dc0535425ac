"""Module for Jira transition operations."""

import logging
from typing import Any

from ..utils.decorators import handle_jira_api_errors
from .client import JiraClient

logger = logging.getLogger("jira-mcp.jira.transitions")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    # Jira answers 400 when the transition is not available from the current status
    @handle_jira_api_errors("transition issue", conflict_statuses=frozenset({400, 409}))
    async def transition_issue(
        self,
        issue_key: str,
        transition_id: str,
        comment: str | None = None,
    ) -> None:
        """
        Move an issue through a workflow transition.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            transition_id: Id of the transition, as listed under the issue's
                available transitions
            comment: Optional comment added as part of the transition
        """
        payload: dict[str, Any] = {"transition": {"id": transition_id}}
        if comment:
            payload["update"] = {"comment": [{"add": {"body": comment}}]}

        logger.debug(f"Transitioning {issue_key} with transition {transition_id}")
        await self._post(f"issue/{issue_key}/transitions", data=payload)
