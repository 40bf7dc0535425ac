"""Module for Jira search operations."""

import logging
from typing import Any

from ..exceptions import UpstreamError
from ..formatting import format_issue_compact
from ..models import JiraIssue
from ..utils.decorators import handle_jira_api_errors
from .client import JiraClient
from .constants import DEFAULT_EXPAND, SEARCH_MAX_RESULTS, SEARCH_START_AT

logger = logging.getLogger("jira-mcp.jira.search")


def split_fields(fields: str | None) -> list[str]:
    """Turn a user supplied "summary, status" filter into ["summary", "status"]."""
    if not fields:
        return []
    return [field for field in fields.replace(" ", "").split(",") if field]


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    @handle_jira_api_errors("search issues")
    async def search_issues(
        self,
        jql: str,
        fields: str | None = None,
        expand: str | None = DEFAULT_EXPAND,
    ) -> list[JiraIssue]:
        """
        Search for issues using JQL (Jira Query Language).

        Only the first page is fetched (``startAt=0``, ``maxResults=30``).

        Args:
            jql: JQL query string
            fields: Comma-separated fields to return; all fields when None
            expand: Comma-separated expansions

        Returns:
            The matching issues, in Jira's order
        """
        params: dict[str, Any] = {
            "jql": jql,
            "startAt": SEARCH_START_AT,
            "maxResults": SEARCH_MAX_RESULTS,
        }
        if expand:
            params["expand"] = expand
        field_list = split_fields(fields)
        if field_list:
            params["fields"] = ",".join(field_list)

        response = await self._get("search", params=params)

        if isinstance(response, dict):
            raw_issues = response.get("issues") or []
        elif isinstance(response, list):
            raw_issues = response
        else:
            raise UpstreamError(
                f"unexpected response type from GET /search: {type(response).__name__}"
            )

        issues = [JiraIssue.from_api_response(issue) for issue in raw_issues]
        logger.debug(f"JQL '{jql}' matched {len(issues)} issue(s)")
        for issue in issues:
            logger.debug(format_issue_compact(issue))
        return issues
