"""Module for Jira comment operations."""

import logging

from ..exceptions import UpstreamError
from ..models import JiraComment
from ..utils.decorators import handle_jira_api_errors
from .client import JiraClient

logger = logging.getLogger("jira-mcp.jira.comments")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    @handle_jira_api_errors("get comments")
    async def get_issue_comments(self, issue_key: str) -> list[JiraComment]:
        """
        Get comments for a specific issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of comments, oldest first
        """
        comments = await self._get(f"issue/{issue_key}/comment")

        if not isinstance(comments, dict):
            msg = f"unexpected response type from GET /issue/{issue_key}/comment: {type(comments).__name__}"
            logger.error(msg)
            raise UpstreamError(msg)

        return [JiraComment.from_api_response(c) for c in comments.get("comments") or []]

    @handle_jira_api_errors("add comment")
    async def add_comment(self, issue_key: str, comment: str) -> JiraComment:
        """
        Add a comment to an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment: Comment text, in Jira wiki markup

        Returns:
            The created comment
        """
        result = await self._post(f"issue/{issue_key}/comment", data={"body": comment})
        created = JiraComment.from_api_response(result)
        logger.info(f"Added comment {created.id} to {issue_key}")
        return created
