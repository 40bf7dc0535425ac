"""
Jira comment models.

This module provides Pydantic models for Jira comments.
"""

from typing import Any

from ..base import ApiModel, as_dict, as_str
from .common import JiraUser


class JiraComment(ApiModel):
    """
    Model representing a Jira issue comment.

    Timestamps are kept as Jira sent them.
    """

    id: str | None = None
    author: JiraUser | None = None
    created: str | None = None
    updated: str | None = None
    body: str = ""

    @classmethod
    def from_api_response(cls, data: Any) -> "JiraComment":
        """
        Create a JiraComment from a Jira API response.

        Args:
            data: The comment data from the Jira API

        Returns:
            A JiraComment instance
        """
        data = as_dict(data)
        body = data.get("body")
        return cls(
            id=as_str(data.get("id")),
            author=JiraUser.from_api_response(data.get("author")),
            created=as_str(data.get("created")),
            updated=as_str(data.get("updated")),
            body=body if isinstance(body, str) else "",
        )
