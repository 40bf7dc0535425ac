"""Jira API module for jira-mcp.

This module provides access to the Jira REST API for the MCP tool handlers.
"""

from .client import JiraClient
from .comments import CommentsMixin
from .config import BasicAuth, BearerAuth, JiraAuth, JiraConfig
from .fields import FieldsMixin
from .issues import IssuesMixin
from .search import SearchMixin
from .transitions import TransitionsMixin


class JiraFetcher(
    IssuesMixin,
    SearchMixin,
    TransitionsMixin,
    CommentsMixin,
    FieldsMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - IssuesMixin: Issue get/create/update and issue type listing
    - SearchMixin: JQL search
    - TransitionsMixin: Workflow transitions
    - CommentsMixin: Comment reading and writing
    - FieldsMixin: Custom field discovery (Epic Link, Epic Name)
    """

    pass


__all__ = [
    "BasicAuth",
    "BearerAuth",
    "JiraAuth",
    "JiraClient",
    "JiraConfig",
    "JiraFetcher",
]
