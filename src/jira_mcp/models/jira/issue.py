"""
Jira issue models.

This module provides the Pydantic projection of a Jira issue: the subset of
the issue aggregate that the server renders.
"""

import logging
from datetime import datetime
from typing import Any

from pydantic import Field

from ...utils.date import parse_jira_datetime
from ..base import ApiModel, as_dict, as_str
from .common import (
    JiraComponent,
    JiraIssueType,
    JiraPriority,
    JiraProject,
    JiraResolution,
    JiraStatus,
    JiraTransition,
    JiraUser,
    JiraVersion,
)
from .link import JiraIssueLink, JiraLinkedIssue, links_from_api_response

logger = logging.getLogger("jira-mcp.models.issue")


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.

    Field order follows the order in which the formatter renders them.
    """

    key: str = ""
    id: str | None = None
    url: str | None = None  # the REST "self" link
    summary: str | None = None
    description: str | None = None
    issue_type: JiraIssueType | None = None
    status: JiraStatus | None = None
    priority: JiraPriority | None = None
    resolution: JiraResolution | None = None
    reporter: JiraUser | None = None
    assignee: JiraUser | None = None
    creator: JiraUser | None = None
    created: datetime | None = None
    updated: datetime | None = None
    project: JiraProject | None = None
    parent_key: str | None = None
    labels: list[str] = Field(default_factory=list)
    components: list[JiraComponent] = Field(default_factory=list)
    fix_versions: list[JiraVersion] = Field(default_factory=list)
    subtasks: list[JiraLinkedIssue] = Field(default_factory=list)
    issue_links: list[JiraIssueLink] = Field(default_factory=list)
    transitions: list[JiraTransition] = Field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API (``GET /issue/{key}``, an entry of
                ``GET /search`` or the body returned by ``POST /issue``)

        Returns:
            A JiraIssue instance
        """
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary issue data, returning default instance")
            return cls()

        fields = as_dict(data.get("fields"))

        description = fields.get("description")
        if not isinstance(description, str):
            # Cloud may send ADF documents even on v2 endpoints
            description = None

        subtasks = [
            subtask
            for subtask in map(JiraLinkedIssue.from_api_response, _as_list(fields.get("subtasks")))
            if subtask is not None
        ]
        issue_links = [
            link
            for entry in _as_list(fields.get("issuelinks"))
            for link in links_from_api_response(entry)
        ]

        return cls(
            key=as_str(data.get("key")) or "",
            id=as_str(data.get("id")),
            url=as_str(data.get("self")),
            summary=as_str(fields.get("summary")),
            description=description or None,
            issue_type=JiraIssueType.from_api_response(fields.get("issuetype")),
            status=JiraStatus.from_api_response(fields.get("status")),
            priority=JiraPriority.from_api_response(fields.get("priority")),
            resolution=JiraResolution.from_api_response(fields.get("resolution")),
            reporter=JiraUser.from_api_response(fields.get("reporter")),
            assignee=JiraUser.from_api_response(fields.get("assignee")),
            creator=JiraUser.from_api_response(fields.get("creator")),
            created=parse_jira_datetime(fields.get("created")),
            updated=parse_jira_datetime(fields.get("updated")),
            project=JiraProject.from_api_response(fields.get("project")),
            parent_key=as_str(as_dict(fields.get("parent")).get("key")),
            labels=[str(label) for label in _as_list(fields.get("labels")) if label],
            components=[
                JiraComponent.from_api_response(c) for c in _as_list(fields.get("components"))
            ],
            fix_versions=[
                JiraVersion.from_api_response(v) for v in _as_list(fields.get("fixVersions"))
            ],
            subtasks=subtasks,
            issue_links=issue_links,
            transitions=[
                JiraTransition.from_api_response(t) for t in _as_list(data.get("transitions"))
            ],
        )


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []
