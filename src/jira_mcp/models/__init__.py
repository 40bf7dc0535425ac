"""
Pydantic models for Jira API responses.

The models project Jira's deeply nested payloads onto the subset of fields the
server renders. Every field is optional.
"""

from .base import ApiModel
from .jira import (
    InwardLink,
    JiraComment,
    JiraComponent,
    JiraIssue,
    JiraIssueLink,
    JiraIssueType,
    JiraLinkedIssue,
    JiraPriority,
    JiraProject,
    JiraResolution,
    JiraStatus,
    JiraTransition,
    JiraUser,
    JiraVersion,
    OutwardLink,
)

__all__ = [
    "ApiModel",
    "InwardLink",
    "JiraComment",
    "JiraComponent",
    "JiraIssue",
    "JiraIssueLink",
    "JiraIssueType",
    "JiraLinkedIssue",
    "JiraPriority",
    "JiraProject",
    "JiraResolution",
    "JiraStatus",
    "JiraTransition",
    "JiraUser",
    "JiraVersion",
    "OutwardLink",
]
