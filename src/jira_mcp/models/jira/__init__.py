"""Jira data models."""

from .comment import JiraComment
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
from .issue import JiraIssue
from .link import InwardLink, JiraIssueLink, JiraLinkedIssue, OutwardLink

__all__ = [
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
