"""
Common Jira entity models.

Small value objects nested inside issues: users, statuses, issue types,
priorities, resolutions, projects, components, versions and transitions.
"""

from typing import Any

from ..base import ApiModel, as_dict, as_str


class JiraUser(ApiModel):
    """A Jira user as referenced by reporter, assignee, creator or author."""

    display_name: str | None = None
    email: str | None = None
    name: str | None = None

    @classmethod
    def from_api_response(cls, data: Any) -> "JiraUser | None":
        data = as_dict(data)
        if not data:
            return None
        return cls(
            display_name=as_str(data.get("displayName")),
            email=as_str(data.get("emailAddress")),
            name=as_str(data.get("name") or data.get("accountId")),
        )


class JiraStatus(ApiModel):
    name: str | None = None
    description: str | None = None

    @classmethod
    def from_api_response(cls, data: Any) -> "JiraStatus | None":
        data = as_dict(data)
        if not data:
            return None
        return cls(
            name=as_str(data.get("name")),
            description=as_str(data.get("description")),
        )


class JiraIssueType(ApiModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    subtask: bool = False
    icon_url: str | None = None

    @classmethod
    def from_api_response(cls, data: Any) -> "JiraIssueType | None":
        data = as_dict(data)
        if not data:
            return None
        return cls(
            id=as_str(data.get("id")),
            name=as_str(data.get("name")),
            description=as_str(data.get("description")),
            subtask=bool(data.get("subtask", False)),
            icon_url=as_str(data.get("iconUrl")),
        )


class JiraPriority(ApiModel):
    name: str | None = None

    @classmethod
    def from_api_response(cls, data: Any) -> "JiraPriority | None":
        data = as_dict(data)
        if not data:
            return None
        return cls(name=as_str(data.get("name")))


class JiraResolution(ApiModel):
    name: str | None = None
    description: str | None = None

    @classmethod
    def from_api_response(cls, data: Any) -> "JiraResolution | None":
        data = as_dict(data)
        if not data:
            return None
        return cls(
            name=as_str(data.get("name")),
            description=as_str(data.get("description")),
        )


class JiraProject(ApiModel):
    key: str | None = None
    name: str | None = None

    @classmethod
    def from_api_response(cls, data: Any) -> "JiraProject | None":
        data = as_dict(data)
        if not data:
            return None
        return cls(key=as_str(data.get("key")), name=as_str(data.get("name")))


class JiraComponent(ApiModel):
    name: str | None = None
    description: str | None = None

    @classmethod
    def from_api_response(cls, data: Any) -> "JiraComponent":
        data = as_dict(data)
        return cls(
            name=as_str(data.get("name")),
            description=as_str(data.get("description")),
        )


class JiraVersion(ApiModel):
    """A fix version."""

    name: str | None = None
    description: str | None = None

    @classmethod
    def from_api_response(cls, data: Any) -> "JiraVersion":
        data = as_dict(data)
        return cls(
            name=as_str(data.get("name")),
            description=as_str(data.get("description")),
        )


class JiraTransition(ApiModel):
    """A workflow transition available from the issue's current status."""

    id: str | None = None
    name: str | None = None

    @classmethod
    def from_api_response(cls, data: Any) -> "JiraTransition":
        data = as_dict(data)
        return cls(id=as_str(data.get("id")), name=as_str(data.get("name")))
