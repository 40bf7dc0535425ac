"""
Jira issue link models.

A Jira link entry names a link type and carries an ``outwardIssue``, an
``inwardIssue`` or both. Each populated direction becomes one tagged variant so
that rendering is a total match over ``OutwardLink | InwardLink``.
"""

from typing import Annotated, Any, Literal

from pydantic import Field

from ..base import ApiModel, as_dict, as_str


class JiraLinkedIssue(ApiModel):
    """The issue at the other end of a link, or a subtask."""

    key: str | None = None
    summary: str | None = None
    status: str | None = None

    @classmethod
    def from_api_response(cls, data: Any) -> "JiraLinkedIssue | None":
        data = as_dict(data)
        if not data:
            return None
        fields = as_dict(data.get("fields"))
        return cls(
            key=as_str(data.get("key")),
            summary=as_str(fields.get("summary")),
            status=as_str(as_dict(fields.get("status")).get("name")),
        )


class OutwardLink(ApiModel):
    direction: Literal["outward"] = "outward"
    label: str | None = None  # e.g. "blocks"
    issue: JiraLinkedIssue


class InwardLink(ApiModel):
    direction: Literal["inward"] = "inward"
    label: str | None = None  # e.g. "is blocked by"
    issue: JiraLinkedIssue


JiraIssueLink = Annotated[OutwardLink | InwardLink, Field(discriminator="direction")]


def links_from_api_response(data: Any) -> list[OutwardLink | InwardLink]:
    """Expand one Jira ``issuelinks`` entry into its populated directions."""
    data = as_dict(data)
    link_type = as_dict(data.get("type"))
    links: list[OutwardLink | InwardLink] = []

    outward = JiraLinkedIssue.from_api_response(data.get("outwardIssue"))
    if outward is not None:
        links.append(OutwardLink(label=as_str(link_type.get("outward")), issue=outward))

    inward = JiraLinkedIssue.from_api_response(data.get("inwardIssue"))
    if inward is not None:
        links.append(InwardLink(label=as_str(link_type.get("inward")), issue=inward))

    return links
