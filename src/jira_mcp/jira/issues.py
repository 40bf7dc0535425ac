"""Module for Jira issue operations."""

import logging
from typing import Any

from ..exceptions import JiraMCPError, UpstreamError
from ..models import JiraIssue, JiraIssueType
from ..utils.decorators import handle_jira_api_errors
from .constants import DEFAULT_CHILD_ISSUE_TYPE, DEFAULT_EXPAND, EPIC_ISSUE_TYPE
from .fields import FieldsMixin

logger = logging.getLogger("jira-mcp.jira.issues")


class IssuesMixin(FieldsMixin):
    """Mixin for Jira issue operations."""

    @handle_jira_api_errors("get issue")
    async def get_issue(
        self,
        issue_key: str,
        fields: str | None = None,
        expand: str | None = DEFAULT_EXPAND,
    ) -> JiraIssue:
        """
        Get a Jira issue by key.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            fields: Comma-separated field filter; all fields when None
            expand: Comma-separated expansions (transitions, changelog, ...)

        Returns:
            The issue projection
        """
        params: dict[str, Any] = {}
        if expand:
            params["expand"] = expand
        if fields:
            params["fields"] = fields
        issue = await self._get(f"issue/{issue_key}", params=params or None)
        return JiraIssue.from_api_response(issue)

    @handle_jira_api_errors("create issue")
    async def create_issue(
        self,
        project_key: str,
        summary: str,
        description: str,
        issue_type: str,
        assignee: str | None = None,
        reporter: str | None = None,
        epic_name: str | None = None,
        epic_link: str | None = None,
    ) -> JiraIssue:
        """
        Create a new Jira issue.

        Epics get their Epic Name custom field set (from ``epic_name``, or the
        summary when absent). ``epic_link`` is written to the discovered Epic
        Link custom field.

        Args:
            project_key: The key of the project (e.g. 'PROJ')
            summary: Summary of the issue
            description: Issue description
            issue_type: Issue type name (e.g. 'Task', 'Bug', 'Epic')
            assignee: Username of the assignee
            reporter: Username of the reporter
            epic_name: Epic Name, only used when creating an Epic
            epic_link: Key of the epic the issue belongs to

        Returns:
            The created issue (key, id and REST URL)
        """
        fields = self._issue_fields(summary, description, assignee, reporter)
        fields["project"] = {"key": project_key}
        fields["issuetype"] = {"name": issue_type}

        if issue_type.lower() == EPIC_ISSUE_TYPE:
            epic_name_field = await self.get_epic_name_field_id()
            fields[epic_name_field] = epic_name or summary

        if epic_link:
            fields[await self.get_epic_link_field_id()] = epic_link

        return await self._create(fields)

    @handle_jira_api_errors("create child issue")
    async def create_child_issue(
        self,
        parent_issue_key: str,
        summary: str,
        description: str,
        issue_type: str | None = None,
        assignee: str | None = None,
        reporter: str | None = None,
    ) -> JiraIssue:
        """
        Create an issue under a parent issue, in the parent's project.

        Args:
            parent_issue_key: Key of the parent issue (e.g. 'PROJ-2')
            summary: Summary of the child issue
            description: Description of the child issue
            issue_type: Issue type name, "Sub-task" when None
            assignee: Username of the assignee
            reporter: Username of the reporter

        Returns:
            The created issue (key, id and REST URL)
        """
        try:
            parent = await self.get_issue(parent_issue_key, fields="project", expand=None)
        except JiraMCPError as e:
            e.operation = "get parent issue"
            raise

        if parent.project is None or not parent.project.key:
            raise UpstreamError(
                f"parent issue {parent_issue_key} did not report its project",
                operation="get parent issue",
            )

        fields = self._issue_fields(summary, description, assignee, reporter)
        fields["project"] = {"key": parent.project.key}
        fields["issuetype"] = {"name": issue_type or DEFAULT_CHILD_ISSUE_TYPE}
        fields["parent"] = {"key": parent_issue_key}

        return await self._create(fields)

    @handle_jira_api_errors("update issue")
    async def update_issue(
        self,
        issue_key: str,
        summary: str | None = None,
        description: str | None = None,
        assignee: str | None = None,
        reporter: str | None = None,
        epic_link: str | None = None,
    ) -> None:
        """
        Update an existing issue. Only the given fields are sent.

        Args:
            issue_key: The key of the issue to update
            summary: New summary
            description: New description
            assignee: Username of the new assignee
            reporter: Username of the new reporter
            epic_link: Key of the epic the issue should belong to
        """
        fields: dict[str, Any] = {}
        if summary:
            fields["summary"] = summary
        if description:
            fields["description"] = description
        if assignee:
            fields["assignee"] = {"name": assignee}
        if reporter:
            fields["reporter"] = {"name": reporter}
        if epic_link:
            fields[await self.get_epic_link_field_id()] = epic_link

        logger.debug(f"Updating {issue_key} fields: {sorted(fields)}")
        await self._put(f"issue/{issue_key}", data={"fields": fields})

    @handle_jira_api_errors("get issue types")
    async def get_issue_types(self) -> list[JiraIssueType]:
        """
        Get all issue types defined in Jira.

        Returns:
            List of issue types
        """
        issue_types = await self._get("issuetype")
        if not isinstance(issue_types, list):
            raise UpstreamError(
                f"unexpected response type from GET /issuetype: {type(issue_types).__name__}"
            )
        return [
            issue_type
            for issue_type in map(JiraIssueType.from_api_response, issue_types)
            if issue_type is not None
        ]

    @staticmethod
    def _issue_fields(
        summary: str,
        description: str,
        assignee: str | None,
        reporter: str | None,
    ) -> dict[str, Any]:
        fields: dict[str, Any] = {"summary": summary, "description": description}
        if assignee:
            fields["assignee"] = {"name": assignee}
        if reporter:
            fields["reporter"] = {"name": reporter}
        return fields

    async def _create(self, fields: dict[str, Any]) -> JiraIssue:
        result = await self._post("issue", data={"fields": fields})
        if not isinstance(result, dict) or not result.get("key"):
            raise UpstreamError(f"unexpected response from POST /issue: {result!r}")
        created = JiraIssue.from_api_response(result)
        logger.info(f"Created issue {created.key}")
        return created
