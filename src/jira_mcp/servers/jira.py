"""Jira tool catalogue: input records and handlers."""

import logging
from typing import Annotated

from pydantic import Field

from jira_mcp.formatting import (
    format_added_comment,
    format_comments,
    format_created_child_issue,
    format_created_issue,
    format_issue,
    format_issue_types,
    format_issues,
)
from jira_mcp.jira.constants import DEFAULT_CHILD_ISSUE_TYPE, DEFAULT_EXPAND

from .context import ToolContext
from .registry import ToolCatalogue, ToolInput

logger = logging.getLogger("jira-mcp.servers.jira")

jira_tools = ToolCatalogue("jira")

IssueKey = Annotated[
    str,
    Field(description="The unique identifier of the Jira issue (e.g., KP-2, PROJ-123)"),
]
Assignee = Annotated[
    str | None,
    Field(description="Username or email of the person to assign the issue to (optional)"),
]
Reporter = Annotated[
    str | None,
    Field(description="Username or email of the person who reported the issue (optional)"),
]
EpicLink = Annotated[
    str | None,
    Field(description="Epic key to link this issue to (e.g., EPIC-123)"),
]
FieldsFilter = Annotated[
    str | None,
    Field(
        description="Comma-separated list of fields to retrieve "
        "(e.g., 'summary,status,assignee'). If not specified, all fields are returned."
    ),
]


class GetIssueInput(ToolInput):
    issue_key: IssueKey
    fields: FieldsFilter = None
    expand: Annotated[
        str | None,
        Field(
            description="Comma-separated list of fields to expand for additional details "
            f"(e.g., 'transitions,changelog,subtasks'). Default: '{DEFAULT_EXPAND}'"
        ),
    ] = None


class CreateIssueInput(ToolInput):
    project_key: Annotated[
        str,
        Field(description="Project identifier where the issue will be created (e.g., KP, PROJ)"),
    ]
    summary: Annotated[str, Field(description="Brief title or headline of the issue")]
    description: Annotated[str, Field(description="Detailed explanation of the issue")]
    issue_type: Annotated[
        str,
        Field(description="Type of issue to create (common types: Bug, Task, Subtask, Story, Epic)"),
    ]
    assignee: Assignee = None
    reporter: Reporter = None
    epic_name: Annotated[
        str | None,
        Field(
            description="Epic name (required when creating Epic issues; "
            "defaults to summary if not provided)"
        ),
    ] = None
    epic_link: EpicLink = None


class CreateChildIssueInput(ToolInput):
    parent_issue_key: Annotated[
        str,
        Field(
            description="The parent issue key to which this child issue will be linked (e.g., KP-2)"
        ),
    ]
    summary: Annotated[str, Field(description="Brief title or headline of the child issue")]
    description: Annotated[str, Field(description="Detailed explanation of the child issue")]
    issue_type: Annotated[
        str | None,
        Field(
            description="Type of child issue to create "
            f"(defaults to '{DEFAULT_CHILD_ISSUE_TYPE}' if not specified)"
        ),
    ] = None
    assignee: Assignee = None
    reporter: Reporter = None


class UpdateIssueInput(ToolInput):
    issue_key: Annotated[
        str, Field(description="The unique identifier of the issue to update (e.g., KP-2)")
    ]
    summary: Annotated[str | None, Field(description="New title for the issue (optional)")] = None
    description: Annotated[
        str | None, Field(description="New description for the issue (optional)")
    ] = None
    assignee: Assignee = None
    reporter: Reporter = None
    epic_link: EpicLink = None


class ListIssueTypesInput(ToolInput):
    project_key: Annotated[
        str,
        Field(description="Project identifier to list issue types for (e.g., KP, PROJ)"),
    ]


class SearchIssueInput(ToolInput):
    jql: Annotated[
        str,
        Field(
            description="JQL query string (e.g., 'project = KP AND status = \"In Progress\"')"
        ),
    ]
    fields: FieldsFilter = None
    expand: Annotated[
        str | None,
        Field(
            description="Comma-separated list of fields to expand for additional details "
            "(e.g., 'transitions,changelog,subtasks,description')."
        ),
    ] = None


class TransitionIssueInput(ToolInput):
    issue_key: Annotated[str, Field(description="The issue to transition (e.g., KP-123)")]
    transition_id: Annotated[
        str, Field(description="Transition ID from available transitions list")
    ]
    comment: Annotated[
        str | None, Field(description="Optional comment to add with transition")
    ] = None


class AddCommentInput(ToolInput):
    issue_key: IssueKey
    comment: Annotated[str, Field(description="The comment text to add to the issue")]


class GetCommentsInput(ToolInput):
    issue_key: IssueKey


@jira_tools.tool(
    name="get_issue",
    description="Retrieve detailed information about a specific Jira issue including its "
    "status, assignee, description, subtasks, and available transitions",
    input_model=GetIssueInput,
    read_only=True,
)
async def get_issue(ctx: ToolContext, args: GetIssueInput) -> str:
    issue = await ctx.jira.get_issue(
        args.issue_key, fields=args.fields, expand=args.expand or DEFAULT_EXPAND
    )
    return format_issue(issue)


@jira_tools.tool(
    name="create_issue",
    description="Create a new Jira issue with specified details. "
    "Returns the created issue's key, ID, and URL",
    input_model=CreateIssueInput,
)
async def create_issue(ctx: ToolContext, args: CreateIssueInput) -> str:
    created = await ctx.jira.create_issue(
        project_key=args.project_key,
        summary=args.summary,
        description=args.description,
        issue_type=args.issue_type,
        assignee=args.assignee,
        reporter=args.reporter,
        epic_name=args.epic_name,
        epic_link=args.epic_link,
    )
    return format_created_issue(created)


@jira_tools.tool(
    name="create_child_issue",
    description="Create a child issue (sub-task) linked to a parent issue in Jira. "
    "Returns the created issue's key, ID, and URL",
    input_model=CreateChildIssueInput,
)
async def create_child_issue(ctx: ToolContext, args: CreateChildIssueInput) -> str:
    issue_type = args.issue_type or DEFAULT_CHILD_ISSUE_TYPE
    created = await ctx.jira.create_child_issue(
        parent_issue_key=args.parent_issue_key,
        summary=args.summary,
        description=args.description,
        issue_type=issue_type,
        assignee=args.assignee,
        reporter=args.reporter,
    )
    return format_created_child_issue(created, args.parent_issue_key, issue_type)


@jira_tools.tool(
    name="update_issue",
    description="Modify an existing Jira issue's details. "
    "Supports partial updates - only specified fields will be changed",
    input_model=UpdateIssueInput,
)
async def update_issue(ctx: ToolContext, args: UpdateIssueInput) -> str:
    await ctx.jira.update_issue(
        args.issue_key,
        summary=args.summary,
        description=args.description,
        assignee=args.assignee,
        reporter=args.reporter,
        epic_link=args.epic_link,
    )
    return "Issue updated successfully!"


@jira_tools.tool(
    name="list_issue_types",
    description="List all available issue types in a Jira project with their IDs, names, "
    "descriptions, and other attributes",
    input_model=ListIssueTypesInput,
    operation="get issue types",
    read_only=True,
)
async def list_issue_types(ctx: ToolContext, args: ListIssueTypesInput) -> str:
    # Jira's v2 issuetype endpoint is instance-wide
    logger.debug(f"Listing issue types (requested for project {args.project_key})")
    issue_types = await ctx.jira.get_issue_types()
    return format_issue_types(issue_types)


@jira_tools.tool(
    name="search_issue",
    description="Search for Jira issues using JQL (Jira Query Language). Returns key details "
    "like summary, status, assignee, and priority for matching issues",
    input_model=SearchIssueInput,
    operation="search issues",
    read_only=True,
)
async def search_issue(ctx: ToolContext, args: SearchIssueInput) -> str:
    issues = await ctx.jira.search_issues(
        args.jql, fields=args.fields, expand=args.expand or DEFAULT_EXPAND
    )
    return format_issues(issues)


@jira_tools.tool(
    name="transition_issue",
    description="Transition an issue through its workflow using a valid transition ID. "
    "Get available transitions from get_issue",
    input_model=TransitionIssueInput,
)
async def transition_issue(ctx: ToolContext, args: TransitionIssueInput) -> str:
    await ctx.jira.transition_issue(
        args.issue_key, args.transition_id, comment=args.comment
    )
    return "Issue transition completed successfully"


@jira_tools.tool(
    name="add_comment",
    description="Add a comment to a Jira issue",
    input_model=AddCommentInput,
)
async def add_comment(ctx: ToolContext, args: AddCommentInput) -> str:
    comment = await ctx.jira.add_comment(args.issue_key, args.comment)
    return format_added_comment(comment)


@jira_tools.tool(
    name="get_comments",
    description="Retrieve all comments from a Jira issue",
    input_model=GetCommentsInput,
    read_only=True,
)
async def get_comments(ctx: ToolContext, args: GetCommentsInput) -> str:
    comments = await ctx.jira.get_issue_comments(args.issue_key)
    return format_comments(comments)
