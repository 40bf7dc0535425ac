"""Plain-text rendering of Jira entities for tool results.

Every function here is pure: equal inputs give byte-identical output. Absent
values are left out, except the ``Unassigned``/``None`` sentinels for people
and priority, which are always shown so a reader can tell "empty" from
"not fetched".
"""

from collections.abc import Iterable, Sequence

from .models import (
    InwardLink,
    JiraComment,
    JiraIssue,
    JiraIssueLink,
    JiraIssueType,
    JiraUser,
    OutwardLink,
)
from .utils.date import format_jira_datetime

ISSUE_SEPARATOR = "\n===\n"
NO_ISSUES_FOUND = "No issues found matching the search criteria."
NO_COMMENTS_FOUND = "No comments found for this issue."
NO_ISSUE_TYPES_FOUND = "No issue types found for this project."
BUG_LINK_HINT = (
    "A bug should be linked to a Story or Task. Next step should be to create "
    "relationship between the bug and the story or task."
)


def _with_detail(text: str, detail: str | None) -> str:
    return f"{text} ({detail})" if detail else text


def _person(user: JiraUser) -> str:
    return _with_detail(user.display_name or "", user.email)


def _bulleted(header: str, items: Iterable[str]) -> list[str]:
    body = [f"- {item}" for item in items]
    return [f"{header}:", *body] if body else []


def _link_line(link: JiraIssueLink) -> str:
    match link:
        case OutwardLink(label=label, issue=target) | InwardLink(label=label, issue=target):
            line = " ".join(part for part in (label, target.key) if part)
            if target.summary:
                line = f"{line}: {target.summary}"
            return line


def format_issue(issue: JiraIssue) -> str:
    """
    Render an issue as a multi-line text block.

    Fields appear in a fixed order: identity, summary and description, type,
    status, priority, resolution, people, dates, project, parent, then the
    bulleted lists, and finally the available transitions.

    Args:
        issue: The issue projection

    Returns:
        The rendered issue, one ``Label: value`` per line
    """
    lines = [f"Key: {issue.key}"]
    if issue.id:
        lines.append(f"ID: {issue.id}")
    if issue.url:
        lines.append(f"URL: {issue.url}")
    if issue.summary:
        lines.append(f"Summary: {issue.summary}")
    if issue.description:
        lines.append(f"Description: {issue.description}")

    if issue.issue_type and issue.issue_type.name:
        lines.append(f"Type: {issue.issue_type.name}")
        if issue.issue_type.description:
            lines.append(f"Type Description: {issue.issue_type.description}")

    if issue.status and issue.status.name:
        lines.append(f"Status: {issue.status.name}")
        if issue.status.description:
            lines.append(f"Status Description: {issue.status.description}")

    if issue.priority and issue.priority.name:
        lines.append(f"Priority: {issue.priority.name}")
    else:
        lines.append("Priority: None")

    if issue.resolution and issue.resolution.name:
        lines.append(f"Resolution: {issue.resolution.name}")
        if issue.resolution.description:
            lines.append(f"Resolution Description: {issue.resolution.description}")

    lines.append(f"Reporter: {_person(issue.reporter) if issue.reporter else 'Unassigned'}")
    lines.append(f"Assignee: {_person(issue.assignee) if issue.assignee else 'Unassigned'}")
    if issue.creator:
        lines.append(f"Creator: {_person(issue.creator)}")

    if issue.created:
        lines.append(f"Created: {format_jira_datetime(issue.created)}")
    if issue.updated:
        lines.append(f"Updated: {format_jira_datetime(issue.updated)}")

    if issue.project and issue.project.name:
        lines.append(f"Project: {_with_detail(issue.project.name, issue.project.key)}")
    if issue.parent_key:
        lines.append(f"Parent: {issue.parent_key}")

    lines += _bulleted("Labels", issue.labels)
    lines += _bulleted(
        "Components",
        (_with_detail(c.name or "", c.description) for c in issue.components),
    )
    lines += _bulleted(
        "Fix Versions",
        (_with_detail(v.name or "", v.description) for v in issue.fix_versions),
    )

    subtasks = []
    for subtask in issue.subtasks:
        entry = subtask.key or ""
        if subtask.summary:
            entry = f"{entry}: {subtask.summary}"
        if subtask.status:
            entry = f"{entry} [{subtask.status}]"
        subtasks.append(entry)
    lines += _bulleted("Subtasks", subtasks)

    lines += _bulleted("Issue Links", map(_link_line, issue.issue_links))

    if issue.transitions:
        lines += ["", "Available Transitions:"]
        lines += [f"- {t.name or ''} (ID: {t.id or ''})" for t in issue.transitions]

    return "\n".join(lines) + "\n"


def format_issue_compact(issue: JiraIssue) -> str:
    """Render an issue on one line: ``Key: .. | Summary: .. | Status: .. | Assignee: .. | Priority: ..``."""
    parts = [f"Key: {issue.key}"]
    if issue.summary:
        parts.append(f"Summary: {issue.summary}")
    if issue.status and issue.status.name:
        parts.append(f"Status: {issue.status.name}")
    if issue.assignee:
        parts.append(f"Assignee: {issue.assignee.display_name or ''}")
    else:
        parts.append("Assignee: Unassigned")
    if issue.priority and issue.priority.name:
        parts.append(f"Priority: {issue.priority.name}")
    return " | ".join(parts)


def format_issues(issues: Sequence[JiraIssue]) -> str:
    """Render search results, separated by ``===`` lines."""
    if not issues:
        return NO_ISSUES_FOUND
    return ISSUE_SEPARATOR.join(format_issue(issue) for issue in issues)


def format_created_issue(issue: JiraIssue) -> str:
    return (
        "Issue created successfully!\n"
        f"Key: {issue.key}\nID: {issue.id or ''}\nURL: {issue.url or ''}"
    )


def format_created_child_issue(
    issue: JiraIssue, parent_issue_key: str, issue_type: str
) -> str:
    text = (
        "Child issue created successfully!\n"
        f"Key: {issue.key}\nID: {issue.id or ''}\nURL: {issue.url or ''}\n"
        f"Parent: {parent_issue_key}"
    )
    if issue_type == "Bug":
        text = f"{text}\n\n{BUG_LINK_HINT}"
    return text


def format_issue_types(issue_types: Sequence[JiraIssueType]) -> str:
    """
    Render issue types as ``ID / Name / Description / Icon URL`` blocks.

    Subtask types are flagged with ``(Subtask Type)`` after their name.
    """
    if not issue_types:
        return NO_ISSUE_TYPES_FOUND

    lines = ["Available Issue Types:", ""]
    for issue_type in issue_types:
        name = issue_type.name or ""
        if issue_type.subtask:
            name = f"{name} (Subtask Type)"
        lines += [f"ID: {issue_type.id or ''}", f"Name: {name}"]
        if issue_type.description:
            lines.append(f"Description: {issue_type.description}")
        if issue_type.icon_url:
            lines.append(f"Icon URL: {issue_type.icon_url}")
        lines.append("")
    return "\n".join(lines) + "\n"


def format_added_comment(comment: JiraComment) -> str:
    author = comment.author.display_name if comment.author else None
    return (
        "Comment added successfully!\n"
        f"ID: {comment.id or ''}\nAuthor: {author or ''}\nCreated: {comment.created or ''}"
    )


def format_comments(comments: Sequence[JiraComment]) -> str:
    """Render comments as ``ID / Author / Created / Updated / Body`` blocks separated by blank lines."""
    if not comments:
        return NO_COMMENTS_FOUND

    blocks = []
    for comment in comments:
        author = (comment.author.display_name if comment.author else None) or "Unknown"
        blocks.append(
            f"ID: {comment.id or ''}\n"
            f"Author: {author}\n"
            f"Created: {comment.created or ''}\n"
            f"Updated: {comment.updated or ''}\n"
            f"Body: {comment.body}\n\n"
        )
    return "".join(blocks)
