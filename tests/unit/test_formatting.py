"""Tests for the plain-text formatter."""

from jira_mcp.formatting import (
    BUG_LINK_HINT,
    NO_COMMENTS_FOUND,
    NO_ISSUE_TYPES_FOUND,
    NO_ISSUES_FOUND,
    format_added_comment,
    format_comments,
    format_created_child_issue,
    format_created_issue,
    format_issue,
    format_issue_compact,
    format_issue_types,
    format_issues,
)
from jira_mcp.models import JiraComment, JiraIssue, JiraIssueType
from tests.utils.factories import JiraCommentFactory, JiraIssueFactory


def _issue(**overrides) -> JiraIssue:
    return JiraIssue.from_api_response(JiraIssueFactory.create("KP-2", **overrides))


class TestFormatIssue:
    def test_happy_path_lines(self):
        issue = JiraIssue.from_api_response(
            {
                "key": "KP-2",
                "fields": {
                    "summary": "Fix login",
                    "status": {"name": "In Progress"},
                    "assignee": None,
                },
                "transitions": [{"id": "31", "name": "Done"}],
            }
        )

        lines = format_issue(issue).splitlines()

        assert "Key: KP-2" in lines
        assert "Summary: Fix login" in lines
        assert "Status: In Progress" in lines
        assert "Assignee: Unassigned" in lines
        index = lines.index("Available Transitions:")
        assert lines[index + 1] == "- Done (ID: 31)"

    def test_full_issue_field_order(self):
        text = format_issue(_issue())

        assert text == (
            "Key: KP-2\n"
            "ID: 12345\n"
            "URL: https://jira.example.com/rest/api/2/issue/KP-2\n"
            "Summary: Test Issue Summary\n"
            "Description: Test issue description\n"
            "Type: Task\n"
            "Type Description: A task\n"
            "Status: Open\n"
            "Status Description: The issue is open\n"
            "Priority: Medium\n"
            "Reporter: Reporter User\n"
            "Assignee: Test User (test@example.com)\n"
            "Created: 2023-01-01 12:00:00\n"
            "Updated: 2023-01-02 08:30:00\n"
            "Project: Test Project (TEST)\n"
        )

    def test_key_only_issue(self):
        text = format_issue(JiraIssue.from_api_response({"key": "KP-9"}))

        assert text == "Key: KP-9\nPriority: None\nReporter: Unassigned\nAssignee: Unassigned\n"

    def test_output_is_stable(self):
        issue = _issue(transitions=[{"id": "11", "name": "Start"}])

        assert format_issue(issue) == format_issue(issue)

    def test_lists_and_links(self):
        issue = _issue(
            fields={
                "parent": {"key": "KP-1"},
                "labels": ["backend", "urgent"],
                "components": [{"name": "API", "description": "Public API"}],
                "fixVersions": [{"name": "1.2"}],
                "subtasks": [
                    {"key": "KP-3", "fields": {"summary": "Write tests", "status": {"name": "Open"}}}
                ],
                "issuelinks": [
                    {
                        "type": {"name": "Blocks", "inward": "is blocked by", "outward": "blocks"},
                        "outwardIssue": {"key": "KP-7", "fields": {"summary": "Release"}},
                    },
                    {
                        "type": {"name": "Blocks", "inward": "is blocked by", "outward": "blocks"},
                        "inwardIssue": {"key": "KP-1", "fields": {"summary": "Design"}},
                    },
                ],
            }
        )

        text = format_issue(issue)

        assert "Parent: KP-1\n" in text
        assert "Labels:\n- backend\n- urgent\n" in text
        assert "Components:\n- API (Public API)\n" in text
        assert "Fix Versions:\n- 1.2\n" in text
        assert "Subtasks:\n- KP-3: Write tests [Open]\n" in text
        assert "Issue Links:\n- blocks KP-7: Release\n- is blocked by KP-1: Design\n" in text

    def test_link_without_type_label(self):
        issue = _issue(
            fields={
                "issuelinks": [
                    {
                        "type": {"name": "Relates"},
                        "outwardIssue": {"key": "KP-7", "fields": {"summary": "Release"}},
                    },
                    {"type": {}, "inwardIssue": {"key": "KP-8"}},
                ],
            }
        )

        text = format_issue(issue)

        assert "Issue Links:\n- KP-7: Release\n- KP-8\n" in text
        assert "relates to" not in text

    def test_absent_sections_are_omitted(self):
        text = format_issue(_issue())

        for header in ("Labels:", "Components:", "Subtasks:", "Issue Links:", "Available Transitions:"):
            assert header not in text

    def test_compact(self):
        assert format_issue_compact(_issue()) == (
            "Key: KP-2 | Summary: Test Issue Summary | Status: Open | "
            "Assignee: Test User | Priority: Medium"
        )
        assert format_issue_compact(JiraIssue(key="KP-9")) == "Key: KP-9 | Assignee: Unassigned"


class TestFormatIssues:
    def test_empty(self):
        assert format_issues([]) == NO_ISSUES_FOUND
        assert NO_ISSUES_FOUND == "No issues found matching the search criteria."

    def test_separator(self):
        first = JiraIssue(key="KP-1")
        second = JiraIssue(key="KP-2")

        text = format_issues([first, second])

        assert text == f"{format_issue(first)}\n===\n{format_issue(second)}"


class TestCreatedIssues:
    def test_created_issue(self):
        created = JiraIssue.from_api_response(JiraIssueFactory.create_created("KP-10", "10010"))

        assert format_created_issue(created) == (
            "Issue created successfully!\n"
            "Key: KP-10\n"
            "ID: 10010\n"
            "URL: https://jira.example.com/rest/api/2/issue/10010"
        )

    def test_created_child_issue(self):
        created = JiraIssue.from_api_response(JiraIssueFactory.create_created("KP-3", "10003"))

        text = format_created_child_issue(created, "KP-2", "Sub-task")

        assert text.endswith("Parent: KP-2")
        assert BUG_LINK_HINT not in text

    def test_created_child_bug_gets_hint(self):
        created = JiraIssue.from_api_response(JiraIssueFactory.create_created("KP-3", "10003"))

        text = format_created_child_issue(created, "KP-2", "Bug")

        assert text.endswith(f"Parent: KP-2\n\n{BUG_LINK_HINT}")


class TestIssueTypes:
    def test_empty(self):
        assert format_issue_types([]) == NO_ISSUE_TYPES_FOUND

    def test_blocks(self):
        issue_types = [
            JiraIssueType(id="1", name="Bug", description="A problem", icon_url="https://x/bug.png"),
            JiraIssueType(id="5", name="Sub-task", subtask=True),
        ]

        assert format_issue_types(issue_types) == (
            "Available Issue Types:\n"
            "\n"
            "ID: 1\n"
            "Name: Bug\n"
            "Description: A problem\n"
            "Icon URL: https://x/bug.png\n"
            "\n"
            "ID: 5\n"
            "Name: Sub-task (Subtask Type)\n"
            "\n"
        )


class TestComments:
    def test_empty(self):
        assert format_comments([]) == NO_COMMENTS_FOUND

    def test_blocks(self):
        comments = [
            JiraComment.from_api_response(JiraCommentFactory.create("10001")),
            JiraComment.from_api_response(JiraCommentFactory.create("10002", author=None)),
        ]

        text = format_comments(comments)

        assert text == (
            "ID: 10001\n"
            "Author: John Doe\n"
            "Created: 2024-01-01T10:00:00.000+0000\n"
            "Updated: 2024-01-01T11:00:00.000+0000\n"
            "Body: This is a comment\n\n"
            "ID: 10002\n"
            "Author: Unknown\n"
            "Created: 2024-01-01T10:00:00.000+0000\n"
            "Updated: 2024-01-01T11:00:00.000+0000\n"
            "Body: This is a comment\n\n"
        )

    def test_added_comment(self):
        comment = JiraComment.from_api_response(JiraCommentFactory.create("10003"))

        assert format_added_comment(comment) == (
            "Comment added successfully!\n"
            "ID: 10003\n"
            "Author: John Doe\n"
            "Created: 2024-01-01T10:00:00.000+0000"
        )
