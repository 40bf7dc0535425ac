"""Test data factories for creating consistent Jira payloads."""

from typing import Any


class JiraIssueFactory:
    """Factory for creating Jira issue test data."""

    @staticmethod
    def create(key: str = "TEST-123", **overrides) -> dict[str, Any]:
        """Create a Jira issue with default values."""
        defaults = {
            "id": "12345",
            "key": key,
            "self": f"https://jira.example.com/rest/api/2/issue/{key}",
            "fields": {
                "summary": "Test Issue Summary",
                "description": "Test issue description",
                "status": {"name": "Open", "description": "The issue is open"},
                "issuetype": {"name": "Task", "description": "A task", "subtask": False},
                "priority": {"name": "Medium"},
                "assignee": {
                    "displayName": "Test User",
                    "emailAddress": "test@example.com",
                    "name": "tuser",
                },
                "reporter": {"displayName": "Reporter User", "name": "ruser"},
                "created": "2023-01-01T12:00:00.000+0000",
                "updated": "2023-01-02T08:30:00.000+0000",
                "project": {"key": "TEST", "name": "Test Project"},
            },
        }
        return deep_merge(defaults, overrides)

    @staticmethod
    def create_minimal(key: str = "TEST-123") -> dict[str, Any]:
        """Create minimal Jira issue for basic tests."""
        return {
            "key": key,
            "fields": {"summary": "Test Issue", "status": {"name": "Open"}},
        }

    @staticmethod
    def create_created(key: str = "TEST-124", issue_id: str = "10124") -> dict[str, Any]:
        """The body Jira returns from POST /issue."""
        return {
            "id": issue_id,
            "key": key,
            "self": f"https://jira.example.com/rest/api/2/issue/{issue_id}",
        }


class JiraFieldFactory:
    """Factory for GET /field payloads."""

    @staticmethod
    def create_list(**custom_fields: str) -> list[dict[str, Any]]:
        """System fields plus the given ``name=id`` custom fields."""
        fields = [
            {"id": "summary", "name": "Summary", "custom": False},
            {"id": "description", "name": "Description", "custom": False},
        ]
        for field_id, name in custom_fields.items():
            fields.append({"id": field_id, "name": name, "custom": True})
        return fields


class JiraCommentFactory:
    @staticmethod
    def create(comment_id: str = "10001", **overrides) -> dict[str, Any]:
        defaults = {
            "id": comment_id,
            "body": "This is a comment",
            "author": {"displayName": "John Doe", "name": "jdoe"},
            "created": "2024-01-01T10:00:00.000+0000",
            "updated": "2024-01-01T11:00:00.000+0000",
        }
        return deep_merge(defaults, overrides)


class ErrorResponseFactory:
    """Factory for creating error response test data."""

    @staticmethod
    def create_api_error(
        status_code: int = 400, message: str = "Bad Request"
    ) -> dict[str, Any]:
        """Create API error response."""
        return {"errorMessages": [message], "errors": {}, "status": status_code}


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
