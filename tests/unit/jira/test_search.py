"""Tests for the Jira Search mixin."""

import pytest

from jira_mcp.exceptions import UpstreamError
from jira_mcp.jira.search import split_fields
from tests.utils.factories import JiraIssueFactory
from tests.utils.mocks import make_http_error

SEARCH_PATH = "rest/api/2/search"


@pytest.mark.parametrize(
    "fields,expected",
    [
        (None, []),
        ("", []),
        ("summary", ["summary"]),
        ("summary, status ,assignee", ["summary", "status", "assignee"]),
        ("summary,,status,", ["summary", "status"]),
    ],
)
def test_split_fields(fields, expected):
    assert split_fields(fields) == expected


@pytest.mark.anyio
async def test_search_issues_fixed_window(jira_fetcher, rest_client):
    rest_client.on(
        "GET",
        SEARCH_PATH,
        {"issues": [JiraIssueFactory.create("KP-1"), JiraIssueFactory.create("KP-2")]},
    )

    issues = await jira_fetcher.search_issues("project = KP", fields="summary, status")

    rest_client.get.assert_called_once_with(
        SEARCH_PATH,
        params={
            "jql": "project = KP",
            "startAt": 0,
            "maxResults": 30,
            "expand": "transitions,changelog,subtasks",
            "fields": "summary,status",
        },
    )
    assert [issue.key for issue in issues] == ["KP-1", "KP-2"]


@pytest.mark.anyio
async def test_search_issues_accepts_bare_list(jira_fetcher, rest_client):
    rest_client.on("GET", SEARCH_PATH, [])

    assert await jira_fetcher.search_issues("project=NONE") == []


@pytest.mark.anyio
async def test_search_issues_unexpected_payload(jira_fetcher, rest_client):
    rest_client.on("GET", SEARCH_PATH, "<html>")

    with pytest.raises(UpstreamError) as excinfo:
        await jira_fetcher.search_issues("project = KP")
    assert excinfo.value.operation == "search issues"


@pytest.mark.anyio
async def test_search_issues_bad_jql(jira_fetcher, rest_client):
    rest_client.on(
        "GET",
        SEARCH_PATH,
        make_http_error(
            400,
            body='{"errorMessages":["Error in the JQL Query"]}',
            message="Error in the JQL Query",
        ),
    )

    with pytest.raises(UpstreamError, match="Error in the JQL Query"):
        await jira_fetcher.search_issues("project = = KP")
