"""Tests for the Jira Transitions mixin."""

import pytest

from jira_mcp.exceptions import ConflictError, UpstreamError
from tests.utils.mocks import make_http_error

TRANSITIONS_PATH = "rest/api/2/issue/KP-2/transitions"


@pytest.mark.anyio
async def test_transition_with_comment_payload(jira_fetcher, rest_client):
    rest_client.on("POST", TRANSITIONS_PATH, None)

    await jira_fetcher.transition_issue("KP-2", "31", comment="done")

    assert rest_client.calls_to("POST", TRANSITIONS_PATH) == [
        {"transition": {"id": "31"}, "update": {"comment": [{"add": {"body": "done"}}]}}
    ]


@pytest.mark.anyio
async def test_transition_without_comment(jira_fetcher, rest_client):
    rest_client.on("POST", TRANSITIONS_PATH, None)

    await jira_fetcher.transition_issue("KP-2", "31")

    assert rest_client.calls_to("POST", TRANSITIONS_PATH) == [{"transition": {"id": "31"}}]


@pytest.mark.anyio
@pytest.mark.parametrize("status", [400, 409])
async def test_unavailable_transition_is_a_conflict(jira_fetcher, rest_client, status):
    body = '{"errorMessages":["It seems that you have tried to perform a workflow operation (Done) that is not valid for the current state of this issue (KP-2)."]}'
    rest_client.on("POST", TRANSITIONS_PATH, make_http_error(status, body=body))

    with pytest.raises(ConflictError) as excinfo:
        await jira_fetcher.transition_issue("KP-2", "999")

    assert excinfo.value.operation == "transition issue"
    assert excinfo.value.body == body


@pytest.mark.anyio
async def test_server_error_is_upstream(jira_fetcher, rest_client):
    rest_client.on("POST", TRANSITIONS_PATH, make_http_error(502))

    with pytest.raises(UpstreamError):
        await jira_fetcher.transition_issue("KP-2", "31")
