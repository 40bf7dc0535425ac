"""Tests for the JiraClient base class."""

from unittest.mock import patch

import pytest

from jira_mcp.jira.client import JiraClient
from jira_mcp.jira.config import JiraConfig


def test_bearer_auth_builds_token_client(jira_config):
    with patch("jira_mcp.jira.client.Jira") as mock_jira:
        client = JiraClient(config=jira_config)

    mock_jira.assert_called_once_with(
        url="https://jira.example.com",
        token="test-pat",
        cloud=False,
        verify_ssl=True,
        timeout=75.0,
    )
    assert client.jira is mock_jira.return_value


def test_basic_auth_builds_password_client(basic_jira_config):
    with patch("jira_mcp.jira.client.Jira") as mock_jira:
        JiraClient(config=basic_jira_config)

    mock_jira.assert_called_once_with(
        url="https://jira.example.com",
        username="test-user",
        password="test-password",
        cloud=False,
        verify_ssl=True,
        timeout=75.0,
    )


def test_config_defaults_to_environment(monkeypatch):
    monkeypatch.setenv("JIRA_HOST", "https://jira.example.com")
    monkeypatch.setenv("JIRA_PAT", "env-pat")
    with patch("jira_mcp.jira.client.Jira"):
        client = JiraClient()
    assert isinstance(client.config, JiraConfig)
    assert client.config.auth_type == "token"


@pytest.mark.anyio
async def test_get_prefixes_rest_api_path(jira_fetcher, rest_client):
    rest_client.on("GET", "rest/api/2/issuetype", [])

    result = await jira_fetcher._get("issuetype")

    assert result == []
    rest_client.get.assert_called_once_with("rest/api/2/issuetype", params=None)
