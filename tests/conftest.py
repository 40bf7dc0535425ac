"""
Root test configuration.

Provides the Jira configuration, a recording stand-in for the atlassian.Jira
REST client and a JiraFetcher wired to it.
"""

from unittest.mock import patch

import pytest

from jira_mcp.jira import JiraFetcher
from jira_mcp.jira.config import BasicAuth, BearerAuth, JiraConfig
from tests.utils.mocks import MockJiraRestClient


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def jira_config() -> JiraConfig:
    """Bearer-mode configuration against a Server/Data Center host."""
    return JiraConfig(url="https://jira.example.com", auth=BearerAuth(token="test-pat"))


@pytest.fixture
def basic_jira_config() -> JiraConfig:
    return JiraConfig(
        url="https://jira.example.com",
        auth=BasicAuth(username="test-user", password="test-password"),
    )


@pytest.fixture
def rest_client() -> MockJiraRestClient:
    return MockJiraRestClient()


@pytest.fixture
def jira_fetcher(jira_config, rest_client) -> JiraFetcher:
    """JiraFetcher whose REST calls are answered by ``rest_client``."""
    with patch("jira_mcp.jira.client.Jira", return_value=rest_client):
        return JiraFetcher(config=jira_config)
