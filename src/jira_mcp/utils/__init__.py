"""
Utility functions for the Jira MCP server.
This package provides various utility functions used throughout the codebase.
"""

from .date import format_jira_datetime, parse_jira_datetime
from .env import getenv, is_env_ssl_verify
from .logging import log_config_param, mask_sensitive
from .urls import is_atlassian_cloud_url, is_valid_http_url

__all__ = [
    "format_jira_datetime",
    "getenv",
    "is_atlassian_cloud_url",
    "is_env_ssl_verify",
    "is_valid_http_url",
    "log_config_param",
    "mask_sensitive",
    "parse_jira_datetime",
]
