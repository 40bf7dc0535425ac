"""Environment variable utility functions for the Jira MCP server."""

import os
from collections.abc import Mapping


def getenv(
    env: Mapping[str, str] | None, env_var_name: str, default: str | None = None
) -> str | None:
    """Retrieve the value of an environment variable.

    Checks the provided `env` mapping first and falls back to the process
    environment. Values are stripped; blank values count as unset.

    Args:
        env: Optional mapping of variables that takes precedence over os.environ.
        env_var_name: The name of the environment variable to retrieve.
        default: Value returned when the variable is unset or blank.

    Returns:
        The value of the environment variable if found, otherwise `default`.
    """
    source = os.environ if env is None else env
    value = source.get(env_var_name)
    if value is None or not value.strip():
        return default
    return value.strip()


def is_env_ssl_verify(
    env: Mapping[str, str] | None, env_var_name: str, default: str = "true"
) -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to false values.
    """
    value = getenv(env, env_var_name, default) or default
    return value.lower() not in ("false", "0", "no")
