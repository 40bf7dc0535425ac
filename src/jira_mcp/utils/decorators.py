import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

import requests
from requests.exceptions import HTTPError

from jira_mcp.exceptions import (
    ConflictError,
    JiraAuthenticationError,
    JiraMCPError,
    NotFoundError,
    UpstreamError,
)

logger = logging.getLogger("jira-mcp.utils.decorators")


F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def _single_line(text: str) -> str:
    return "; ".join(part.strip() for part in text.splitlines() if part.strip())


def translate_http_error(
    http_err: HTTPError, conflict_statuses: frozenset[int] = frozenset({409})
) -> JiraMCPError:
    """Map an HTTP error raised by the Jira client onto an error kind."""
    response = http_err.response
    status_code = response.status_code if response is not None else None
    body = response.text if response is not None else None
    message = _single_line(str(http_err)) or f"HTTP {status_code}"

    if status_code in (401, 403):
        return JiraAuthenticationError(
            f"authentication failed ({status_code}): {message}", body=body
        )
    if status_code == 404:
        return NotFoundError(message, body=body)
    if status_code in conflict_statuses:
        return ConflictError(message, body=body)
    return UpstreamError(message, body=body)


def handle_jira_api_errors(
    operation: str, conflict_statuses: frozenset[int] = frozenset({409})
) -> Callable[[F], F]:
    """
    Decorator translating Jira client exceptions into jira-mcp error kinds.

    Errors that are already JiraMCPError only get labelled with ``operation``
    when they carry no label of their own.

    Args:
        operation: Human label of the operation, e.g. "get issue".
        conflict_statuses: HTTP statuses reported as ConflictError.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except JiraMCPError as e:
                e.with_operation(operation)
                raise
            except HTTPError as http_err:
                error = translate_http_error(http_err, conflict_statuses)
                logger.error(f"Jira API error during {operation}: {error}")
                raise error.with_operation(operation) from http_err
            except requests.RequestException as e:
                logger.error(f"Network error during {operation}: {e}")
                raise UpstreamError(_single_line(str(e)) or type(e).__name__).with_operation(
                    operation
                ) from e

        return wrapper  # type: ignore[return-value]

    return decorator
