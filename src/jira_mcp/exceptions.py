"""Error kinds raised by the Jira MCP server."""

from __future__ import annotations

import asyncio
import concurrent.futures

CANCELLATION_MESSAGES = (
    "context canceled",
    "operation was canceled",
    "context deadline exceeded",
)


class JiraMCPError(Exception):
    """Base exception for jira-mcp errors.

    Args:
        message: Single-line description of the failure.
        body: Response body returned by Jira, if any.
        operation: Overrides the operation label used when the error is rendered
            as a tool result (e.g. "get parent issue").
    """

    kind = "internal"

    def __init__(
        self,
        message: str,
        *,
        body: str | None = None,
        operation: str | None = None,
    ) -> None:
        super().__init__(message)
        self.body = body
        self.operation = operation

    def with_operation(self, operation: str) -> JiraMCPError:
        """Label the error with the operation that failed, unless already labelled."""
        if self.operation is None:
            self.operation = operation
        return self


class ConfigError(JiraMCPError):
    """Raised at startup when required configuration is missing or invalid."""

    kind = "config"

    def __init__(self, message: str, missing: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing = missing or []


class InvalidArgumentError(JiraMCPError):
    """Raised when a tool argument is missing, empty or malformed."""

    kind = "invalid_argument"

    def __init__(self, field: str, reason: str | None = None) -> None:
        message = f"invalid argument: {field}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.field = field


class NotFoundError(JiraMCPError):
    """Raised when Jira answers 404 or a custom field cannot be discovered."""

    kind = "not_found"


class JiraAuthenticationError(JiraMCPError):
    """Raised when Jira API authentication fails (401/403)."""

    kind = "unauthorised"


class ConflictError(JiraMCPError):
    """Raised when Jira refuses a state change, such as an unavailable transition."""

    kind = "conflict"


class RequestCancelledError(JiraMCPError):
    """Raised when a tool call is cancelled or runs past its deadline."""

    kind = "cancelled"


class UpstreamError(JiraMCPError):
    """Raised for any other Jira or network failure."""

    kind = "upstream"


class InternalError(JiraMCPError):
    """Raised when a handler fails unexpectedly."""

    kind = "internal"


def is_context_cancelled(error: BaseException | None) -> bool:
    """Check whether an error only reports a cancelled operation.

    Cancellation is never fatal: the CLI uses this to tell a client that went away
    apart from a real server failure.
    """
    if error is None:
        return False
    if isinstance(
        error,
        RequestCancelledError | asyncio.CancelledError | concurrent.futures.CancelledError,
    ):
        return True
    message = str(error).lower()
    return any(fragment in message for fragment in CANCELLATION_MESSAGES)


def format_tool_error(operation: str, error: BaseException) -> str:
    """Render an error as the single-line text of a failed tool result."""
    if isinstance(error, InvalidArgumentError):
        return str(error)
    if isinstance(error, JiraMCPError):
        text = f"failed to {error.operation or operation}: {error}"
        if error.body and error.body.strip():
            text = f"{text}, {error.body.strip()}"
        return text
    return f"failed to {operation}: internal error: {error}"
