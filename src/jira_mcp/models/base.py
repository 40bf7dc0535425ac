"""Base model shared by the Jira API models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    """Base class for immutable models built from Jira API payloads.

    Subclasses provide a ``from_api_response`` classmethod that tolerates any
    subset of the payload.
    """

    model_config = ConfigDict(frozen=True)


def as_dict(value: Any) -> dict[str, Any]:
    """Return ``value`` if it is a dict, otherwise an empty dict."""
    return value if isinstance(value, dict) else {}


def as_str(value: Any) -> str | None:
    """Return a non-empty string form of a scalar ``value``, or None."""
    if value is None or isinstance(value, dict | list):
        return None
    text = str(value)
    return text or None
