"""Mocks of the atlassian.Jira REST client."""

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import requests
from requests.exceptions import HTTPError


class MockJiraRestClient:
    """Stand-in for ``atlassian.Jira`` that answers by (method, path).

    Responses are registered with ``on``; every call is recorded in ``calls`` as
    ``(method, path, params_or_data)`` so tests can assert the exact wire payload.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, Any]] = []
        self._routes: dict[tuple[str, str], Any] = {}
        self.get = MagicMock(side_effect=self._handler("GET"))
        self.post = MagicMock(side_effect=self._handler("POST"))
        self.put = MagicMock(side_effect=self._handler("PUT"))

    def on(self, method: str, path: str, response: Any) -> "MockJiraRestClient":
        """Register a response; an Exception instance is raised, a callable is called."""
        self._routes[(method, path)] = response
        return self

    def calls_to(self, method: str, path: str) -> list[Any]:
        return [payload for m, p, payload in self.calls if m == method and p == path]

    def _handler(self, method: str) -> Callable[..., Any]:
        def handle(path: str, params: Any = None, data: Any = None, **kwargs: Any) -> Any:
            self.calls.append((method, path, data if data is not None else params))
            response = self._routes.get((method, path))
            if isinstance(response, Exception):
                raise response
            if callable(response):
                return response(params if data is None else data)
            return response

        return handle


def make_http_error(status_code: int, body: Any = None, message: str | None = None) -> HTTPError:
    """Build an HTTPError like the one atlassian.Jira raises for a failed call."""
    response = requests.Response()
    response.status_code = status_code
    if body is not None:
        response._content = (body if isinstance(body, str) else json.dumps(body)).encode()
    return HTTPError(message or f"{status_code} Client Error", response=response)
