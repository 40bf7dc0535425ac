"""Tool catalogue, registry and dispatcher.

A tool is declared once, with its input record and handler, through
``ToolCatalogue.tool``. At startup the catalogue is loaded into a
``ToolRegistry`` (tool names must be unique), and every MCP ``tools/call`` goes
through ``ToolDispatcher.dispatch``, which never raises for a failed call: it
always answers with a ``ToolResult``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import anyio
from mcp.types import Tool, ToolAnnotations
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from jira_mcp.exceptions import (
    ConfigError,
    InternalError,
    InvalidArgumentError,
    JiraMCPError,
    RequestCancelledError,
    format_tool_error,
)
from jira_mcp.logging_config import get_logger, log_operation

from .context import ToolContext
from .dependencies import JiraClientProvider

logger = get_logger("jira-mcp.servers.registry")


class ToolInput(BaseModel):
    """Base class of tool input records.

    Unknown arguments are ignored, numbers are accepted for string fields, and
    blank strings count as absent.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True, frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _blank_as_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


InputT = TypeVar("InputT", bound=ToolInput)

ToolHandler = Callable[[ToolContext, InputT], Awaitable[str]]


@dataclass(frozen=True)
class ToolField:
    """One entry of a tool's input schema."""

    name: str
    required: bool
    description: str
    type: str = "string"


@dataclass(frozen=True)
class ToolResult:
    text: str
    is_error: bool = False


@dataclass(frozen=True)
class ToolDescriptor(Generic[InputT]):
    """Static declaration of a tool: name, description, input record and handler.

    Args:
        name: Public tool name, unique within a registry.
        description: Human description shown to the assistant.
        operation: Label used in error texts ("failed to <operation>: ...").
        input_model: Record the MCP arguments are decoded into.
        handler: Coroutine receiving the call context and the decoded record.
        read_only: Advertised as ``readOnlyHint``.
    """

    name: str
    description: str
    operation: str
    input_model: type[InputT]
    handler: ToolHandler[InputT]
    read_only: bool = False

    @property
    def fields(self) -> list[ToolField]:
        return [
            ToolField(
                name=name,
                required=info.is_required(),
                description=info.description or "",
            )
            for name, info in self.input_model.model_fields.items()
        ]

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool input, fields in declaration order."""
        fields = self.fields
        return {
            "type": "object",
            "properties": {
                field.name: {"type": field.type, "description": field.description}
                for field in fields
            },
            "required": [field.name for field in fields if field.required],
        }

    def decode(self, arguments: Mapping[str, Any] | None) -> InputT:
        """
        Decode MCP call arguments into the tool's input record.

        Raises:
            InvalidArgumentError: If a required field is missing or blank, or a
                value cannot be read as a string.
        """
        arguments = dict(arguments or {})
        for field in self.fields:
            value = arguments.get(field.name)
            if field.required and (
                value is None or (isinstance(value, str) and not value.strip())
            ):
                raise InvalidArgumentError(field.name)

        try:
            return self.input_model.model_validate(arguments)
        except ValidationError as e:
            error = e.errors()[0]
            field_name = ".".join(str(part) for part in error["loc"]) or "arguments"
            raise InvalidArgumentError(field_name, reason=error["msg"]) from e

    def to_mcp_tool(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
            annotations=ToolAnnotations(readOnlyHint=self.read_only),
        )


class ToolCatalogue:
    """Ordered collection of tool descriptors, filled by the ``tool`` decorator."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.descriptors: list[ToolDescriptor[Any]] = []

    def tool(
        self,
        name: str,
        description: str,
        input_model: type[InputT],
        operation: str | None = None,
        read_only: bool = False,
    ) -> Callable[[ToolHandler[InputT]], ToolHandler[InputT]]:
        """Declare the decorated coroutine as the handler of tool ``name``."""

        def decorator(handler: ToolHandler[InputT]) -> ToolHandler[InputT]:
            self.descriptors.append(
                ToolDescriptor(
                    name=name,
                    description=description,
                    operation=operation or name.replace("_", " "),
                    input_model=input_model,
                    handler=handler,
                    read_only=read_only,
                )
            )
            return handler

        return decorator

    def __iter__(self) -> Iterator[ToolDescriptor[Any]]:
        return iter(self.descriptors)


class ToolRegistry:
    """Tool descriptors by name.

    Raises:
        ConfigError: When two descriptors share a name.
    """

    def __init__(self, descriptors: Iterable[ToolDescriptor[Any]] = ()) -> None:
        self._tools: dict[str, ToolDescriptor[Any]] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: ToolDescriptor[Any]) -> None:
        if descriptor.name in self._tools:
            raise ConfigError(f"duplicate tool name: {descriptor.name}")
        self._tools[descriptor.name] = descriptor
        logger.debug(f"Registered tool {descriptor.name}")

    def get(self, name: str) -> ToolDescriptor[Any] | None:
        return self._tools.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def list_tools(self) -> list[Tool]:
        return [descriptor.to_mcp_tool() for descriptor in self._tools.values()]

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools


class ToolDispatcher:
    """Routes tool calls to their handlers and turns every outcome into a ToolResult.

    Args:
        registry: The registered tools.
        clients: Provider of the shared Jira client.
        request_timeout: Deadline of one tool call in seconds; None for no deadline.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        clients: JiraClientProvider,
        request_timeout: float | None = None,
    ) -> None:
        self.registry = registry
        self.clients = clients
        self.request_timeout = request_timeout

    async def dispatch(self, name: str, arguments: Mapping[str, Any] | None) -> ToolResult:
        """
        Run one tool call.

        Cancellation coming from outside (the client went away, the server is
        shutting down) is logged and propagated to the caller; every other
        outcome, the request deadline included, becomes a ToolResult.
        """
        descriptor = self.registry.get(name)
        if descriptor is None:
            logger.warning(f"Call to unknown tool '{name}'")
            return ToolResult(f"unknown tool: {name}", is_error=True)

        with log_operation(logger, f"tool:{name}"):
            try:
                tool_input = descriptor.decode(arguments)
            except InvalidArgumentError as e:
                logger.info(f"Rejected {name} call: {e}")
                return ToolResult(str(e), is_error=True)

            text: str | None = None
            try:
                with anyio.move_on_after(self.request_timeout) as scope:
                    context = ToolContext(clients=self.clients)
                    text = await descriptor.handler(context, tool_input)
            except anyio.get_cancelled_exc_class():
                logger.info(f"Tool call {name} cancelled by the caller")
                raise
            except JiraMCPError as e:
                logger.warning(f"Tool {name} failed: {e!r}")
                return ToolResult(format_tool_error(descriptor.operation, e), is_error=True)
            except Exception as e:
                logger.exception(f"Unexpected error in tool {name}")
                error = InternalError(f"internal error: {e}")
                return ToolResult(format_tool_error(descriptor.operation, error), is_error=True)

            if scope.cancelled_caught or text is None:
                error = RequestCancelledError(
                    f"request cancelled: no response within {self.request_timeout}s"
                )
                logger.warning(f"Tool {name} hit its deadline")
                return ToolResult(format_tool_error(descriptor.operation, error), is_error=True)

            return ToolResult(text)
