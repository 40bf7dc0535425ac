"""Module for Jira field operations."""

import logging
from typing import Any

import anyio

from ..exceptions import NotFoundError, UpstreamError
from ..utils.decorators import handle_jira_api_errors
from .client import JiraClient
from .constants import (
    DISCOVER_FIELD,
    EPIC_LINK_FIELD_NAME,
    EPIC_NAME_FIELD_NAME,
)

logger = logging.getLogger("jira-mcp.jira.fields")


class FieldsMixin(JiraClient):
    """Mixin for Jira field operations.

    Custom field ids (``customfield_NNNNN``) differ between Jira instances, so
    fields such as "Epic Link" are resolved by name against ``GET /field``. Resolved
    ids are memoised for the life of the process. Concurrent misses on the same
    name wait on one per-name lock, so a cold cache costs a single fetch.
    """

    async def get_fields(self) -> list[dict[str, Any]]:
        """
        Get all field definitions from Jira.

        Returns:
            List of field definitions, each with at least ``id`` and ``name``
        """
        fields = await self._get("field")
        if not isinstance(fields, list):
            raise UpstreamError(
                f"unexpected response type from GET /field: {type(fields).__name__}"
            )
        return fields

    async def get_field_id(self, field_name: str) -> str:
        """
        Get the id of a field by its exact (case-sensitive) name.

        Args:
            field_name: Field name as shown in Jira, e.g. "Epic Link"

        Returns:
            The field id, e.g. "customfield_10014"

        Raises:
            NotFoundError: If no field carries that name
        """
        field_id = self._field_ids.get(field_name)
        if field_id is not None:
            return field_id

        lock = self._field_locks.setdefault(field_name, anyio.Lock())
        async with lock:
            # Another task may have filled the entry while we waited
            field_id = self._field_ids.get(field_name)
            if field_id is not None:
                return field_id

            logger.debug(f"Field '{field_name}' not cached, scanning Jira fields")
            for field in await self.get_fields():
                if field.get("name") == field_name and field.get("id"):
                    field_id = str(field["id"])
                    break
            else:
                raise NotFoundError(f"{field_name} field not defined in this Jira")

            self._field_ids[field_name] = field_id
            logger.info(f"Discovered field '{field_name}' as {field_id}")
            return field_id

    @handle_jira_api_errors("discover epic link field ID")
    async def get_epic_link_field_id(self) -> str:
        """Resolve the "Epic Link" custom field id."""
        return await self.get_field_id(EPIC_LINK_FIELD_NAME)

    @handle_jira_api_errors("discover epic name field ID")
    async def get_epic_name_field_id(self) -> str:
        """Resolve the "Epic Name" custom field id.

        Uses the configured id unless configuration asks for discovery by name.
        """
        if self.config.epic_name_field != DISCOVER_FIELD:
            return self.config.epic_name_field
        return await self.get_field_id(EPIC_NAME_FIELD_NAME)
