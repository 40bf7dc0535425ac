"""Constants shared by the Jira operations."""

API_PREFIX = "rest/api/2"

DEFAULT_EXPAND = "transitions,changelog,subtasks"

SEARCH_START_AT = 0
SEARCH_MAX_RESULTS = 30

DEFAULT_CHILD_ISSUE_TYPE = "Sub-task"
EPIC_ISSUE_TYPE = "epic"

EPIC_LINK_FIELD_NAME = "Epic Link"
EPIC_NAME_FIELD_NAME = "Epic Name"
# Instance specific; override with JIRA_EPIC_NAME_FIELD
DEFAULT_EPIC_NAME_FIELD_ID = "customfield_10104"
DISCOVER_FIELD = "discover"
