"""Entry point for ``python -m jira_mcp``."""

from jira_mcp import main

if __name__ == "__main__":
    main()
