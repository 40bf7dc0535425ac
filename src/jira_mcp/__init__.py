import asyncio
import json
import sys
from pathlib import Path

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

# Installs the contextual logger class before any other module creates a logger
from .logging_config import log_operation, setup_logger

logger = setup_logger()


def _parse_port(http_port: str | None) -> int | None:
    if http_port is None or not http_port.strip():
        return None
    try:
        port = int(http_port)
    except ValueError:
        port = 0
    if not 1 <= port <= 65535:
        raise click.BadParameter(
            f"must be an integer between 1 and 65535, got {http_port!r}",
            param_hint="--http_port",
        )
    return port


@click.command()
@click.version_option(__version__, prog_name="jira-mcp")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env",
    "env_file",
    type=click.Path(dir_okay=False),
    help="Path to a .env file to load before reading the environment",
)
@click.option(
    "--http_port",
    help="Serve MCP over HTTP on this port instead of stdio",
)
@click.option(
    "--eager-client/--lazy-client",
    default=False,
    help="Build the Jira client at startup instead of on the first tool call",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
def main(
    verbose: int,
    env_file: str | None,
    http_port: str | None,
    eager_client: bool,
    log_to_file: bool,
    log_dir: str | None,
) -> None:
    """Jira MCP Server - Jira issues, search, transitions and comments for MCP.

    Reads JIRA_HOST and either JIRA_PAT or JIRA_USERNAME/JIRA_PASSWORD from the
    environment.
    """
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    setup_logger(
        name="jira-mcp",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    from .exceptions import ConfigError, is_context_cancelled
    from .jira.config import AUTH_SETUP_INSTRUCTIONS, BasicAuth, BearerAuth, JiraConfig
    from .servers.main import MCP_PATH, run_server
    from .utils import log_config_param

    with log_operation(logger, "application_startup", app_version=__version__):
        if env_file:
            if Path(env_file).is_file():
                logger.info(f"Loading environment from file: {env_file}")
                load_dotenv(env_file)
            else:
                logger.warning(f"Env file {env_file} not found, using the process environment")

    try:
        port = _parse_port(http_port)
    except click.BadParameter as e:
        click.echo(f"Error: {e.format_message()}", err=True)
        sys.exit(1)

    try:
        config = JiraConfig.from_env()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        if e.missing:
            click.echo("Missing environment variables:", err=True)
            for name in e.missing:
                click.echo(f"  - {name}", err=True)
        click.echo("", err=True)
        click.echo(AUTH_SETUP_INSTRUCTIONS, err=True)
        sys.exit(1)

    log_config_param(logger, "Jira", "Host", config.url)
    log_config_param(logger, "Jira", "Auth Type", config.auth_type)
    match config.auth:
        case BasicAuth(username=username, password=password):
            log_config_param(logger, "Jira", "Username", username)
            log_config_param(logger, "Jira", "Password", password, sensitive=True)
        case BearerAuth(token=token):
            log_config_param(logger, "Jira", "Personal Token", token, sensitive=True)
    log_config_param(logger, "Jira", "SSL Verify", str(config.ssl_verify))

    transport = "http" if port else "stdio"
    if port:
        url = f"http://localhost:{port}{MCP_PATH}"
        snippet = {"mcpServers": {"jira": {"url": url}}}
        logger.info(
            f"Add this to your MCP client configuration:\n{json.dumps(snippet, indent=2)}"
        )

    logger.info(f"Starting Jira MCP v{__version__} with {transport} transport")
    try:
        asyncio.run(
            run_server(
                config,
                transport=transport,
                port=port or 0,
                eager_client=eager_client,
            )
        )
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        if is_context_cancelled(e):
            logger.info(f"Server stopped after a cancelled operation: {e}")
            return
        logger.error(f"Server error: {e}", exc_info=True)
        sys.exit(1)


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
