
from __future__ import annotations

import json
import logging
from typing import Any, Optional

import typer

from catalog_client import CatalogClient
from config import Settings
from fastmcp_app import create_mcp


cli = typer.Typer(add_completion=False)


def _setup(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, default=str))


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind (HTTP transport)."),
    port: int = typer.Option(None, help="Port to bind (HTTP transport)."),
    transport: str = typer.Option("http", help="Transport: 'http' or 'stdio'."),
) -> None:
    """Start the FastMCP server (defaults to HTTP transport)."""

    settings = Settings.from_env()
    if host is not None:
        settings.host = host
    if port is not None:
        settings.port = port
    _setup(settings)

    mcp = create_mcp(settings)
    if transport == "stdio":
        mcp.run()
    else:
        # Force JSON-style HTTP on /mcp (non-streaming)
        app = mcp.http_app(path="/mcp", transport="http", json_response=True, stateless_http=True)
        import uvicorn
        uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


@cli.command()
def resources(limit: Optional[int] = typer.Option(None, help="Maximum number of resources to fetch.")) -> None:
    """Print the catalog resources visible to the configured user."""

    settings = Settings.from_env()
    _setup(settings)
    client = CatalogClient.from_settings(settings)
    _echo_json([resource.as_dict() for resource in client.get_resources(limit)])


@cli.command()
def actions(resource_name: str = typer.Argument(..., help="Name of the catalog resource.")) -> None:
    """Print the actions available on a resource."""

    settings = Settings.from_env()
    _setup(settings)
    client = CatalogClient.from_settings(settings)
    _echo_json(client.get_resource_actions(resource_name))


@cli.command("action-requests")
def action_requests(
    resource_name: str = typer.Argument(..., help="Name of the catalog resource."),
    action_name: str = typer.Argument(..., help="Name of the action, e.g. 'Destroy'."),
) -> None:
    """Print the requests already submitted for an action on a resource."""

    settings = Settings.from_env()
    _setup(settings)
    client = CatalogClient.from_settings(settings)
    _echo_json(client.get_resource_action_requests({"resourceName": resource_name, "actionName": action_name}))


@cli.callback(invoke_without_command=True)
def _default(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        run(host=None, port=None, transport="http")


if __name__ == "__main__":
    cli()
