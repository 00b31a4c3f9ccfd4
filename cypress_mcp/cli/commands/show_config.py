import json

import typer

from cypress_mcp.cli.state import CliState
from cypress_mcp.cli.tool_catalog import list_tools


def show_config(ctx: typer.Context) -> None:
    """Print the resolved configuration."""
    state: CliState = ctx.obj
    typer.echo(json.dumps(state.config.to_payload(), indent=2))


def show_tools() -> None:
    """Print the tools exposed by the server with their input schemas."""
    typer.echo(json.dumps(list_tools(), indent=2))
