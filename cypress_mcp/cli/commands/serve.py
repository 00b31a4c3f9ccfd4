import asyncio

import typer

from cypress_mcp.cli.container import build_dispatcher
from cypress_mcp.cli.state import CliState
from cypress_mcp.cli.stdio_server import StdioServer


def serve(ctx: typer.Context) -> None:
    """Serve commands as JSON lines over stdin/stdout until stdin closes."""
    state: CliState = ctx.obj
    server = StdioServer(
        build_dispatcher(state.config),
        state.config,
        include_trace=state.debug,
    )
    asyncio.run(server.serve())
