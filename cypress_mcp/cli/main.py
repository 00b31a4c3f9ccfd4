import os
import sys
from pathlib import Path

import typer
from loguru import logger

from cypress_mcp.cli.commands import operations, serve, show_config
from cypress_mcp.cli.state import CliState
from cypress_mcp.infrastructure.config.loader import load_config

LOG_FORMAT = "{time:HH:mm:ss} | {level: <8} | {message}"


def get_log_dir() -> Path:
    return Path(os.getenv("LOG_DIR") or Path.cwd() / "logs")


def setup_logging(verbose: bool = False, log_dir: Path | None = None) -> Path:
    """Configure loguru sinks and return the log directory.

    stdout is reserved for command output, so console logging goes to
    stderr and only when verbose.
    """
    logger.remove()

    log_dir = log_dir or get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    level = os.getenv("LOG_LEVEL", "INFO").upper()

    logger.add(
        log_dir / "combined.log",
        level=level,
        serialize=True,
        rotation="10 MB",
        encoding="utf-8",
    )
    logger.add(
        log_dir / "error.log",
        level="ERROR",
        serialize=True,
        rotation="10 MB",
        encoding="utf-8",
    )

    if verbose:
        logger.add(sys.stderr, format=LOG_FORMAT, level="DEBUG")

    return log_dir


app = typer.Typer(
    name="cypress-mcp",
    help="Run Cypress end-to-end tests and collect their results and artifacts",
    no_args_is_help=True,
)

app.command(name="run")(operations.run_tests)
app.command(name="open")(operations.open_runner)
app.command(name="validate")(operations.validate_test)
app.command(name="generate")(operations.generate_test)
app.command(name="results")(operations.get_results)
app.command(name="screenshots")(operations.get_screenshots)
app.command(name="videos")(operations.get_videos)
app.command(name="serve")(serve.serve)
app.command(name="config")(show_config.show_config)
app.command(name="tools")(show_config.show_tools)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stderr", is_eager=True),
    debug: bool = typer.Option(False, "--debug", help="Include tracebacks in error output"),
    config_file: Path | None = typer.Option(
        None,
        "--config-file",
        help="Config file (default: $CYPRESS_MCP_CONFIG or ./cypress-mcp.config.yaml)",
    ),
) -> None:
    """Cypress MCP server - drive Cypress runs from remote callers."""
    setup_logging(verbose=verbose)
    ctx.obj = CliState(config=load_config(config_file), debug=debug)


if __name__ == "__main__":
    app()
