"""One CLI command per dispatcher operation.

Each invocation builds a fresh dispatcher, so run results live only for the
duration of the command. Use ``cypress-mcp serve`` for a session that keeps
results between calls.
"""

import asyncio
import json
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from cypress_mcp.application.dispatcher import CommandResult
from cypress_mcp.cli.container import build_dispatcher
from cypress_mcp.cli.formatters import format_artifacts, format_run_records
from cypress_mcp.cli.payloads import error_payload, to_payload
from cypress_mcp.cli.state import CliState
from cypress_mcp.domain.value_objects.artifact_types import ArtifactListing
from cypress_mcp.domain.value_objects.browser import Browser
from cypress_mcp.domain.value_objects.command_name import CommandName
from cypress_mcp.domain.value_objects.run_record import RunRecord

console = Console()


def parse_pairs(pairs: list[str] | None, option: str) -> dict[str, str]:
    """Parse repeated KEY=VALUE options into a dict."""
    parsed: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got '{pair}'", param_hint=option)
        parsed[key] = value
    return parsed


def parse_config_pairs(pairs: list[str] | None, option: str) -> dict[str, Any]:
    """Like parse_pairs, but values that parse as JSON keep their type."""
    parsed: dict[str, Any] = {}
    for key, value in parse_pairs(pairs, option).items():
        try:
            parsed[key] = json.loads(value)
        except json.JSONDecodeError:
            parsed[key] = value
    return parsed


def _compact(args: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in args.items() if value not in (None, {}, [])}


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


def execute_command(
    ctx: typer.Context,
    command: CommandName,
    args: dict[str, Any],
) -> CommandResult:
    """Dispatch one command; print an error payload and exit 1 on failure."""
    state: CliState = ctx.obj
    dispatcher = build_dispatcher(state.config)
    try:
        return asyncio.run(dispatcher.execute(command.value, args))
    except Exception as e:
        _echo_json({"error": error_payload(e, include_trace=state.debug)})
        raise typer.Exit(1) from None


def run_tests(
    ctx: typer.Context,
    spec: str | None = typer.Option(None, "--spec", "-s", help="Spec file or glob pattern"),
    browser: Browser | None = typer.Option(None, "--browser", "-b", help="Browser to use"),
    headless: bool | None = typer.Option(
        None, "--headless/--headed", help="Override the configured headless mode"
    ),
    base_url: str | None = typer.Option(None, "--base-url", help="Application base URL"),
    project: Path | None = typer.Option(None, "--project", "-p", help="Cypress project path"),
    env: list[str] | None = typer.Option(
        None, "--env", "-e", help="Environment variable KEY=VALUE (repeatable)"
    ),
    cypress_config: list[str] | None = typer.Option(
        None, "--cypress-config", help="Cypress config KEY=VALUE (repeatable)"
    ),
) -> None:
    """Run Cypress tests headlessly and print the run record."""
    args = _compact(
        {
            "spec": spec,
            "browser": browser.value if browser else None,
            "headless": headless,
            "baseUrl": base_url,
            "project": str(project) if project else None,
            "env": parse_pairs(env, "--env"),
            "config": parse_config_pairs(cypress_config, "--cypress-config"),
        }
    )
    _echo_json(to_payload(execute_command(ctx, CommandName.RUN, args)))


def open_runner(
    ctx: typer.Context,
    browser: Browser | None = typer.Option(None, "--browser", "-b", help="Browser to open"),
    project: Path | None = typer.Option(None, "--project", "-p", help="Cypress project path"),
) -> None:
    """Show how to open the interactive Test Runner."""
    args = _compact(
        {
            "browser": browser.value if browser else None,
            "project": str(project) if project else None,
        }
    )
    _echo_json(to_payload(execute_command(ctx, CommandName.OPEN, args)))


def validate_test(
    ctx: typer.Context,
    test_file: Path | None = typer.Option(None, "--file", "-f", help="Test file to validate"),
    test_code: str | None = typer.Option(None, "--code", help="Test code to validate"),
) -> None:
    """Check a Cypress test for common structure and commands."""
    args = _compact(
        {"testFile": str(test_file) if test_file else None, "testCode": test_code}
    )
    _echo_json(to_payload(execute_command(ctx, CommandName.VALIDATE, args)))


def generate_test(
    ctx: typer.Context,
    description: str = typer.Argument(..., help="What the test should do"),
    test_name: str | None = typer.Option(None, "--name", "-n", help="Name for the test"),
    output_path: Path | None = typer.Option(None, "--output", "-o", help="Where to save it"),
) -> None:
    """Generate a Cypress test scaffold from a description."""
    args = _compact(
        {
            "description": description,
            "testName": test_name,
            "outputPath": str(output_path) if output_path else None,
        }
    )
    _echo_json(to_payload(execute_command(ctx, CommandName.GENERATE, args)))


def get_results(
    ctx: typer.Context,
    run_id: str | None = typer.Option(None, "--run-id", "-r", help="Run ID to show"),
    pretty: bool = typer.Option(False, "--pretty", help="Render a table instead of JSON"),
) -> None:
    """Show recorded run results.

    Results only persist inside a `cypress-mcp serve` session; a standalone
    call starts with an empty store and finds nothing.
    """
    result = execute_command(ctx, CommandName.GET_RESULTS, _compact({"runId": run_id}))
    if pretty:
        records = result if isinstance(result, list) else [result]
        format_run_records(console, [r for r in records if isinstance(r, RunRecord)])
        return
    _echo_json(to_payload(result))


def _artifacts(
    ctx: typer.Context,
    command: CommandName,
    args: dict[str, Any],
    pretty: bool,
) -> None:
    result = execute_command(ctx, command, _compact(args))
    if pretty and isinstance(result, ArtifactListing):
        format_artifacts(console, result)
        return
    _echo_json(to_payload(result))


def get_screenshots(
    ctx: typer.Context,
    run_id: str | None = typer.Option(None, "--run-id", "-r", help="Filter by run ID"),
    test_path: str | None = typer.Option(None, "--test-path", "-t", help="Filter by test path"),
    project: Path | None = typer.Option(None, "--project", "-p", help="Cypress project path"),
    pretty: bool = typer.Option(False, "--pretty", help="Render a table instead of JSON"),
) -> None:
    """List screenshots captured during test runs."""
    _artifacts(
        ctx,
        CommandName.GET_SCREENSHOTS,
        {
            "runId": run_id,
            "testPath": test_path,
            "project": str(project) if project else None,
        },
        pretty,
    )


def get_videos(
    ctx: typer.Context,
    run_id: str | None = typer.Option(None, "--run-id", "-r", help="Filter by run ID"),
    project: Path | None = typer.Option(None, "--project", "-p", help="Cypress project path"),
    pretty: bool = typer.Option(False, "--pretty", help="Render a table instead of JSON"),
) -> None:
    """List videos recorded during test runs."""
    _artifacts(
        ctx,
        CommandName.GET_VIDEOS,
        {"runId": run_id, "project": str(project) if project else None},
        pretty,
    )
