from rich.console import Console
from rich.table import Table

from cypress_mcp.cli.theme import theme
from cypress_mcp.domain.value_objects.artifact_types import ArtifactListing
from cypress_mcp.domain.value_objects.run_record import RunRecord


def format_run_records(console: Console, records: list[RunRecord]) -> None:
    if not records:
        console.print(f"[{theme.DIM}]No run results recorded in this session.[/]")
        return

    table = Table(title="Cypress Runs")
    table.add_column("Run ID", style=theme.COLUMN_ID)
    table.add_column("Status")
    table.add_column("Exit", justify="right", style=theme.COLUMN_NUMBER)
    table.add_column("Duration", justify="right")
    table.add_column("Spec", style=theme.DIM)

    for record in records:
        status = (
            f"[{theme.SUCCESS}]passed[/]" if record.success else f"[{theme.ERROR}]failed[/]"
        )
        table.add_row(
            record.run_id,
            status,
            str(record.exit_code),
            f"{record.duration_ms / 1000:.1f}s",
            record.spec or "all",
        )

    console.print(table)


def format_artifacts(console: Console, listing: ArtifactListing) -> None:
    if not listing.artifacts:
        console.print(f"[{theme.DIM}]No {listing.kind.value} found.[/]")
        return

    table = Table(title=listing.kind.value.capitalize())
    table.add_column("Path", style=theme.COLUMN_PATH)
    table.add_column("Size", justify="right", style=theme.COLUMN_NUMBER)

    for artifact in listing.artifacts:
        table.add_row(artifact.relative_path, f"{artifact.size:,} B")

    console.print(table)
