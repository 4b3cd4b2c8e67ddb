"""Main CLI interface using Typer."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..core import InventoryExporter
from ..exceptions import InventoryError, InventoryExportError
from ..gcp import AssetClient
from ..model.inventory import new_inventory
from ..model.result import ExportSummary, JobStatus
from ..model.sql_instance import load_manifest
from ..utils.logger import get_logger, set_log_level

# Create CLI app
app = typer.Typer(
    name="cai-inventory",
    help="Export Cloud Asset Inventory snapshots to Cloud Storage",
    add_completion=True,
)

console = Console()
logger = get_logger(__name__)

DEFAULT_MANIFEST = (
    Path(__file__).resolve().parents[1] / "manifests" / "sql" / "mysql-public" / "sqlinstance.yaml"
)

STATUS_STYLES = {
    JobStatus.SUCCEEDED: "green",
    JobStatus.FAILED: "red",
    JobStatus.SUBMITTED: "yellow",
    JobStatus.BUILT: "white",
}


def _print_summary(summary: ExportSummary) -> None:
    """Print per-job export results in a table."""
    table = Table(title=f"Inventory export of {summary.parent}", show_header=True)
    table.add_column("Content type", style="cyan")
    table.add_column("Destination", style="white")
    table.add_column("Status")
    table.add_column("Duration", justify="right")

    for result in summary.results:
        style = STATUS_STYLES.get(result.status, "white")
        duration = result.duration_seconds
        table.add_row(
            result.content_type.value,
            result.destination_uri,
            f"[{style}]{result.status.value.upper()}[/{style}]",
            f"{duration:.1f}s" if duration is not None else "-",
        )

    console.print(table)


@app.command()
def export(
    bucket: str = typer.Option(
        ..., "--bucket", "-b", envvar="CAI_BUCKET", help="GCS bucket to write inventory files to"
    ),
    project: Optional[str] = typer.Option(
        None, "--project", "-p", envvar="CAI_PROJECT", help="Project to take the inventory of"
    ),
    organization: Optional[str] = typer.Option(
        None,
        "--organization",
        "-o",
        envvar="CAI_ORGANIZATION",
        help="Organization to take the inventory of (takes precedence over --project)",
    ),
    control_project: Optional[str] = typer.Option(
        None,
        "--control-project",
        "-c",
        envvar="CAI_CONTROL_PROJECT",
        help="Project billed for the export (default: --project)",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", "-t", help="Seconds to wait for each export job (default: no limit)"
    ),
    concurrent: bool = typer.Option(
        False, "--concurrent/--sequential", help="Run both export jobs at the same time"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Export resource and IAM policy inventories to a GCS bucket."""
    if verbose:
        set_log_level(logging.DEBUG)

    control_project = control_project or project
    if not control_project:
        console.print("[red]Error:[/red] --control-project or --project is required")
        raise typer.Exit(1)

    try:
        config = new_inventory(
            control_project_id=control_project,
            bucket=bucket,
            project_id=project,
            organization_id=organization,
        )
    except InventoryError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    exporter = InventoryExporter(
        AssetClient(control_project_id=config.control_project_id),
        logger=logger,
        concurrent=concurrent,
    )

    try:
        with console.status("[bold green]Exporting Cloud Asset Inventory to GCS bucket..."):
            summary = exporter.export(config, timeout=timeout)
    except InventoryExportError as e:
        if e.summary is not None:
            _print_summary(e.summary)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Error:[/red] {str(e)}")
        raise typer.Exit(1)

    _print_summary(summary)
    console.print(f"[green]✓[/green] Inventory exported to [cyan]gs://{config.bucket}[/cyan]")


@app.command()
def show_instance(
    manifest: Path = typer.Argument(DEFAULT_MANIFEST, help="Path to a SQLInstance manifest"),
):
    """Summarize a Cloud SQL instance manifest."""
    try:
        instance = load_manifest(manifest)
    except InventoryError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    spec = instance.spec
    settings = spec.settings
    ip_config = settings.ip_configuration

    table = Table(title=f"SQLInstance {instance.name}", show_header=True)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Database version", spec.database_version)
    table.add_row("Region", spec.region)
    table.add_row("Tier", settings.tier)
    disk = f"{settings.disk_size or '-'} GB {settings.disk_type or ''}".strip()
    if settings.disk_autoresize:
        disk += " (autoresize)"
    table.add_row("Disk", disk)
    table.add_row("Backups", "enabled" if settings.backup_configuration.enabled else "disabled")
    table.add_row("Public IPv4", "yes" if ip_config.ipv4_enabled else "no")
    table.add_row("Require SSL", "yes" if ip_config.require_ssl else "no")
    for network in ip_config.authorized_networks:
        table.add_row("Authorized network", f"{network.name or '-'} ({network.value})")
    window = settings.maintenance_window
    if window:
        table.add_row(
            "Maintenance window",
            f"day {window.day}, {window.hour:02d}:00, track {window.update_track or '-'}",
        )

    console.print(table)


@app.command()
def version():
    """Show version information."""
    console.print("[bold]cai-inventory[/bold] version 0.1.0")
    console.print("Cloud Asset Inventory export tool")


if __name__ == "__main__":
    app()
