"""Typer CLI entrypoint for Vehicle Desk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from .config import ConfigRepository, GlobalConfig
from .engine.exporter import available_formats
from .exceptions import UnknownFormatError, VehicleServiceError
from .infra import FileDelivery, FileVehicleSource, VehicleService
from .logging_conf import configure_logging, desk_log_path, tail_log
from .models import FilterCriteria, VehicleRecord
from .orchestrator import VehicleListOrchestrator

app = typer.Typer(
    help="Vehicle Desk Kommandozeile",
    no_args_is_help=True,
    rich_markup_mode=None,
)
vehicles_app = typer.Typer(
    name="vehicles",
    help="Fahrzeugliste anzeigen, filtern und exportieren",
    no_args_is_help=True,
    rich_markup_mode=None,
)
log_app = typer.Typer(
    name="log",
    help="Protokoll anzeigen",
    no_args_is_help=True,
    rich_markup_mode=None,
)

console = Console()


@dataclass
class AppState:
    repository: ConfigRepository
    config: GlobalConfig

    def orchestrator(
        self,
        records_file: Path | None = None,
        output_dir: Path | None = None,
        require_service: bool = False,
    ) -> VehicleListOrchestrator:
        """Build a vehicle list wired to the configured collaborators."""

        target_dir = output_dir or self.repository.resolve_path(self.config.export.output_dir)
        delivery = FileDelivery(target_dir)
        file_path = records_file or (
            self.config.records_file if self.config.source == "file" else None
        )
        if file_path is not None and not require_service:
            source = FileVehicleSource(self.repository.resolve_path(file_path))
            return VehicleListOrchestrator(source=source, delivery=delivery)
        service = VehicleService(self.config.api.base_url, timeout=self.config.api.timeout)
        return VehicleListOrchestrator(source=service, delivery=delivery, service=service)


def build_state(verbose: bool) -> AppState:
    repository = ConfigRepository()
    config = repository.load_global_config()
    configure_logging(verbose=verbose)
    return AppState(repository=repository, config=config)


def _get_state(ctx: typer.Context) -> AppState:
    state = ctx.obj
    if state is None:
        state = build_state(verbose=False)
        ctx.obj = state
    return state


def _criteria(
    vehicle_id: Optional[str],
    make: Optional[str],
    model: Optional[str],
    color: Optional[str],
    status: Optional[str],
) -> FilterCriteria:
    return FilterCriteria(id=vehicle_id, make=make, model=model, color=color, status=status)


def _load(orchestrator: VehicleListOrchestrator) -> None:
    try:
        orchestrator.load_vehicles()
    except VehicleServiceError as exc:
        orchestrator.close()
        console.print(f"Fehler beim Laden der Fahrzeuge: {exc.message}", style="red")
        raise typer.Exit(code=1) from exc


def _render_vehicles_table(view: Sequence[VehicleRecord], total: int) -> Table:
    table = Table(
        title=f"Fahrzeuge · {len(view)} von {total}",
        box=box.SIMPLE_HEAD,
        show_lines=False,
    )
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Kunde", style="dim")
    table.add_column("Marke", style="magenta")
    table.add_column("Modell", style="magenta")
    table.add_column("Erstzulassung")
    table.add_column("Farbe")
    table.add_column("Status", style="green")
    table.add_column("Ausstattung", overflow="fold")
    for vehicle in view:
        table.add_row(
            str(vehicle.id),
            str(vehicle.customer_id),
            vehicle.make,
            vehicle.model,
            vehicle.initial_registration or "-",
            vehicle.color or "-",
            vehicle.status.value,
            ", ".join(vehicle.equipment_features or ()) or "-",
        )
    return table


app.add_typer(vehicles_app, name="vehicles", help="Fahrzeuge auflisten, exportieren, löschen")
app.add_typer(log_app, name="log", help="Protokolldatei anzeigen")


@app.callback()
def main(
    ctx: typer.Context, verbose: bool = typer.Option(False, "--verbose", help="Debug-Protokoll aktivieren")
) -> None:
    ctx.obj = build_state(verbose)


@vehicles_app.command("list", help="Fahrzeuge anzeigen, optional gefiltert.")
def vehicles_list(
    ctx: typer.Context,
    vehicle_id: Optional[str] = typer.Option(None, "--id", help="Exakte Fahrzeug-ID."),
    make: Optional[str] = typer.Option(None, "--make", help="Marke enthält (ohne Groß-/Kleinschreibung)."),
    model: Optional[str] = typer.Option(None, "--model", help="Modell enthält."),
    color: Optional[str] = typer.Option(None, "--color", help="Farbe enthält."),
    status: Optional[str] = typer.Option(None, "--status", help="Verfügbar, Reserviert oder Verkauft."),
    records_file: Optional[Path] = typer.Option(None, "--file", help="Fahrzeuge aus JSON/YAML-Datei lesen."),
) -> None:
    state = _get_state(ctx)
    orchestrator = state.orchestrator(records_file=records_file)
    _load(orchestrator)
    view = orchestrator.apply_filter(_criteria(vehicle_id, make, model, color, status))
    orchestrator.close()
    if not view:
        console.print("Keine Fahrzeuge gefunden.", style="yellow")
        return
    console.print(_render_vehicles_table(view, len(orchestrator.engine.records)))


@vehicles_app.command("export", help="Gefilterte Fahrzeuge als CSV, JSON oder XML exportieren.")
def vehicles_export(
    ctx: typer.Context,
    format_name: Optional[str] = typer.Option(
        None, "--format", "-f", help=f"Exportformat ({', '.join(available_formats())})."
    ),
    vehicle_id: Optional[str] = typer.Option(None, "--id", help="Exakte Fahrzeug-ID."),
    make: Optional[str] = typer.Option(None, "--make", help="Marke enthält."),
    model: Optional[str] = typer.Option(None, "--model", help="Modell enthält."),
    color: Optional[str] = typer.Option(None, "--color", help="Farbe enthält."),
    status: Optional[str] = typer.Option(None, "--status", help="Verfügbar, Reserviert oder Verkauft."),
    records_file: Optional[Path] = typer.Option(None, "--file", help="Fahrzeuge aus JSON/YAML-Datei lesen."),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", help="Zielverzeichnis für den Export."),
) -> None:
    state = _get_state(ctx)
    orchestrator = state.orchestrator(records_file=records_file, output_dir=output_dir)
    _load(orchestrator)
    orchestrator.apply_filter(_criteria(vehicle_id, make, model, color, status))
    try:
        result = orchestrator.export(format_name or state.config.export.default_format)
    except UnknownFormatError as exc:
        console.print(str(exc), style="red")
        raise typer.Exit(code=1) from exc
    finally:
        orchestrator.close()
    console.print(
        f"{result.count} Fahrzeuge exportiert: {result.location}",
        style="green",
    )


@vehicles_app.command("delete", help="Fahrzeug über den Fahrzeug-Service löschen.")
def vehicles_delete(
    ctx: typer.Context,
    vehicle_id: int = typer.Argument(..., help="ID des Fahrzeugs"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Ohne Rückfrage löschen"),
) -> None:
    state = _get_state(ctx)
    if not yes and not typer.confirm("Sind Sie sicher, dass Sie dieses Fahrzeug löschen möchten?"):
        console.print("Löschen abgebrochen.", style="yellow")
        raise typer.Exit(code=0)
    orchestrator = state.orchestrator(require_service=True)
    try:
        result = orchestrator.delete_vehicle(vehicle_id)
    except VehicleServiceError as exc:
        # deleted, but the reload afterwards failed
        console.print(f"Fehler beim Neuladen: {exc.message}", style="red")
        raise typer.Exit(code=1) from exc
    finally:
        orchestrator.close()
    if not result.ok:
        console.print(result.message, style="red")
        raise typer.Exit(code=1)
    console.print(result.message, style="green")


@log_app.command("show", help="Letzte Zeilen des Protokolls anzeigen.")
def log_show(
    tail: int = typer.Option(100, "--tail", min=1, help="Anzahl der Zeilen."),
) -> None:
    lines = tail_log(desk_log_path(), tail)
    if not lines:
        console.print("Noch keine Protokolleinträge.", style="dim")
        return
    console.print(f"Protokoll · letzte {len(lines)} Zeilen", style="cyan")
    console.print("".join(lines))


def cli() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    cli()
