"""
Main CLI application using Typer.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Annotated

import pendulum
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..config import AppConfig
from ..domain.exceptions import CalendarExhausted, WorkingDaysError
from ..schemas import CalculationRequest, format_utc
from ..services.working_days import WorkingDaysService

app = typer.Typer(
    name="workingdays",
    help="Calcula fechas hábiles en Colombia sumando días y horas laborales",
    add_completion=False
)

console = Console()

WEEKDAY_NAMES = {
    0: "lunes",
    1: "martes",
    2: "miércoles",
    3: "jueves",
    4: "viernes",
    5: "sábado",
    6: "domingo",
}

ConfigOption = Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")]
MockOption = Annotated[bool, typer.Option("--mock", help="Use the bundled holiday list instead of the network.")]
OfflineOption = Annotated[bool, typer.Option("--offline", help="Compute holidays locally, never call the holiday source.")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_service(config_file: Optional[Path], mock: bool, offline: bool) -> WorkingDaysService:
    config = AppConfig.load_or_default(config_file)
    return WorkingDaysService.from_config(config, mock=mock, offline=offline)


def _format_local(local) -> str:
    return f"{WEEKDAY_NAMES[local.weekday()]} {local.format('DD.MM.YYYY HH:mm')}"


@app.command()
def calculate(
    days: Annotated[Optional[int], typer.Option("--days", "-d", help="Working days to add")] = None,
    hours: Annotated[Optional[int], typer.Option("--hours", "-h", help="Working hours to add")] = None,
    date: Annotated[Optional[str], typer.Option("--date", help="Start instant, ISO 8601 in UTC with Z suffix. Defaults to now.")] = None,
    config_file: ConfigOption = None,
    mock: MockOption = False,
    offline: OfflineOption = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print only the JSON response body.")] = False,
    verbose: VerboseOption = False,
):
    """
    Add working days and then working hours to an instant.

    Examples:

        workingdays calculate --hours 1 --date 2025-04-11T22:00:00Z

        workingdays calculate --days 1 --hours 4 --offline

        workingdays calculate --days 5 --json
    """
    _configure_logging(verbose)

    try:
        request = CalculationRequest.parse({"days": days, "hours": hours, "date": date})
        service = _build_service(config_file, mock, offline)
        result = service.calculate(request)

    except CalendarExhausted as e:
        console.print(f"[bold red]Error interno:[/bold red] {e}")
        raise typer.Exit(2)

    except (WorkingDaysError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    response = result.to_response()

    if as_json:
        typer.echo(json.dumps(response))
        return

    local = service.clock.to_local(result.result_instant)
    console.print()
    console.print(f"[bold green]✓ Resultado:[/bold green] {response['date']}")
    console.print(f"   Hora local: {_format_local(local)}")
    console.print()


@app.command()
def holidays(
    year: Annotated[int, typer.Argument(help="Year to list, e.g. 2025")],
    config_file: ConfigOption = None,
    mock: MockOption = False,
    offline: OfflineOption = False,
    verbose: VerboseOption = False,
):
    """
    List the holidays of a year and where they came from.
    """
    _configure_logging(verbose)

    try:
        service = _build_service(config_file, mock, offline)
        entry = service.authority.holidays_for_year(year)
        records = service.authority.holiday_records(year)

    except (WorkingDaysError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    table = Table(
        title=f"Festivos {year} (fuente: {entry.source.value})",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Fecha", style="bold yellow")
    table.add_column("Día", style="dim")
    table.add_column("Festivo")

    for record in records:
        table.add_row(
            record.civil_date.isoformat(),
            WEEKDAY_NAMES[record.civil_date.weekday()],
            record.name
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def check(
    date: Annotated[str, typer.Argument(help="Instant to check, ISO 8601 in UTC with Z suffix")],
    config_file: ConfigOption = None,
    mock: MockOption = False,
    offline: OfflineOption = False,
    verbose: VerboseOption = False,
):
    """
    Show whether an instant is working time and where it anchors to.
    """
    _configure_logging(verbose)

    if not date.endswith("Z"):
        console.print("[bold red]Error:[/bold red] date must be in UTC format with Z suffix")
        raise typer.Exit(1)

    try:
        moment = pendulum.parse(date)
        service = _build_service(config_file, mock, offline)
        result = service.check(moment)

    except CalendarExhausted as e:
        console.print(f"[bold red]Error interno:[/bold red] {e}")
        raise typer.Exit(2)

    except (WorkingDaysError, FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    def _yes_no(flag: bool) -> str:
        return "[green]sí[/green]" if flag else "[red]no[/red]"

    console.print(Panel.fit(
        f"[bold]Hora local:[/bold] {_format_local(result.local)}\n"
        f"[bold]Día hábil:[/bold] {_yes_no(result.is_working_day)}\n"
        f"[bold]Horario laboral:[/bold] {_yes_no(result.is_within_business_hours)}\n"
        f"[bold]Ancla hábil:[/bold] {_format_local(result.anchor)} "
        f"({format_utc(result.anchor)})",
        title=date
    ))


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]workingdays[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
