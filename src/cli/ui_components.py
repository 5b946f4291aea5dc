"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar la orquestación del comando con detalles visuales.
- Todo texto dinámico (nombres de zona, mensajes de la API) pasa por
  `escape` para que Rich no lo interprete como markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.errors import ApiError, ZoneExportError
from core.services.export_pipeline import ExportSummary


def print_heading(console: Console) -> None:
    console.print("Getting List of domains from Cloudflare")
    console.print("=======================================\n")


def print_error(console: Console, exc: ZoneExportError) -> None:
    """Imprime un error conocido con sus pistas y los mensajes de la API."""

    console.print(f"[red]Error:[/red] {escape(exc.message)}")
    if isinstance(exc, ApiError):
        for message in exc.messages:
            console.print(f"  - {escape(message)}")
    for hint in exc.hints:
        console.print(escape(hint))


def build_summary_table(summary: ExportSummary) -> Table:
    """Tabla de resultados por zona (modo best-effort)."""

    table = Table(title="DNS Export Summary")
    table.add_column("Zone", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    for domain, path in summary.exported:
        table.add_row(escape(domain.name), "[green]OK[/green]", escape(str(path)))
    for domain, exc in summary.failed:
        table.add_row(escape(domain.name), "[red]FAIL[/red]", escape(exc.message))
    return table
