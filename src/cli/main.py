"""CLI entrypoint: export every Cloudflare zone to `./domains/<zone>.txt`."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from adapters.cloudflare_api import CloudflareClient
from adapters.http_client import build_api_client
from cli.ui_components import build_summary_table, print_error, print_heading
from core.config import AppSettings, load_settings
from core.domain.models import Credentials, Domain, PageInfo
from core.errors import ExportBatchError, ZoneExportError
from core.services.export_pipeline import ExportHooks, ExportSummary, run_export

app = typer.Typer(
    add_completion=False,
    help="Download the DNS zone-file export of every zone in a Cloudflare account.",
)

# Una línea por diagnóstico aunque la salida no sea una terminal (pipes, cron).
_console = Console(soft_wrap=True)


def _build_hooks() -> ExportHooks:
    def page_fetched(page_info: PageInfo) -> None:
        _console.print(f"Fetching batch of {page_info.count} DNS records ...")

    def zones_listed(domains: list[Domain], last_page: PageInfo | None) -> None:
        total = last_page.total_count if last_page is not None else len(domains)
        _console.print(f"Fetched {total} domains.")

    def exporting(count: int) -> None:
        _console.print("Writing domain DNS files")

    def exported(domain: Domain, path: Path) -> None:
        _console.print(f"Successfully exported DNS records for {escape(domain.name)}")

    def failure(domain: Domain, exc: ZoneExportError) -> None:
        print_error(_console, exc)

    return ExportHooks(
        page_fetched=page_fetched,
        zones_listed=zones_listed,
        exporting=exporting,
        exported=exported,
        failure=failure,
    )


async def _export(settings: AppSettings, credentials: Credentials) -> ExportSummary:
    async with build_api_client(credentials, settings) as http:
        return await run_export(
            CloudflareClient(http),
            settings.export_dir,
            continue_on_error=settings.continue_on_error,
            hooks=_build_hooks(),
        )


@app.command()
def export(
    env_file: Path | None = typer.Argument(
        None,
        help="Alternate .env file with CLOUDFLARE_API_KEY and CLOUDFLARE_USER_EMAIL (default: ./.env).",
        show_default=False,
    ),
) -> None:
    """List all zones, then write one zone-file export per zone."""

    try:
        if env_file is not None and env_file.is_file():
            _console.print(f"Using custom ENV file: {escape(str(env_file))}")
        settings = load_settings(env_file)
        credentials = settings.credentials()
        _console.print(escape("[Loaded environment data]") + "\n")

        print_heading(_console)
        summary = asyncio.run(_export(settings, credentials))

        if not summary.ok:
            _console.print(build_summary_table(summary))
            raise ExportBatchError(domain.name for domain, _ in summary.failed)
    except ZoneExportError as exc:
        print_error(_console, exc)
        raise typer.Exit(code=exc.exit_code) from exc

    _console.print(
        "Domain DNS records complete. "
        f"Please check the {escape(str(settings.export_dir))} directory for your files"
    )


def run() -> None:
    app()
