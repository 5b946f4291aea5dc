"""Zone export orchestration.

The CLI delegates the whole listing/exporting flow to these helpers so the
sequence (list every zone first, create the output directory once, then
export each zone in order) is reusable from tests without spawning a
process. Side-effects such as printing stay in the UI layer through
`ExportHooks`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from adapters.zone_files import ensure_output_dir, write_zone_export
from core.domain.models import Domain, PageInfo
from core.errors import ZoneExportError
from core.interfaces.zone_source import ZoneSource


@dataclass
class ExportHooks:
    """Optional callbacks for UI layers (progress, failures)."""

    listing_started: Callable[[], None] | None = None
    page_fetched: Callable[[PageInfo], None] | None = None
    zones_listed: Callable[[list[Domain], PageInfo | None], None] | None = None
    exporting: Callable[[int], None] | None = None
    exported: Callable[[Domain, Path], None] | None = None
    failure: Callable[[Domain, ZoneExportError], None] | None = None


@dataclass
class ExportSummary:
    """Output of a pipeline invocation."""

    domains: list[Domain]
    output_dir: Path
    exported: list[tuple[Domain, Path]] = field(default_factory=list)
    failed: list[tuple[Domain, ZoneExportError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


async def export_dns(source: ZoneSource, domain: Domain, output_dir: Path) -> Path:
    """Fetch one zone export and write it to `<output_dir>/<name>.txt`.

    Nothing is written when the fetch fails.
    """

    payload = await source.fetch_zone_export(domain)
    return write_zone_export(output_dir, domain, payload)


async def run_export(
    source: ZoneSource,
    output_dir: Path,
    *,
    continue_on_error: bool = False,
    hooks: ExportHooks | None = None,
) -> ExportSummary:
    """List every zone, then export each one sequentially.

    By default the first failing zone aborts the batch and its error is
    re-raised; remaining zones are never attempted. With
    `continue_on_error=True` every zone is attempted and failures are
    collected in the summary.
    """

    hooks = hooks or ExportHooks()

    if hooks.listing_started:
        hooks.listing_started()

    last_page: PageInfo | None = None

    def _on_page(page_info: PageInfo) -> None:
        nonlocal last_page
        last_page = page_info
        if hooks.page_fetched:
            hooks.page_fetched(page_info)

    domains = await source.list_zones(on_page=_on_page)
    if hooks.zones_listed:
        hooks.zones_listed(domains, last_page)

    if hooks.exporting:
        hooks.exporting(len(domains))
    ensure_output_dir(output_dir)

    summary = ExportSummary(domains=domains, output_dir=output_dir)
    for domain in domains:
        try:
            path = await export_dns(source, domain, output_dir)
        except ZoneExportError as exc:
            if not continue_on_error:
                raise
            summary.failed.append((domain, exc))
            if hooks.failure:
                hooks.failure(domain, exc)
            continue

        summary.exported.append((domain, path))
        if hooks.exported:
            hooks.exported(domain, path)

    return summary
