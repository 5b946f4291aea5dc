"""Cliente de la API v4 de Cloudflare (zonas + exportación DNS).

Fase única:
- `list_zones` recorre `GET zones?page=N` hasta `page >= total_pages`.
- `fetch_zone_export` descarga `zones/<id>/dns_records/export` como bytes.

Sin reintentos: cualquier fallo se traduce a una excepción de `core.errors`
y sube tal cual.
"""

from __future__ import annotations

from typing import Callable

import httpx
from pydantic import ValidationError

from core.domain.models import Domain, PageInfo, ZonesResponse
from core.errors import ApiError, AuthError, ConnectivityError, DecodeError, ExportStatusError

_AUTH_STATUSES = (httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN)


class CloudflareClient:
    """Implementa `ZoneSource` sobre un `httpx.AsyncClient` ya autenticado."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def _get(self, path: str, **kwargs) -> httpx.Response:
        try:
            return await self._http.get(path, **kwargs)
        except httpx.HTTPError as exc:
            raise ConnectivityError(
                f"Failed to connect to Cloudflare API: {exc}",
                hints=("Please check your internet connection and try again",),
            ) from exc

    async def _get_zones_page(self, page: int) -> ZonesResponse:
        response = await self._get("zones", params={"page": page})

        if response.status_code in _AUTH_STATUSES:
            raise AuthError(
                "Authentication failed with Cloudflare API",
                hints=("Please check that your API key and email are correct",),
            )

        try:
            return ZonesResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise DecodeError(
                f"Failed to parse Cloudflare API response: {exc}",
                hints=("The API may have changed or returned unexpected data",),
            ) from exc

    async def list_zones(
        self,
        on_page: Callable[[PageInfo], None] | None = None,
    ) -> list[Domain]:
        all_domains: list[Domain] = []
        current_page = 1

        while True:
            envelope = await self._get_zones_page(current_page)

            if not envelope.success:
                raise ApiError(
                    "Cloudflare API returned an unsuccessful response",
                    messages=[error.message for error in envelope.errors],
                )

            page_info = envelope.result_info
            if page_info is not None and on_page is not None:
                on_page(page_info)

            all_domains.extend(envelope.result or [])

            # Sin result_info no hay forma de saber si quedan páginas.
            if page_info is None or page_info.is_last:
                return all_domains

            current_page = page_info.page + 1

    async def fetch_zone_export(self, domain: Domain) -> bytes:
        try:
            response = await self._http.get(f"zones/{domain.id}/dns_records/export")
        except httpx.HTTPError as exc:
            raise ConnectivityError(
                f"Failed to fetch DNS records for domain {domain.name}: {exc}",
            ) from exc

        if not response.is_success:
            raise ExportStatusError(
                (
                    f"Cloudflare API returned status code {response.status_code} "
                    f"when fetching DNS records for {domain.name}"
                ),
                status_code=response.status_code,
                domain_name=domain.name,
            )

        return response.content
