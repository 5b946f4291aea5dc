"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base URL, cabeceras de autenticación y timeouts.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.models import Credentials
from core.errors import ConfigError


def _is_valid_header_value(value: str) -> bool:
    # Visible ASCII o tabulador; nada de CR/LF ni bytes no-ASCII.
    return all(ch == "\t" or 0x20 <= ord(ch) < 0x7F for ch in value)


def build_auth_headers(credentials: Credentials) -> dict[str, str]:
    """Cabeceras que Cloudflare exige con Global API Key."""

    if not _is_valid_header_value(credentials.email):
        raise ConfigError(
            "Invalid email format for Cloudflare header",
            hints=("Please check your email address in the .env file",),
        )
    if not _is_valid_header_value(credentials.api_key):
        raise ConfigError(
            "Invalid API key format for Cloudflare header",
            hints=("Please check your API key in the .env file",),
        )
    return {
        "X-Auth-Email": credentials.email,
        "X-Auth-Key": credentials.api_key,
        "Content-Type": "application/json",
    }


def build_api_client(
    credentials: Credentials,
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea el `httpx.AsyncClient` compartido por todo el run.

    Las credenciales no cambian durante la ejecución, así que un único
    cliente basta para listar zonas y descargar todas las exportaciones.
    """

    settings = settings or AppSettings()
    options: dict[str, object] = {}
    if settings.http_timeout_seconds is not None:
        options["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    if transport is not None:
        options["transport"] = transport

    base_url = settings.api_base_url
    if not base_url.endswith("/"):
        base_url += "/"

    return httpx.AsyncClient(
        base_url=base_url,
        headers=build_auth_headers(credentials),
        **options,
    )
