"""Errores tipados del exportador.

Por qué excepciones y no `sys.exit`:
- Las funciones del Core y de los adaptadores se pueden componer y testear sin
  lanzar un proceso.
- Un único manejador en la CLI decide qué imprimir y con qué exit code.
"""

from __future__ import annotations

from typing import Iterable


class ZoneExportError(Exception):
    """Base de todos los errores conocidos (siempre terminan en exit code 1)."""

    exit_code = 1

    def __init__(self, message: str, *, hints: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.hints = tuple(hints)


class ConfigError(ZoneExportError):
    """Fichero .env ausente o credenciales inválidas."""


class AuthError(ZoneExportError):
    """Cloudflare respondió 401/403."""


class ConnectivityError(ZoneExportError):
    """Fallo de transporte (DNS, TLS, conexión rechazada, timeout)."""


class DecodeError(ZoneExportError):
    """El cuerpo de la respuesta no es el sobre JSON esperado."""


class ApiError(ZoneExportError):
    """Respuesta bien formada pero con `success == false`."""

    def __init__(
        self,
        message: str,
        *,
        messages: Iterable[str] = (),
        hints: Iterable[str] = (),
    ) -> None:
        super().__init__(message, hints=hints)
        self.messages = tuple(messages)


class ExportStatusError(ApiError):
    """El endpoint de exportación devolvió un status no-2xx."""

    def __init__(self, message: str, *, status_code: int, domain_name: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.domain_name = domain_name


class FileSystemError(ZoneExportError):
    """No se pudo crear el directorio o escribir el fichero de zona."""


class UnsafeZoneNameError(FileSystemError):
    """El nombre de la zona no es utilizable como nombre de fichero."""


class ExportBatchError(ZoneExportError):
    """Resumen final cuando el modo best-effort terminó con fallos."""

    def __init__(self, failed: Iterable[str]) -> None:
        names = tuple(failed)
        super().__init__(
            f"Failed to export DNS records for {len(names)} domain(s)",
            hints=tuple(f"  - {name}" for name in names),
        )
        self.failed = names
