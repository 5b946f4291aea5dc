"""Escritura de las exportaciones DNS en disco.

Por qué bytes:
- La exportación es el formato zone-file propio de Cloudflare; la tratamos
  como un blob opaco y la guardamos byte a byte, sin parsear ni normalizar.
"""

from __future__ import annotations

from pathlib import Path

from core.domain.models import Domain
from core.errors import FileSystemError, UnsafeZoneNameError

_FORBIDDEN_CHARS = ("/", "\\", "\x00")


def ensure_output_dir(output_dir: Path) -> Path:
    """Crea el directorio de salida si no existe (una sola vez por run)."""

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileSystemError(f"Failed to create directory {output_dir}: {exc}") from exc
    return output_dir


def zone_file_path(output_dir: Path, domain: Domain) -> Path:
    """Ruta `<output_dir>/<domain.name>.txt`.

    Un nombre con separadores de ruta podría escribir fuera del directorio,
    así que se rechaza en lugar de escaparlo.
    """

    name = domain.name
    if name in ("", ".", "..") or any(ch in name for ch in _FORBIDDEN_CHARS):
        raise UnsafeZoneNameError(
            f"Refusing to write DNS records for zone {name!r} (id {domain.id}): "
            "name is not a safe file name",
        )
    return output_dir / f"{name}.txt"


def write_zone_export(output_dir: Path, domain: Domain, payload: bytes) -> Path:
    """Escribe la exportación, sobrescribiendo cualquier fichero anterior."""

    file_path = zone_file_path(output_dir, domain)
    try:
        file_path.write_bytes(payload)
    except OSError as exc:
        raise FileSystemError(
            f"Failed to write DNS records for domain {domain.name} to file {file_path}: {exc}",
        ) from exc
    return file_path
