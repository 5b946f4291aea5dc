"""Contrato de la fuente de zonas.

Por qué Protocol:
- El pipeline solo necesita listar zonas y descargar su exportación.
- Los tests pueden sustituir el cliente HTTP por un fake en memoria.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from core.domain.models import Domain, PageInfo


@runtime_checkable
class ZoneSource(Protocol):
    """Contrato mínimo de un proveedor DNS exportable.

    Reglas de diseño:
    - Ambos métodos son asíncronos porque hacen I/O (HTTP).
    - Los errores se señalan con subclases de `ZoneExportError`, nunca con
      valores de retorno.
    """

    async def list_zones(
        self,
        on_page: Callable[[PageInfo], None] | None = None,
    ) -> list[Domain]:
        """Devuelve todas las zonas de la cuenta, en el orden de la API."""

        ...

    async def fetch_zone_export(self, domain: Domain) -> bytes:
        """Devuelve la exportación en texto plano de una zona, sin tocar."""

        ...
