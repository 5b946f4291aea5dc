"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni ficheros: solo zonas y páginas.
"""

from core.domain.models import (
    ApiMessage,
    ApiResponse,
    Credentials,
    Domain,
    PageInfo,
    ZonesResponse,
)

__all__ = [
    "ApiMessage",
    "ApiResponse",
    "Credentials",
    "Domain",
    "PageInfo",
    "ZonesResponse",
]
