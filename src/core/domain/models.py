"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validamos el sobre de la API de Cloudflare en el borde: si cambia el esquema,
  falla el parseo y no la lógica de paginación.
- Los modelos describen *qué* devuelve la API, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

T = TypeVar("T")


class Domain(BaseModel):
    """Una zona DNS de la cuenta.

    La API de zonas devuelve decenas de campos (plan, owner, name_servers...);
    solo conservamos los dos que necesita la exportación.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Identificador de zona asignado por Cloudflare.",
    )
    name: str = Field(
        ...,
        description="Nombre de dominio legible (p.ej. 'example.com').",
    )


class PageInfo(BaseModel):
    """Bloque `result_info` de una respuesta paginada."""

    model_config = ConfigDict(extra="ignore")

    page: int = Field(..., ge=0, description="Página actual (1-based).")
    total_pages: int = Field(..., ge=0, description="Páginas totales declaradas.")
    count: int = Field(default=0, ge=0, description="Elementos en esta página.")
    total_count: int = Field(default=0, ge=0, description="Elementos en todas las páginas.")

    @property
    def is_last(self) -> bool:
        return self.page >= self.total_pages


class ApiMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: int | None = None
    message: str


class ApiResponse(BaseModel, Generic[T]):
    """Sobre genérico de todas las respuestas de la API v4.

    `errors` solo trae contenido cuando `success` es falso.
    """

    model_config = ConfigDict(extra="ignore")

    success: bool
    result: T | None = None
    result_info: PageInfo | None = None
    errors: list[ApiMessage] = Field(default_factory=list)


ZonesResponse = ApiResponse[list[Domain]]


class Credentials(BaseModel):
    """Credenciales de la cuenta (Global API Key + email).

    Se cargan una vez y solo viajan en cabeceras; el `repr` oculta la key.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1, repr=False)
    email: str = Field(..., min_length=1)
