"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que los adaptadores (HTTP/ficheros) lean config de forma consistente.

Orden de resolución: variables de entorno reales primero, luego el fichero
`.env` (el por defecto o el indicado en la línea de comandos).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import Credentials
from core.errors import ConfigError

DEFAULT_ENV_FILE = Path(".env")
CLOUDFLARE_ENDPOINT = "https://api.cloudflare.com/client/v4/"
PLACEHOLDER_VALUE = "NULL"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars / .env) sin ensuciar el Core.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLOUDFLARE_",
        extra="ignore",
        case_sensitive=False,
        env_file=None,
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="Global API Key de la cuenta (cabecera X-Auth-Key).",
    )
    user_email: str | None = Field(
        default=None,
        description="Email de la cuenta (cabecera X-Auth-Email).",
    )
    api_base_url: str = Field(
        default=CLOUDFLARE_ENDPOINT,
        min_length=8,
        description="Base URL de la API v4.",
    )
    export_dir: Path = Field(
        default=Path("domains"),
        description="Directorio donde se escriben los ficheros de zona.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request; sin valor se usa el de httpx.",
    )
    continue_on_error: bool = Field(
        default=False,
        description="Seguir con el resto de dominios si uno falla (resumen al final).",
    )

    def credentials(self) -> Credentials:
        """Valida las credenciales cargadas y las devuelve.

        Rechaza claves ausentes, vacías o con el placeholder `NULL` de
        `.env.example`.
        """

        if self.api_key is None:
            raise ConfigError(
                "CLOUDFLARE_API_KEY not found in environment",
                hints=(
                    "Please make sure your .env file contains:",
                    "CLOUDFLARE_API_KEY=your_api_key_here",
                ),
            )
        if self.user_email is None:
            raise ConfigError(
                "CLOUDFLARE_USER_EMAIL not found in environment",
                hints=(
                    "Please make sure your .env file contains:",
                    "CLOUDFLARE_USER_EMAIL=your_email_here",
                ),
            )

        # h11 rechaza valores de cabecera con espacios al inicio o al final.
        api_key = self.api_key.strip()
        email = self.user_email.strip()
        if not api_key:
            raise ConfigError(
                "Cloudflare API key is empty",
                hints=("Please update your .env file with a valid API key",),
            )
        if not email:
            raise ConfigError(
                "Cloudflare user email is empty",
                hints=("Please update your .env file with a valid email address",),
            )

        if PLACEHOLDER_VALUE in (api_key, email):
            raise ConfigError(
                "You appear to be using default placeholder values in your .env file",
                hints=(
                    "Please update your .env file with your actual Cloudflare credentials:",
                    "CLOUDFLARE_API_KEY=your_api_key_here",
                    "CLOUDFLARE_USER_EMAIL=your_email_here",
                    "",
                    "Exiting. Please update your credentials and try again.",
                ),
            )

        return Credentials(api_key=api_key, email=email)


def resolve_env_file(custom_path: Path | None = None) -> Path:
    """Decide qué fichero .env usar, o lanza `ConfigError` si no existe."""

    if custom_path is not None:
        if not custom_path.is_file():
            raise ConfigError(
                f"Specified environment file '{custom_path}' not found",
                hints=("Please check the file path and try again",),
            )
        return custom_path

    if not DEFAULT_ENV_FILE.is_file():
        raise ConfigError(
            "No environment (.env) file found.",
            hints=(
                "Please create a .env file with your Cloudflare API credentials.",
                "You can copy the .env.example file as a starting point:",
                "",
                "    cp .env.example .env",
                "",
                "Then edit the .env file to add your credentials.",
            ),
        )
    return DEFAULT_ENV_FILE


def load_settings(custom_path: Path | None = None) -> AppSettings:
    env_file = resolve_env_file(custom_path)
    try:
        return AppSettings(_env_file=env_file)
    except ValidationError as exc:
        raise ConfigError(
            f"Failed to load environment variables from {env_file}",
            hints=(
                "Please check that the file exists and is formatted correctly",
                *(f"{'.'.join(map(str, e['loc']))}: {e['msg']}" for e in exc.errors()),
            ),
        ) from exc
