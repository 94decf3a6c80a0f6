"""Configuración del Core.

Qué vive aquí:
- Ajustes de ejecución (timeout HTTP, User-Agent, nivel de log, directorio de
  configuración) leídos con pydantic-settings.
- Las credenciales de Work Zone NO se leen del entorno: viven en el
  `config.json` que gestiona `adapters.config_store`.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "wztools"
APP_VERSION = "1.0.0"
CONFIG_FILE_NAME = "config.json"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (`~/.wztools`)."""

    return Path.home() / f".{APP_NAME}"


class AppSettings(BaseSettings):
    """Ajustes de ejecución de la CLI.

    Se pueden sobreescribir con variables `WZTOOLS_*` (p.ej. en tests o CI).
    """

    model_config = SettingsConfigDict(
        env_prefix="WZTOOLS_",
        extra="ignore",
        case_sensitive=False,
    )

    config_dir: Path = Field(
        default_factory=get_user_config_dir,
        description="Directorio donde se guarda `config.json`.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default=f"{APP_NAME}/{APP_VERSION}",
        min_length=1,
        description="User-Agent para las llamadas a XSUAA y Work Zone.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging cuando no se pasa --verbose/--debug.",
    )

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME
