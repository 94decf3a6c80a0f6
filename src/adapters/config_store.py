"""Persistencia de la configuración en `~/.wztools/config.json`.

Detalles:
- Directorio con permisos 0o700 y fichero con 0o600 (solo el propietario).
- JSON con indentación y claves camelCase, legible para auditoría.
- La escritura va a un temporal en el mismo directorio y se renombra encima
  del fichero final, así un fallo a mitad no deja un `config.json` truncado.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from core.config import CONFIG_FILE_NAME, AppSettings, get_user_config_dir
from core.domain.models import WorkZoneConfig
from core.errors import ConfigNotFoundError, ConfigParseError, FilesystemError

logger = logging.getLogger(__name__)

DIR_MODE = 0o700
FILE_MODE = 0o600


def _describe_validation_error(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(item) for item in error.get("loc", ())) or "config"
        parts.append(f"{loc}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


class ConfigStore:
    """Lee y escribe el único registro de configuración de la instalación."""

    def __init__(self, config_dir: Path | None = None) -> None:
        self._dir = Path(config_dir) if config_dir is not None else get_user_config_dir()
        self._file = self._dir / CONFIG_FILE_NAME

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> ConfigStore:
        settings = settings or AppSettings()
        return cls(settings.config_dir)

    @property
    def directory(self) -> Path:
        return self._dir

    @property
    def path(self) -> Path:
        return self._file

    def exists(self) -> bool:
        return self._file.exists()

    def ensure_directory(self) -> Path:
        try:
            self._dir.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
            os.chmod(self._dir, DIR_MODE)
        except OSError as exc:
            raise FilesystemError(f"Could not prepare config directory {self._dir}: {exc}") from exc
        return self._dir

    def save(self, config: WorkZoneConfig) -> Path:
        """Sobrescribe `config.json` con `config` y devuelve la ruta escrita."""

        self.ensure_directory()
        payload = config.model_dump(mode="json", by_alias=True)
        text = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"

        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=".config-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.chmod(tmp_name, FILE_MODE)
            os.replace(tmp_name, self._file)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise FilesystemError(f"Could not write configuration file {self._file}: {exc}") from exc

        logger.info("Configuration saved to %s", self._file)
        return self._file

    def load(self) -> WorkZoneConfig:
        if not self._file.exists():
            raise ConfigNotFoundError('Configuration file not found. Please run "wztools init" first.')

        try:
            raw = self._file.read_text(encoding="utf-8")
            data = json.loads(raw)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ConfigParseError(f"Failed to load configuration: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigParseError("Failed to load configuration: expected a JSON object")

        try:
            config = WorkZoneConfig.model_validate(data)
        except PydanticValidationError as exc:
            raise ConfigParseError(f"Failed to load configuration: {_describe_validation_error(exc)}") from exc

        logger.debug("Configuration loaded from %s", self._file)
        return config
