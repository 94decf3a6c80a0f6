"""Errores del dominio.

Todos heredan de `WzToolsError` para que la CLI pueda capturarlos en un único
punto y convertirlos en un diagnóstico + código de salida 1.
"""

from __future__ import annotations


class WzToolsError(Exception):
    """Base de todos los errores de wztools."""


class ConfigNotFoundError(WzToolsError):
    """No existe el fichero de configuración (hay que ejecutar `init`)."""


class ConfigParseError(WzToolsError):
    """El fichero existe pero no es JSON válido o no tiene la forma esperada."""


class FilesystemError(WzToolsError):
    """Fallo creando el directorio o escribiendo el fichero de configuración."""


class ValidationError(WzToolsError, ValueError):
    """Un valor de configuración no cumple su regla.

    Hereda de `ValueError` para que los validadores de pydantic lo conviertan
    en un error de validación del modelo.
    """


class AuthenticationError(WzToolsError):
    """El endpoint de token devolvió un status no 2xx o no fue alcanzable."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class CacheClearError(WzToolsError):
    """El endpoint de invalidación devolvió un status no 2xx o no fue alcanzable."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
        details: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.details = details
