"""Contratos de autenticación e invalidación de caché.

Son Protocols estructurales: cualquier objeto con los métodos adecuados sirve,
lo que permite pasar fakes en los tests del pipeline.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import CacheClearResult, WorkZoneConfig


@runtime_checkable
class TokenProvider(Protocol):
    """Obtiene un bearer token a partir de la configuración guardada."""

    async def get_access_token(self, config: WorkZoneConfig) -> str:
        ...


@runtime_checkable
class CacheInvalidator(Protocol):
    """Dispara la invalidación de la caché de contenido HTML5."""

    async def clear_cache(self, config: WorkZoneConfig, access_token: str) -> CacheClearResult:
        """Un único intento; lanza `CacheClearError` fuera de [200, 300)."""

        ...
