"""Invalidación de la caché HTML5 de SAP Build Work Zone.

POST `https://{workzoneHost}/semantic/entity/provider/html5` con el payload
fijo `{providerId, contentAdditionMode, subdomain, subaccountId}` y el bearer
token de XSUAA. Éxito = status en [200, 300); un único intento.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_async_client, describe_body
from core.config import AppSettings
from core.domain.models import CacheClearResult, ClearCacheRequest, WorkZoneConfig
from core.errors import CacheClearError
from core.interfaces.cache import CacheInvalidator

logger = logging.getLogger(__name__)


class WorkZoneCacheInvalidator(CacheInvalidator):
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def clear_cache(self, config: WorkZoneConfig, access_token: str) -> CacheClearResult:
        url = config.cache_url
        payload = ClearCacheRequest.from_config(config).model_dump(by_alias=True)
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Content-Type": "application/json",
        }
        logger.info("Clearing HTML5 provider cache at %s", url)

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise CacheClearError(f"Failed to clear cache: {exc}") from exc

        if 200 <= response.status_code < 300:
            logger.info("Cache clear answered %s %s", response.status_code, response.reason_phrase)
            return CacheClearResult(status_code=response.status_code, reason=response.reason_phrase)

        raise CacheClearError(
            f"Failed to clear cache: Request failed with status code {response.status_code}",
            status_code=response.status_code,
            reason=response.reason_phrase,
            details=describe_body(response),
        )
