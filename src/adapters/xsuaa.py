"""Autenticación contra XSUAA (OAuth2 password grant).

Flujo:
- POST `{xsuaaUrl}/oauth/token` con cuerpo `application/x-www-form-urlencoded`.
- 2xx: se devuelve `access_token` del JSON.
- Cualquier otro caso: `AuthenticationError` con status/reason si los hay.

Sin reintentos ni caché de tokens: un token por invocación.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError as PydanticValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import TokenResponse, WorkZoneConfig
from core.errors import AuthenticationError
from core.interfaces.cache import TokenProvider

logger = logging.getLogger(__name__)


class XsuaaAuthenticator(TokenProvider):
    """Intercambia las credenciales guardadas por un bearer token."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def get_access_token(self, config: WorkZoneConfig) -> str:
        form = {
            "grant_type": "password",
            "client_id": config.client_id,
            "client_secret": config.client_secret.get_secret_value(),
            "username": config.user_id,
            "password": config.password.get_secret_value(),
        }
        url = config.token_url
        logger.info("Requesting access token from %s", url)

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.post(url, data=form)
        except httpx.HTTPError as exc:
            raise AuthenticationError(f"Failed to get access token: {exc}") from exc

        if not response.is_success:
            logger.info("Token endpoint answered %s %s", response.status_code, response.reason_phrase)
            raise AuthenticationError(
                f"Failed to get access token: {response.status_code} {response.reason_phrase}".rstrip(),
                status_code=response.status_code,
                reason=response.reason_phrase,
            )

        try:
            token = TokenResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError) as exc:
            raise AuthenticationError(
                f"Failed to get access token: response {response.status_code} did not contain an access_token",
                status_code=response.status_code,
                reason=response.reason_phrase,
            ) from exc

        logger.debug("Access token obtained (expires_in=%s)", token.expires_in)
        return token.access_token
