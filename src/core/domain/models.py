"""Modelos del dominio (Pydantic v2).

Qué describen:
- `WorkZoneConfig`: el registro persistido en `config.json` (claves camelCase).
- `TokenResponse`: la respuesta del endpoint OAuth2 de XSUAA.
- `ClearCacheRequest` / `CacheClearResult`: la petición de invalidación y su
  resultado.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr, ValidationInfo, field_serializer, field_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from core.validation import require_non_empty, validate_workzone_host, validate_xsuaa_url

PROVIDER_ID = "saas_approuter"
CONTENT_ADDITION_MODE = "manual"

FIELD_LABELS: dict[str, str] = {
    "client_id": "Client ID",
    "client_secret": "Client Secret",
    "user_id": "User ID",
    "password": "User Password",
    "xsuaa_url": "XSUAA URL",
    "workzone_host": "Work Zone Host",
    "subdomain": "Subdomain",
    "subaccount_id": "Subaccount ID",
}


class WorkZoneConfig(BaseModel):
    """Configuración de una instalación (un único registro por usuario).

    Los secretos son `SecretStr`: no aparecen en `repr()` ni en logs, y solo se
    serializan en claro al volcar a JSON para el fichero de configuración.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    client_id: str = Field(..., description="OAuth client ID.")
    client_secret: SecretStr = Field(..., description="OAuth client secret.")
    user_id: str = Field(..., description="Usuario técnico para el password grant.")
    password: SecretStr = Field(..., description="Password del usuario técnico.")
    xsuaa_url: str = Field(
        ...,
        description="URL de XSUAA (https://<subdomain>.authentication.<region>.hana.ondemand.com).",
    )
    workzone_host: str = Field(
        ...,
        description="Host de Work Zone, sin protocolo.",
    )
    subdomain: str = Field(..., description="Subdominio del subaccount.")
    subaccount_id: str = Field(..., description="ID del subaccount.")

    @field_validator("client_id", "user_id", "subdomain", "subaccount_id")
    @classmethod
    def _check_non_empty(cls, value: str, info: ValidationInfo) -> str:
        return require_non_empty(value, FIELD_LABELS[info.field_name])

    @field_validator("client_secret", "password")
    @classmethod
    def _check_secret(cls, value: SecretStr, info: ValidationInfo) -> SecretStr:
        require_non_empty(value.get_secret_value(), FIELD_LABELS[info.field_name])
        return value

    @field_validator("xsuaa_url")
    @classmethod
    def _check_xsuaa_url(cls, value: str) -> str:
        return validate_xsuaa_url(value)

    @field_validator("workzone_host")
    @classmethod
    def _check_workzone_host(cls, value: str) -> str:
        return validate_workzone_host(value)

    @field_serializer("client_secret", "password", when_used="json")
    def _dump_secret(self, value: SecretStr) -> str:
        return value.get_secret_value()

    @property
    def token_url(self) -> str:
        return f"{self.xsuaa_url.rstrip('/')}/oauth/token"

    @property
    def cache_url(self) -> str:
        return f"https://{self.workzone_host}/semantic/entity/provider/html5"


class TokenResponse(BaseModel):
    """Respuesta del endpoint `/oauth/token`. `expires_in` se recibe pero no se usa."""

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., min_length=1)
    token_type: str | None = None
    expires_in: int | None = None
    scope: str | None = None
    jti: str | None = None


class ClearCacheRequest(BaseModel):
    """Payload de `POST /semantic/entity/provider/html5`."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    provider_id: str = PROVIDER_ID
    content_addition_mode: str = CONTENT_ADDITION_MODE
    subdomain: str
    subaccount_id: str

    @classmethod
    def from_config(cls, config: WorkZoneConfig) -> ClearCacheRequest:
        return cls(subdomain=config.subdomain, subaccount_id=config.subaccount_id)


class CacheClearResult(BaseModel):
    status_code: int
    reason: str = ""
