"""Reglas por campo para la configuración.

Las usan tanto el modelo `WorkZoneConfig` como los prompts interactivos de
`init`, así el mensaje que ve el usuario es el mismo en ambos caminos.
"""

from __future__ import annotations

from core.errors import ValidationError

_PROTOCOL_PREFIXES = ("https://", "http://")


def require_non_empty(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")
    return value


def validate_xsuaa_url(value: str) -> str:
    require_non_empty(value, "XSUAA URL")
    if not value.startswith("https://"):
        raise ValidationError("XSUAA URL must start with https://")
    return value


def validate_workzone_host(value: str) -> str:
    require_non_empty(value, "Work Zone Host")
    if value.startswith(_PROTOCOL_PREFIXES):
        raise ValidationError(
            "Please provide only the hostname without protocol "
            "(e.g., <subdomain>.dt.launchpad.cfapps.<region>.hana.ondemand.com)"
        )
    return value
