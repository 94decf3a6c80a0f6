"""Wrapper de httpx.

Centraliza timeout, User-Agent y cabeceras comunes para las dos llamadas de
la herramienta (XSUAA y Work Zone). El parámetro `transport` permite inyectar
un `httpx.MockTransport` en los tests.
"""

from __future__ import annotations

import json

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults de la CLI."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=headers,
        transport=transport,
    )


def describe_body(response: httpx.Response) -> str | None:
    """Cuerpo de una respuesta para diagnóstico: JSON indentado o texto crudo."""

    if not response.content:
        return None
    try:
        return json.dumps(response.json(), indent=2, ensure_ascii=False)
    except ValueError:
        text = response.text.strip()
        return text or None
