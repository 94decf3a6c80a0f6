"""Prompts interactivos de `wztools init`.

Cada campo de la configuración tiene su mensaje, su regla de validación y si
es secreto. Los secretos se leen con `hide_input=True` y nunca se muestran
como valor por defecto. Un valor inválido imprime la regla y se vuelve a
preguntar el mismo campo.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial

import typer
from rich.console import Console
from rich.text import Text

from core.domain.models import FIELD_LABELS
from core.errors import ValidationError
from core.validation import require_non_empty, validate_workzone_host, validate_xsuaa_url


@dataclass(frozen=True)
class PromptField:
    name: str
    message: str
    validator: Callable[[str], str]
    secret: bool = False


def _required(name: str) -> Callable[[str], str]:
    return partial(require_non_empty, label=FIELD_LABELS[name])


INIT_FIELDS: tuple[PromptField, ...] = (
    PromptField("client_id", "Client ID", _required("client_id")),
    PromptField("client_secret", "Client Secret", _required("client_secret"), secret=True),
    PromptField("user_id", "User ID", _required("user_id")),
    PromptField("password", "User Password", _required("password"), secret=True),
    PromptField(
        "xsuaa_url",
        "XSUAA URL (e.g., https://<subdomain>.authentication.<region>.hana.ondemand.com)",
        validate_xsuaa_url,
    ),
    PromptField(
        "workzone_host",
        "Work Zone Host (e.g., <subdomain>.dt.launchpad.cfapps.<region>.hana.ondemand.com)",
        validate_workzone_host,
    ),
    PromptField("subdomain", "Subdomain", _required("subdomain")),
    PromptField("subaccount_id", "Subaccount ID", _required("subaccount_id")),
)


def all_supplied(supplied: Mapping[str, str | None]) -> bool:
    return all(supplied.get(field.name) for field in INIT_FIELDS)


def validate_supplied(supplied: Mapping[str, str | None]) -> list[str]:
    """Errores de validación de los valores pasados por flags (vacío si todo ok)."""

    errors: list[str] = []
    for field in INIT_FIELDS:
        try:
            field.validator(supplied.get(field.name) or "")
        except ValidationError as exc:
            errors.append(str(exc))
    return errors


def ask_field(field: PromptField, console: Console) -> str:
    while True:
        value = typer.prompt(field.message, hide_input=field.secret)
        if not field.secret:
            value = value.strip()
        try:
            return field.validator(value)
        except ValidationError as exc:
            console.print(Text(f">> {exc}", style="red"))


def collect_init_values(supplied: Mapping[str, str | None], console: Console) -> dict[str, str]:
    """Completa los campos que faltan (o son inválidos) preguntando al usuario."""

    values: dict[str, str] = {}
    for field in INIT_FIELDS:
        given = supplied.get(field.name)
        if given:
            try:
                values[field.name] = field.validator(given)
                continue
            except ValidationError as exc:
                console.print(Text(f">> --{field.name.replace('_', '-')}: {exc}", style="yellow"))
        values[field.name] = ask_field(field, console)
    return values
