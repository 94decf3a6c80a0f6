"""Componentes de UI para CLI (Rich).

Todo el texto que viene de fuera (mensajes de error, cuerpos HTTP, rutas) se
imprime como `Text` para que Rich no lo interprete como markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.config import APP_NAME
from core.errors import AuthenticationError, CacheClearError

COMMANDS: tuple[tuple[str, str], ...] = (
    ("init", "Initialize configuration"),
    ("clear_cache", "Clear Work Zone cache"),
    ("status", "Show configuration status"),
)


def print_detail(console: Console, label: str, value: object) -> None:
    console.print(Text(f"   {label}: {value}", style="dim"))


def print_failure(console: Console, title: str, message: str) -> None:
    console.print(Text(title, style="bold red"))
    console.print(Text(f"   {message}", style="red"))


def print_http_failure(console: Console, title: str, exc: AuthenticationError | CacheClearError) -> None:
    """Diagnóstico de un fallo HTTP: status, mensaje y cuerpo si lo hubo."""

    console.print(Text(title, style="bold red"))
    if exc.status_code is not None:
        status = f"{exc.status_code} {exc.reason or ''}".rstrip()
        console.print(Text(f"   Status: {status}", style="red"))
    console.print(Text(f"   Message: {exc}", style="red"))

    details = exc.details if isinstance(exc, CacheClearError) else None
    if details:
        console.print(Text(f"   Details: {details}", style="red"))


def print_hint(console: Console, message: str) -> None:
    console.print()
    console.print(Text(f"Hint: {message}", style="yellow"))


def print_available_commands(console: Console) -> None:
    width = max(len(name) for name, _ in COMMANDS)
    console.print(Text("Available commands:", style="cyan"))
    for name, description in COMMANDS:
        console.print(Text(f"  {APP_NAME} {name.ljust(width)} - {description}", style="dim"))
    console.print()
    console.print(Text(f'Use "{APP_NAME} --help" for more information', style="cyan"))
