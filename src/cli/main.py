"""CLI de wztools (Typer + Rich).

Comandos:
- `init`: guarda la configuración (flags o prompts interactivos).
- `clear_cache` / `clear-cache`: token de XSUAA + invalidación de caché.
- `status`: indica si existe `config.json` y dónde.

Cualquier error del dominio se imprime como diagnóstico y termina con
código de salida 1.
"""

from __future__ import annotations

import asyncio
import logging

import typer
from rich.console import Console
from rich.text import Text
from typer.core import TyperGroup

from adapters.config_store import ConfigStore
from adapters.workzone import WorkZoneCacheInvalidator
from adapters.xsuaa import XsuaaAuthenticator
from cli.prompts import all_supplied, collect_init_values, validate_supplied
from cli.ui_components import (
    print_available_commands,
    print_detail,
    print_failure,
    print_hint,
    print_http_failure,
)
from core.config import APP_NAME, APP_VERSION, AppSettings
from core.domain.models import WorkZoneConfig
from core.errors import (
    AuthenticationError,
    CacheClearError,
    ConfigNotFoundError,
    WzToolsError,
)
from core.logging_config import configure_logging
from core.services.cache_refresh import RefreshHooks, run_cache_refresh

logger = logging.getLogger(__name__)

_console = Console(soft_wrap=True)
_err_console = Console(stderr=True, soft_wrap=True)


class WzToolsGroup(TyperGroup):
    """Grupo raíz: un subcomando desconocido sale con código 1 y lista los válidos."""

    def resolve_command(self, ctx: typer.Context, args: list[str]):  # type: ignore[override]
        if args and self.get_command(ctx, args[0]) is None:
            _err_console.print(Text(f"Invalid command: {args[0]}", style="bold red"))
            _err_console.print()
            print_available_commands(_err_console)
            ctx.exit(1)
        return super().resolve_command(ctx, args)


app = typer.Typer(
    name=APP_NAME,
    cls=WzToolsGroup,
    help="CLI tool for managing SAP Work Zone HTML5 content provider cache refresh.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging).",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode (DEBUG level logging).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Manage the SAP Work Zone HTML5 content provider cache."""

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = AppSettings().log_level
    configure_logging(level)


@app.command("init")
def init_command(
    client_id: str | None = typer.Option(None, "--client-id", help="OAuth client ID."),
    client_secret: str | None = typer.Option(None, "--client-secret", help="OAuth client secret."),
    user_id: str | None = typer.Option(None, "--user-id", help="User ID for the password grant."),
    password: str | None = typer.Option(None, "--password", help="User password."),
    xsuaa_url: str | None = typer.Option(None, "--xsuaa-url", help="XSUAA authentication URL (https://...)."),
    workzone_host: str | None = typer.Option(None, "--workzone-host", help="Work Zone host, without protocol."),
    subdomain: str | None = typer.Option(None, "--subdomain", help="SAP subdomain."),
    subaccount_id: str | None = typer.Option(None, "--subaccount-id", help="SAP subaccount ID."),
) -> None:
    """Initialize wztools configuration."""

    supplied = {
        "client_id": client_id,
        "client_secret": client_secret,
        "user_id": user_id,
        "password": password,
        "xsuaa_url": xsuaa_url,
        "workzone_host": workzone_host,
        "subdomain": subdomain,
        "subaccount_id": subaccount_id,
    }
    store = ConfigStore.from_settings()

    _console.print("[bold cyan]Initializing wztools configuration...[/bold cyan]")
    _console.print()

    if all_supplied(supplied):
        errors = validate_supplied(supplied)
        if errors:
            print_failure(_err_console, "Initialization failed:", "; ".join(errors))
            raise typer.Exit(1)
        values = {name: value or "" for name, value in supplied.items()}
        _console.print("[green]Using provided CLI options[/green]")
    else:
        _console.print("[yellow]Please provide the following configuration values:[/yellow]")
        _console.print()
        values = collect_init_values(supplied, _console)

    try:
        path = store.save(WorkZoneConfig(**values))
    except WzToolsError as exc:
        print_failure(_err_console, "Failed to save configuration:", str(exc))
        raise typer.Exit(1)

    _console.print()
    _console.print("[green]Configuration saved successfully![/green]")
    print_detail(_console, "Config file", path)
    _console.print()
    _console.print(f"[cyan]You can now run: {APP_NAME} clear_cache[/cyan]")


@app.command("clear_cache")
def clear_cache_command() -> None:
    """Clear Work Zone HTML5 content provider cache (alias: clear-cache)."""

    settings = AppSettings()
    store = ConfigStore.from_settings(settings)

    _console.print("[bold cyan]Starting Work Zone cache clear process...[/bold cyan]")
    _console.print()

    logger.debug("Loading configuration from %s", store.path)
    try:
        config = store.load()
    except ConfigNotFoundError as exc:
        print_failure(_err_console, "Error:", str(exc))
        print_hint(_err_console, f'Run "{APP_NAME} init" first to set up your configuration')
        raise typer.Exit(1)
    except WzToolsError as exc:
        print_failure(_err_console, "Error:", str(exc))
        raise typer.Exit(1)

    _console.print("[green]Configuration loaded successfully[/green]")
    print_detail(_console, "Subdomain", config.subdomain)
    print_detail(_console, "Subaccount ID", config.subaccount_id)
    _console.print()

    hooks = RefreshHooks(
        token_requested=lambda: _console.print("[cyan]Getting access token...[/cyan]"),
        token_obtained=lambda: _console.print("[green]Access token obtained successfully[/green]"),
        cache_clear_started=lambda: _console.print("[cyan]Clearing Work Zone cache...[/cyan]"),
    )

    try:
        result = asyncio.run(
            run_cache_refresh(
                config,
                authenticator=XsuaaAuthenticator(settings),
                invalidator=WorkZoneCacheInvalidator(settings),
                hooks=hooks,
            )
        )
    except AuthenticationError as exc:
        print_http_failure(_err_console, "Authentication failed:", exc)
        raise typer.Exit(1)
    except CacheClearError as exc:
        print_http_failure(_err_console, "Failed to clear cache:", exc)
        raise typer.Exit(1)

    _console.print("[bold green]Work Zone cache cleared successfully![/bold green]")
    print_detail(_console, "Response", f"{result.status_code} {result.reason}".rstrip())


app.command("clear-cache", hidden=True)(clear_cache_command)


@app.command("status")
def status_command() -> None:
    """Show current configuration status."""

    store = ConfigStore.from_settings()

    _console.print(f"[bold cyan]{APP_NAME} Status[/bold cyan]")
    _console.print()

    if store.exists():
        _console.print("[green]Configuration file exists[/green]")
        print_detail(_console, "Location", store.path)
        _console.print()
        _console.print(f"[cyan]Ready to use: {APP_NAME} clear_cache[/cyan]")
    else:
        _console.print("[yellow]Configuration file not found[/yellow]")
        print_detail(_console, "Expected location", store.path)
        _console.print()
        _console.print(f"[cyan]Run: {APP_NAME} init[/cyan]")


def run() -> None:
    app(prog_name=APP_NAME)


if __name__ == "__main__":
    run()
