"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from risport70.adapters.http_client import build_async_client, service_url
from risport70.cli.ui_components import build_settings_table
from risport70.core.config import RisPortSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_https(settings: RisPortSettings) -> tuple[bool, str]:
    """Reachability only: any HTTP answer (even 405/500) counts as OK."""

    url = service_url(settings.host, settings.port)
    try:
        async with build_async_client(timeout_ms=settings.timeout_ms, verify=settings.verify_tls) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, f"{type(exc).__name__}: {exc}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Show the resolved configuration and check the service is reachable."""

    settings: RisPortSettings = ctx.obj.settings if ctx.obj else RisPortSettings()

    _console.print(build_settings_table(settings, title="RISPort70 Doctor"))

    table = Table(title="Checks")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Host", "OK" if settings.host else "FAIL", settings.host or "Set --host or RISPORT70_HOST")
    has_credentials = bool(settings.user and settings.password)
    table.add_row(
        "Credentials",
        "OK" if has_credentials else "FAIL",
        "user/password set" if has_credentials else "Run `risport70 doctor setup`",
    )
    if not settings.verify_tls:
        table.add_row("TLS verification", "WARN", "Disabled (self-signed certificates accepted)")

    ok_http = False
    if settings.host:
        ok_http, detail_http = asyncio.run(_check_https(settings))
        table.add_row("HTTPS connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not (settings.host and has_credentials and ok_http):
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive setup (stores connection settings in the user config .env)."""

    host = typer.prompt("CUCM host").strip()
    user = typer.prompt("API user").strip()
    password = typer.prompt("API password", hide_input=True, confirmation_prompt=False).strip()
    verify = typer.confirm("Verify the TLS certificate?", default=True)

    if not host or not user:
        raise typer.BadParameter("host and user are required")

    env_path = write_user_env_vars(
        {
            "RISPORT70_HOST": host,
            "RISPORT70_USER": user,
            "RISPORT70_PASSWORD": password,
            "RISPORT70_VERIFY_TLS": "true" if verify else "false",
        }
    )

    _console.print(f"[green]Saved connection settings to:[/green] {env_path}")
