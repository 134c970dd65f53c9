"""`risport70` command line.

Demo/ops surface over the library: every command builds a `RisPort70` from
`RisPortSettings` (env, `.env`, then the options below) and prints the
response Body as JSON.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

import typer
from rich.console import Console
from rich.logging import RichHandler

from risport70.adapters.risport_client import RisPort70
from risport70.cli import doctor
from risport70.cli.ui_components import print_banner, print_result
from risport70.core.config import RisPortSettings
from risport70.core.domain.enums import (
    CtiItemStatus,
    CtiMgrClass,
    DeviceClass,
    DownloadStatus,
    Model,
    Protocol,
    SelectAppBy,
    SelectBy,
    Status,
    StripMode,
)
from risport70.core.domain.models import (
    DEFAULT_MAX_RETURNED_DEVICES,
    DEFAULT_MAX_RETURNED_ITEMS,
    CmSelectionCriteria,
    CtiSelectionCriteria,
)
from risport70.core.errors import RisPortError, SoapFaultError
from risport70.core.interfaces.service import RealtimeService

app = typer.Typer(no_args_is_help=True, help="Query CUCM device registration state over RISPort70.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@dataclass
class CliState:
    settings: RisPortSettings
    raw: bool = False


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )
    # httpcore logs every connection event at DEBUG.
    logging.getLogger("httpcore").setLevel(logging.INFO)


def build_client(settings: RisPortSettings) -> RisPort70:
    return RisPort70.from_settings(settings)


def _execute(ctx: typer.Context, call: Callable[[RealtimeService], Awaitable[Any]]) -> None:
    state: CliState = ctx.obj
    if not state.settings.host:
        raise typer.BadParameter("a host is required (--host or RISPORT70_HOST)", param_hint="--host")

    async def _go() -> Any:
        async with build_client(state.settings) as service:
            return await call(service)

    try:
        result = asyncio.run(_go())
    except SoapFaultError as exc:
        _err_console.print(f"[red]SOAP fault:[/red] {exc.faultstring} [dim]({exc.faultcode})[/dim]")
        raise typer.Exit(code=1)
    except RisPortError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1)

    print_result(_console, result, raw=state.raw)


@app.callback()
def main(
    ctx: typer.Context,
    host: str | None = typer.Option(None, "--host", "-H", help="CUCM host (env: RISPORT70_HOST / CUCM)."),
    user: str | None = typer.Option(None, "--user", "-u", help="API user (env: RISPORT70_USER / UCUSER)."),
    password: str | None = typer.Option(
        None, "--password", "-p", help="API password (env: RISPORT70_PASSWORD / UCPASS)."
    ),
    timeout: int | None = typer.Option(None, "--timeout", "-t", min=1, help="Per-request timeout (ms)."),
    insecure: bool = typer.Option(False, "--insecure", "-k", help="Skip TLS certificate verification."),
    prefix: str | None = typer.Option(None, "--prefix", help="Namespace prefix to strip (default ns1:)."),
    structural: bool = typer.Option(False, "--structural", help="Strip the prefix from element names only."),
    raw: bool = typer.Option(False, "--raw", help="Plain JSON output (no colors, no banner)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests at DEBUG level."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    configure_logging(verbose)

    overrides: dict[str, Any] = {
        "host": host,
        "user": user,
        "password": password,
        "timeout_ms": timeout,
        "namespace_prefix": prefix,
    }
    if insecure:
        overrides["verify_tls"] = False
    if structural:
        overrides["strip_mode"] = StripMode.STRUCTURAL
    settings = RisPortSettings(**{k: v for k, v in overrides.items() if v is not None})

    ctx.obj = CliState(settings=settings, raw=raw)
    if not (raw or no_banner or ctx.resilient_parsing):
        print_banner(_err_console)


@app.command()
def phone(
    ctx: typer.Context,
    names: list[str] = typer.Argument(..., help="Device names, e.g. SEPEC1D8B2B6DEC."),
) -> None:
    """Look up one or more phones by device name (selectCmDeviceExt)."""

    async def call(service: RealtimeService) -> Any:
        if len(names) == 1:
            return await service.get_phone_by_name(names[0])
        return await service.get_phones_by_name(names)

    _execute(ctx, call)


@app.command()
def devices(
    ctx: typer.Context,
    items: list[str] | None = typer.Argument(None, help="Values matched against --select-by."),
    ext: bool = typer.Option(False, "--ext", help="Use selectCmDeviceExt (per-line detail)."),
    max_returned: int = typer.Option(DEFAULT_MAX_RETURNED_DEVICES, "--max", min=1),
    device_class: DeviceClass = typer.Option(DeviceClass.ANY, "--class"),
    model: str = typer.Option(Model.ALL.value, "--model", help="Model code; 255 matches all."),
    status: Status = typer.Option(Status.ANY, "--status"),
    node_name: str = typer.Option("", "--node", help="Restrict to one cluster node."),
    select_by: SelectBy = typer.Option(SelectBy.NAME, "--select-by"),
    protocol: Protocol = typer.Option(Protocol.ANY, "--protocol"),
    download_status: DownloadStatus = typer.Option(DownloadStatus.ANY, "--download-status"),
) -> None:
    """Select CM devices (selectCmDevice, or selectCmDeviceExt with --ext)."""

    criteria = CmSelectionCriteria(
        max_returned_devices=max_returned,
        device_class=device_class,
        model=model,
        status=status,
        node_name=node_name,
        select_by=select_by,
        items=items or [],
        protocol=protocol,
        download_status=download_status,
    )

    async def call(service: RealtimeService) -> Any:
        if ext:
            return await service.select_cm_device_ext(criteria)
        return await service.select_cm_device(criteria)

    _execute(ctx, call)


@app.command()
def cti(
    ctx: typer.Context,
    max_returned: int = typer.Option(DEFAULT_MAX_RETURNED_ITEMS, "--max", min=1),
    cti_mgr_class: CtiMgrClass = typer.Option(CtiMgrClass.PROVIDER, "--class"),
    status: CtiItemStatus = typer.Option(CtiItemStatus.ANY, "--status"),
    node_name: str = typer.Option("", "--node"),
    select_app_by: SelectAppBy = typer.Option(SelectAppBy.APP_ID, "--select-app-by"),
    app_items: list[str] = typer.Option([], "--app-item", help="Repeatable."),
    dev_names: list[str] = typer.Option([], "--device", help="Repeatable."),
    dir_numbers: list[str] = typer.Option([], "--dn", help="Repeatable."),
) -> None:
    """Select CTI manager items (selectCtiItem)."""

    criteria = CtiSelectionCriteria(
        max_returned_items=max_returned,
        cti_mgr_class=cti_mgr_class,
        status=status,
        node_name=node_name,
        select_app_by=select_app_by,
        app_items=app_items,
        dev_names=dev_names,
        dir_numbers=dir_numbers,
    )

    async def call(service: RealtimeService) -> Any:
        return await service.select_cti_item(criteria)

    _execute(ctx, call)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
