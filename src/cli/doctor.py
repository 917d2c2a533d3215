"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, save_user_settings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_gateway(base_url: str, settings: AppSettings) -> tuple[bool, str]:
    """Probe `GET /info` on the gateway and summarize the answer."""

    url = f"{base_url.rstrip('/')}/info"
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
    except httpx.HTTPError as exc:
        return False, f"{type(exc).__name__}: {exc}"

    if not response.is_success:
        return False, f"HTTP {response.status_code}"
    try:
        info = response.json()
    except ValueError:
        return True, f"HTTP {response.status_code} (non-JSON /info)"
    if isinstance(info, dict) and "height" in info:
        return True, f"{info.get('network', 'unknown network')} @ height {info['height']}"
    return True, f"HTTP {response.status_code}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Show configuration and probe gateway connectivity."""

    settings = AppSettings()
    gateway = ctx.obj.base_url if ctx.obj is not None else settings.gateway_url

    table = Table(title="arweave-txinfo Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Gateway", "OK", gateway)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Log level", "OK", settings.log_level.upper())

    ok, detail = asyncio.run(_check_gateway(gateway, settings))
    table.add_row("Gateway connectivity", "OK" if ok else "FAIL", detail)

    _console.print(table)
    if not ok:
        raise typer.Exit(code=1)


@app.command(name="set-gateway")
def set_gateway(url: str = typer.Argument(..., help="Gateway base URL, e.g. https://arweave.net")) -> None:
    """Persist the gateway URL in the user config .env."""

    url = url.strip()
    if not url.startswith(("http://", "https://")):
        raise typer.BadParameter("gateway URL must start with http:// or https://")

    env_path = save_user_settings(gateway_url=url.rstrip("/"))
    _console.print(f"[green]Saved gateway to:[/green] {env_path}")
