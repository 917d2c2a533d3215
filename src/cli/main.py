"""CLI principal (Typer).

Comandos:
- `price BYTE_SIZE`  -> fee estimado.
- `tx ID`            -> transacción completa.
- `status ID`        -> estado de confirmación.
- `doctor ...`       -> diagnósticos y configuración.

Los errores del dominio se muestran como mensaje y código de salida 1; nunca
como traceback.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Coroutine, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.transaction_info import TransactionInfoClient
from cli import doctor
from cli.ui_components import build_status_panel, build_transaction_table, format_error
from core.config import AppSettings
from core.domain.errors import ArweaveError

app = typer.Typer(no_args_is_help=True, help="Read-only client for Arweave gateway transaction endpoints.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _run(coro: Coroutine[Any, Any, Any]) -> Any:
    try:
        return asyncio.run(coro)
    except ArweaveError as exc:
        _err_console.print(format_error(exc))
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    ctx: typer.Context,
    gateway: Optional[str] = typer.Option(None, "--gateway", "-g", help="Gateway base URL (overrides config)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request."),
) -> None:
    """Read-only client for Arweave gateway transaction endpoints."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = TransactionInfoClient(gateway or settings.gateway_url, settings=settings)


@app.command()
def price(ctx: typer.Context, byte_size: str = typer.Argument(..., help="Data size in bytes.")) -> None:
    """Estimated fee (winston) to store BYTE_SIZE bytes."""

    client: TransactionInfoClient = ctx.obj
    typer.echo(_run(client.get_price(byte_size)))


@app.command()
def tx(
    ctx: typer.Context,
    tx_id: str = typer.Argument(..., metavar="ID", help="Transaction id."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON encoding."),
) -> None:
    """Fetch a transaction."""

    client: TransactionInfoClient = ctx.obj
    transaction = _run(client.get(tx_id))
    if as_json:
        typer.echo(transaction.model_dump_json(indent=2))
        return
    _console.print(build_transaction_table(transaction))


@app.command()
def status(
    ctx: typer.Context,
    tx_id: str = typer.Argument(..., metavar="ID", help="Transaction id."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON encoding."),
) -> None:
    """Fetch the confirmation status of a transaction."""

    client: TransactionInfoClient = ctx.obj
    result = _run(client.get_status(tx_id))
    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return
    _console.print(build_status_panel(tx_id, result))


def run() -> None:
    app()
