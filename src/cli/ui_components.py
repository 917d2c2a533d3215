"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.errors import ArweaveError, InvalidRequest, ProtocolError, TransportError
from core.domain.models import TransactionData, TransactionStatusResponse

_PREVIEW_BYTES = 64


def build_transaction_table(tx: TransactionData) -> Table:
    """Tabla Rich con los campos de una transacción (tags en orden)."""

    table = Table(title=f"Transaction {tx.id}", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white", overflow="fold")

    table.add_row("format", str(tx.format))
    table.add_row("last_tx", tx.last_tx)
    table.add_row("owner", tx.owner)
    table.add_row("target", tx.target or "-")
    table.add_row("quantity", tx.quantity)
    table.add_row("reward", tx.reward)
    table.add_row("data_size", tx.data_size)
    table.add_row("data_root", tx.data_root or "-")
    preview = tx.data[:_PREVIEW_BYTES].hex()
    if len(tx.data) > _PREVIEW_BYTES:
        preview += "..."
    table.add_row("data", f"{len(tx.data)} bytes {preview}".rstrip())
    table.add_row("signature", tx.signature)
    for tag in tx.tags:
        table.add_row(Text(f"tag:{tag.name}", style="magenta"), tag.value)
    return table


def build_status_panel(tx_id: str, status: TransactionStatusResponse) -> Panel:
    """Panel para el estado de confirmación."""

    body = Text()
    body.append(f"Status: {status.status}\n")
    if status.confirmed is None:
        body.append("Not confirmed yet", style="yellow")
        border = "yellow"
    else:
        confirmed = status.confirmed
        body.append(f"Block height: {confirmed.block_height}\n")
        body.append(f"Block hash: {confirmed.block_indep_hash}\n")
        body.append(f"Confirmations: {confirmed.number_of_confirmations}", style="green")
        border = "green"
    return Panel(body, title=Text(tx_id, style="bold"), border_style=border)


def format_error(exc: ArweaveError) -> str:
    """Mensaje corto (markup Rich) para un error del dominio."""

    if isinstance(exc, ProtocolError):
        return f"[red]Gateway error:[/red] {escape(str(exc.payload))}"
    if isinstance(exc, InvalidRequest):
        return f"[red]Invalid argument:[/red] {escape(str(exc))}"
    if isinstance(exc, TransportError):
        return f"[red]Request failed:[/red] {escape(exc.message)}"
    return f"[red]Unexpected response:[/red] {escape(str(exc))}"
