"""``pslog ports`` — list serial ports and flag the configured one."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from pslog.config import LogSettings
from pslog.routing.sinks.serial_port import SerialPortSink

console = Console()


def ports_cmd() -> None:
    """List serial ports present on this host."""
    configured = LogSettings().serial_port
    ports = SerialPortSink.list_ports()

    if not ports:
        console.print("[dim]No serial ports found.[/dim]")
        return

    table = Table(title="Serial Ports")
    table.add_column("Device", style="cyan")
    table.add_column("Configured", justify="center")
    for device in ports:
        flag = "[green]Yes[/green]" if device == configured else ""
        table.add_row(device, flag)
    console.print(table)
