"""
Rich console rendering of a probe result
"""

import time
import logging
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config_types import ProbeConfig
from core.exceptions import BedrockPingError
from core.protocol import Status
from core.session import fetch

logger = logging.getLogger(__name__)

class ConsoleUI:
    """Rich console interface with a spinner while the probe runs"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _build_table(self, status: Status, latency_ms: float) -> Table:
        """Build the status table"""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Field", style="bold cyan")
        table.add_column("Value")

        table.add_row("MOTD", Text(status.description))
        table.add_row("Version", Text(f"{status.protocol_version} (protocol {status.protocol_id})"))
        table.add_row("Players", f"{status.players_online}/{status.players_max}")
        table.add_row("Latency", f"{latency_ms:.1f} ms")
        return table

    def show_status(self, address: str, status: Status, latency_ms: float) -> None:
        self.console.print(Panel(
            self._build_table(status, latency_ms),
            title=Text(f"✅ {address}", style="bold green"),
            border_style="green",
            expand=False
        ))

    def show_error(self, address: str, error: BedrockPingError) -> None:
        self.console.print(Panel(
            Text(str(error)),
            title=Text(f"❌ {address}: {type(error).__name__}", style="bold red"),
            border_style="red",
            expand=False
        ))

    async def run(self, address: str, config: ProbeConfig) -> bool:
        """Probe a server and display the result"""
        start = time.perf_counter()
        try:
            with self.console.status(f"Pinging {address}...", spinner="dots"):
                status = await fetch(address, config)
        except BedrockPingError as e:
            logger.debug(f"Probe of {address} failed: {e}")
            self.show_error(address, e)
            return False

        self.show_status(address, status, (time.perf_counter() - start) * 1000)
        return True
