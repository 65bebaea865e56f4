"""
Command-line interface for headless operation
"""

import json
import sys
import time
import logging
from dataclasses import asdict
from typing import Dict, Any, TextIO, Optional

from core.config_types import ProbeConfig
from core.exceptions import BedrockPingError
from core.protocol import Status
from core.session import fetch

logger = logging.getLogger(__name__)

class CLIInterface:
    """Plain text or JSON output for scripts and pipes"""

    def __init__(self, output_format: str = "text", stream: Optional[TextIO] = None):
        self.output_format = output_format
        self.stream = stream or sys.stdout

    def _write(self, line: str) -> None:
        print(line, file=self.stream, flush=True)

    @staticmethod
    def status_record(address: str, status: Status, latency_ms: float) -> Dict[str, Any]:
        """Flatten a status into a JSON-friendly record"""
        record: Dict[str, Any] = {'address': address, 'online': True}
        record.update(asdict(status))
        record['latency_ms'] = round(latency_ms, 1)
        return record

    def show_status(self, address: str, status: Status, latency_ms: float) -> None:
        if self.output_format == "json":
            self._write(json.dumps(self.status_record(address, status, latency_ms), ensure_ascii=False))
            return

        self._write(f"Server: {address}")
        self._write(f"  MOTD: {status.description}")
        self._write(f"  Version: {status.protocol_version} (protocol {status.protocol_id})")
        self._write(f"  Players: {status.players_online}/{status.players_max}")
        self._write(f"  Latency: {latency_ms:.1f} ms")

    def show_error(self, address: str, error: BedrockPingError) -> None:
        if self.output_format == "json":
            self._write(json.dumps({
                'address': address,
                'online': False,
                'error': type(error).__name__,
                'message': str(error)
            }, ensure_ascii=False))
            return

        self._write(f"❌ {address}: {type(error).__name__}: {error}")

    async def run(self, address: str, config: ProbeConfig) -> bool:
        """Probe a server and print the result"""
        start = time.perf_counter()
        try:
            status = await fetch(address, config)
        except BedrockPingError as e:
            logger.debug(f"Probe of {address} failed: {e}")
            self.show_error(address, e)
            return False

        self.show_status(address, status, (time.perf_counter() - start) * 1000)
        return True
