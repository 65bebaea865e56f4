"""
Single-exchange status probe over RakNet unconnected ping/pong
"""

import asyncio
import contextlib
import logging
from typing import Optional

from .config_types import ProbeConfig
from .exceptions import ConnectError, ProbeTimeoutError, ProtocolError
from .protocol import RakNetCodec, Status, UNCONNECTED_PONG, PONG_HEADER_SIZE
from utils.network import NetworkUtils

logger = logging.getLogger(__name__)

class _PongListener(asyncio.DatagramProtocol):
    """Resolves a future with the first datagram received.

    Replies are not checked against the dialed address or the sent nonce,
    so any pong that arrives in time is accepted.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self.response: asyncio.Future = loop.create_future()

    def datagram_received(self, data: bytes, addr) -> None:
        if self.response.done():
            return
        logger.debug(f"Received {len(data)} bytes from {addr}")
        self.response.set_result(data)

    def error_received(self, exc: Exception) -> None:
        if not self.response.done():
            self.response.set_exception(ConnectError(f"Socket error while waiting for pong: {exc}"))

    def connection_lost(self, exc: Optional[Exception]) -> None:
        if not self.response.done():
            self.response.set_exception(ConnectError(f"Socket closed before a pong arrived: {exc}"))

class ProbeSession:
    """Sends unconnected pings to one server and waits for a single pong"""

    def __init__(self, config: Optional[ProbeConfig] = None, codec: Optional[RakNetCodec] = None):
        self.config = config or ProbeConfig()
        self.codec = codec or RakNetCodec()
        self.config.validate()

    async def probe(self, host: str, port: int) -> Status:
        """Probe a server, resending the ping until a reply or the deadline"""
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.config.timeout

        transport = await self._open(loop, host, port, deadline)
        try:
            data = await self._exchange(loop, transport, deadline, host, port)
        finally:
            transport.close()

        if not data or data[0] != UNCONNECTED_PONG or len(data) <= PONG_HEADER_SIZE:
            logger.debug(f"Rejected {len(data)} byte reply from {host}:{port}")
            raise ProtocolError("invalid ping response")

        return self.codec.decode_pong(data)

    async def _open(self, loop, host: str, port: int, deadline: float):
        try:
            transport, _ = await asyncio.wait_for(
                loop.create_datagram_endpoint(
                    lambda: _PongListener(loop),
                    remote_addr=(host, port)
                ),
                timeout=max(deadline - loop.time(), 0)
            )
        except asyncio.TimeoutError:
            raise ProbeTimeoutError(f"Timed out connecting to {host}:{port}") from None
        except OSError as e:
            raise ConnectError(f"Could not connect to {host}:{port}: {e}") from e
        return transport

    async def _exchange(self, loop, transport, deadline: float, host: str, port: int) -> bytes:
        listener: _PongListener = transport.get_protocol()
        pings_sent = 0

        def send_ping() -> None:
            nonlocal pings_sent
            transport.sendto(self.codec.encode_ping())
            pings_sent += 1
            logger.debug(f"Sent unconnected ping #{pings_sent} to {host}:{port}")

        async def resend_loop() -> None:
            while True:
                await asyncio.sleep(self.config.resend_interval)
                send_ping()

        send_ping()
        resender = asyncio.create_task(resend_loop())
        try:
            return await asyncio.wait_for(
                listener.response,
                timeout=max(deadline - loop.time(), 0)
            )
        except asyncio.TimeoutError:
            raise ProbeTimeoutError(
                f"No response from {host}:{port} within {self.config.timeout}s "
                f"({pings_sent} pings sent)"
            ) from None
        finally:
            resender.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await resender

async def fetch(address: str, config: Optional[ProbeConfig] = None) -> Status:
    """Fetch the status of the Bedrock server at 'host[:port]'"""
    session = ProbeSession(config)
    try:
        host, port = NetworkUtils.split_address(address, session.config.default_port)
    except ValueError as e:
        raise ConnectError(str(e)) from e

    return await session.probe(host, port)
