"""
Network utilities and helpers
"""

from typing import Tuple

class NetworkUtils:
    """Network utility functions"""

    @staticmethod
    def is_valid_port(port: int) -> bool:
        """Check if port number is valid"""
        return 1 <= port <= 65535

    @staticmethod
    def parse_port(value: str) -> int:
        """Parse a decimal port number"""
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"Invalid port: {value!r}")
        port = int(value)
        if not NetworkUtils.is_valid_port(port):
            raise ValueError(f"Port out of range: {port}")
        return port

    @staticmethod
    def split_address(address: str, default_port: int) -> Tuple[str, int]:
        """Split 'host:port', '[v6]:port', 'host' or a bare IPv6 literal"""
        address = address.strip()

        if address.startswith('['):
            host, sep, rest = address[1:].partition(']')
            if not sep:
                raise ValueError(f"Unterminated IPv6 literal: {address!r}")
            if not rest:
                port = default_port
            elif rest.startswith(':'):
                port = NetworkUtils.parse_port(rest[1:])
            else:
                raise ValueError(f"Unexpected text after IPv6 literal: {address!r}")
        elif address.count(':') > 1:
            # Bare IPv6 literal, no port
            host, port = address, default_port
        elif ':' in address:
            host, _, port_text = address.rpartition(':')
            port = NetworkUtils.parse_port(port_text)
        else:
            host, port = address, default_port

        if not host:
            raise ValueError(f"Missing host in address: {address!r}")
        return host, port
