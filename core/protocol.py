"""
RakNet unconnected ping/pong codec for Minecraft: Bedrock Edition servers
"""

import itertools
import random
import re
import struct
import time
from dataclasses import dataclass

from .exceptions import ParseError

# 16-byte offline message ID shared by every RakNet unconnected message
RAKNET_MAGIC = bytes([
    0x00, 0xff, 0xff, 0x00, 0xfe, 0xfe, 0xfe, 0xfe,
    0xfd, 0xfd, 0xfd, 0xfd, 0x12, 0x34, 0x56, 0x78,
])

UNCONNECTED_PING = 0x01
UNCONNECTED_PONG = 0x1c

# id + client time + client guid + magic
PING_SIZE = 1 + 8 + len(RAKNET_MAGIC) + 8

# id + echoed time + server guid + magic + string length
PONG_HEADER_SIZE = 1 + 8 + 8 + len(RAKNET_MAGIC) + 2

_INTEGER = re.compile(r'[+-]?[0-9]+')

@dataclass(frozen=True)
class Status:
    """Basic status of a Bedrock server, as reported by the server"""
    description: str
    protocol_version: str
    protocol_id: int
    players_online: int
    players_max: int

class RakNetCodec:
    """Builds unconnected pings and decodes unconnected pong payloads"""

    # Pong payload field positions: edition;motd;protocol;version;online;max;...
    FIELD_DESCRIPTION = 1
    FIELD_PROTOCOL_ID = 2
    FIELD_PROTOCOL_VERSION = 3
    FIELD_PLAYERS_ONLINE = 4
    FIELD_PLAYERS_MAX = 5
    MIN_FIELDS = 6

    def __init__(self):
        self._sequence = itertools.count()

    def encode_ping(self) -> bytes:
        """Create an unconnected ping with a fresh pair of random nonces"""
        # Sequence keeps seeds distinct on coarse clocks
        rng = random.Random(time.time_ns() ^ (next(self._sequence) << 64))
        return (
            struct.pack('>Bq', UNCONNECTED_PING, rng.getrandbits(63))
            + RAKNET_MAGIC
            + struct.pack('>q', rng.getrandbits(63))
        )

    def decode_pong(self, data: bytes) -> Status:
        """Decode the payload of an unconnected pong.

        The caller is responsible for checking the packet id and that the
        buffer is longer than the pong header.
        """
        payload = data[PONG_HEADER_SIZE:].decode('utf-8', errors='replace')
        parts = payload.split(';')
        if len(parts) < self.MIN_FIELDS:
            raise ParseError(
                f"Pong payload has {len(parts)} fields, expected at least {self.MIN_FIELDS}"
            )

        return Status(
            description=parts[self.FIELD_DESCRIPTION],
            protocol_version=parts[self.FIELD_PROTOCOL_VERSION],
            protocol_id=self._parse_int(parts[self.FIELD_PROTOCOL_ID], 'protocol id'),
            players_online=self._parse_int(parts[self.FIELD_PLAYERS_ONLINE], 'online players'),
            players_max=self._parse_int(parts[self.FIELD_PLAYERS_MAX], 'max players'),
        )

    @staticmethod
    def _parse_int(value: str, field_name: str) -> int:
        if not _INTEGER.fullmatch(value):
            raise ParseError(f"Invalid {field_name} value: {value!r}")
        return int(value)
