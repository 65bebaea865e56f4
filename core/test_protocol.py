import struct
from dataclasses import FrozenInstanceError

import pytest

from core.exceptions import ParseError
from core.protocol import (
    RakNetCodec, Status, RAKNET_MAGIC, UNCONNECTED_PING, UNCONNECTED_PONG,
    PING_SIZE, PONG_HEADER_SIZE
)

def build_pong(text: str, client_time: int = 1234, server_guid: int = 987654321) -> bytes:
    body = text.encode('utf-8')
    return (
        struct.pack('>BQq', UNCONNECTED_PONG, client_time, server_guid)
        + RAKNET_MAGIC
        + struct.pack('>H', len(body))
        + body
    )

def test_header_size_matches_pong_layout():
    assert PONG_HEADER_SIZE == 35
    assert len(build_pong('')) == PONG_HEADER_SIZE

def test_ping_layout():
    codec = RakNetCodec()
    for _ in range(20):
        ping = codec.encode_ping()
        assert len(ping) == PING_SIZE == 33
        assert ping[0] == UNCONNECTED_PING
        assert ping[9:25] == RAKNET_MAGIC

def test_pings_carry_fresh_nonces():
    codec = RakNetCodec()
    first = codec.encode_ping()
    second = codec.encode_ping()
    assert (first[1:9], first[25:]) != (second[1:9], second[25:])

def test_decode_known_values():
    codec = RakNetCodec()
    data = build_pong('MCPE;My Server;422;1.19.0;5;20;12345;World;Survival;1;19132;19133;')
    assert codec.decode_pong(data) == Status(
        description='My Server',
        protocol_version='1.19.0',
        protocol_id=422,
        players_online=5,
        players_max=20
    )

def test_decode_exactly_six_fields():
    status = RakNetCodec().decode_pong(build_pong('MCEE;Classroom;390;1.14.60;0;30'))
    assert status.description == 'Classroom'
    assert status.players_max == 30

def test_description_keeps_formatting_codes():
    status = RakNetCodec().decode_pong(build_pong('MCPE;§aGreen §lBold;649;1.20.61;-1;10'))
    assert status.description == '§aGreen §lBold'
    assert status.players_online == -1

def test_status_is_immutable():
    status = RakNetCodec().decode_pong(build_pong('MCPE;A;1;v;2;3'))
    with pytest.raises(FrozenInstanceError):
        status.players_online = 99

@pytest.mark.parametrize('text', [
    '',
    'MCPE',
    'MCPE;My Server;422;1.19.0;5',
])
def test_short_payload_raises_parse_error(text):
    with pytest.raises(ParseError):
        RakNetCodec().decode_pong(build_pong(text))

@pytest.mark.parametrize('text', [
    'MCPE;My Server;abc;1.19.0;5;20',
    'MCPE;My Server;422;1.19.0;five;20',
    'MCPE;My Server;422;1.19.0;5;',
    'MCPE;My Server;422;1.19.0; 5;20',
    'MCPE;My Server;4_22;1.19.0;5;20',
])
def test_non_numeric_field_raises_parse_error(text):
    with pytest.raises(ParseError):
        RakNetCodec().decode_pong(build_pong(text))
