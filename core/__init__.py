"""
BedrockPing Core Package
"""

from .protocol import RakNetCodec, Status
from .session import ProbeSession, fetch
from .config import ConfigManager
from .config_types import ProbeConfig, LoggingConfig, UIConfig
from .exceptions import *

__version__ = "0.1.0"
__author__ = "BedrockPing Team"

__all__ = [
    'RakNetCodec',
    'Status',
    'ProbeSession',
    'fetch',
    'ConfigManager',
    'ProbeConfig',
    'LoggingConfig',
    'UIConfig',
    'BedrockPingError',
    'ConnectError',
    'ProbeTimeoutError',
    'ProtocolError',
    'ParseError',
    'ConfigError'
]
