"""
Custom exceptions for BedrockPing
"""

class BedrockPingError(Exception):
    """Base exception for BedrockPing"""
    pass

class ConnectError(BedrockPingError):
    """Socket could not be established or failed while waiting"""
    pass

class ProbeTimeoutError(BedrockPingError, TimeoutError):
    """No datagram arrived before the overall deadline"""
    pass

class ProtocolError(BedrockPingError):
    """A datagram arrived but is not an unconnected pong"""
    pass

class ParseError(BedrockPingError):
    """Pong payload could not be parsed into a status"""
    pass

class ConfigError(BedrockPingError):
    """Configuration-related errors"""
    pass
