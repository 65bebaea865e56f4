"""
Shared configuration types for BedrockPing
"""

from dataclasses import dataclass

from .exceptions import ConfigError

def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)

@dataclass
class ProbeConfig:
    timeout: float = 3.0  # overall deadline for the whole exchange
    resend_interval: float = 0.1
    default_port: int = 19132

    def validate(self) -> None:
        """Raise ConfigError unless 0 < resend_interval < timeout and the port is valid"""
        if not _is_number(self.timeout) or self.timeout <= 0:
            raise ConfigError("Probe timeout must be positive")
        if not _is_number(self.resend_interval) or self.resend_interval <= 0:
            raise ConfigError("Resend interval must be positive")
        if self.resend_interval >= self.timeout:
            raise ConfigError("Resend interval must be shorter than the probe timeout")
        if (not isinstance(self.default_port, int) or isinstance(self.default_port, bool)
                or not 1 <= self.default_port <= 65535):
            raise ConfigError(f"Invalid default port: {self.default_port}")

@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: str = ""  # empty disables the file handler
    max_size_mb: int = 10
    backup_count: int = 3

@dataclass
class UIConfig:
    enabled: bool = True
    output_format: str = "text"  # text, json
