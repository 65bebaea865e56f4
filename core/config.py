"""
Configuration management with YAML and validation
"""

import yaml
import logging
from typing import Dict, Any
from pathlib import Path

from .exceptions import ConfigError
from .config_types import ProbeConfig, LoggingConfig, UIConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
OUTPUT_FORMATS = ['text', 'json']

class ConfigManager:
    """Configuration manager with validation and defaults"""

    def __init__(self, config_path: str = "config.yaml"):
        self.config_path = Path(config_path)
        self.raw_config = self._load_config()

        # Parse configuration sections
        self.probe = self._parse_section('probe', ProbeConfig)
        self.logging = self._parse_section('logging', LoggingConfig)
        self.ui = self._parse_section('ui', UIConfig)

        self.validate()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file"""
        if not self.config_path.exists():
            logger.debug(f"Config file {self.config_path} not found, using defaults")
            return {}

        try:
            with open(self.config_path, 'r') as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config: {e}")

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {self.config_path} must contain a mapping")
        logger.debug(f"Configuration loaded from {self.config_path}")
        return raw

    def _parse_section(self, name: str, section_type):
        section = self.raw_config.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"Config section '{name}' must be a mapping")
        try:
            return section_type(**section)
        except TypeError as e:
            raise ConfigError(f"Invalid option in '{name}' section: {e}")

    def create_default_config(self) -> None:
        """Write the default configuration file"""
        default_config = {
            'probe': vars(ProbeConfig()),
            'logging': vars(LoggingConfig()),
            'ui': vars(UIConfig())
        }

        with open(self.config_path, 'w') as f:
            yaml.dump(default_config, f, default_flow_style=False, indent=2)

    def validate(self) -> None:
        """Validate configuration values"""
        self.probe.validate()

        if str(self.logging.level).upper() not in LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {self.logging.level}")

        if self.ui.output_format not in OUTPUT_FORMATS:
            raise ConfigError(f"Invalid output format: {self.ui.output_format}")
