#!/usr/bin/env python3
"""
BedrockPing v0.1 - Minecraft: Bedrock Edition status probe
Main entry point with CLI interface
"""

import asyncio
import argparse
import logging
import logging.handlers
import sys
from pathlib import Path

from core.config import ConfigManager
from core.config_types import LoggingConfig
from core.exceptions import BedrockPingError, ConfigError
from ui.console import ConsoleUI
from ui.cli import CLIInterface

def setup_logging(config: LoggingConfig, verbose: bool = False) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else getattr(logging, config.level.upper())
    handlers = []

    if config.file:
        Path(config.file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            config.file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count
        ))
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))
    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bedrockping",
        description="BedrockPing v0.1 - Minecraft: Bedrock Edition status probe",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bedrockping play.example.net
  bedrockping 192.168.1.20:19133 --timeout 1.5
  bedrockping [2001:db8::1]:19132 --json
        """
    )

    # Utility commands (don't require an address)
    parser.add_argument(
        "--validate-config",
        action="store_true",
        help="Validate configuration file and exit"
    )

    parser.add_argument(
        "--create-config",
        action="store_true",
        help="Create default configuration file and exit"
    )

    parser.add_argument(
        "--version",
        action="version",
        version="BedrockPing v0.1.0"
    )

    parser.add_argument(
        "--config", "-c",
        default="config.yaml",
        help="Configuration file path (default: config.yaml)"
    )

    parser.add_argument(
        "address",
        nargs="?",
        help="Server address as host[:port] (default port: 19132)"
    )

    # Probe options
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        help="Overall deadline for the probe in seconds"
    )

    parser.add_argument(
        "--resend-interval",
        type=float,
        help="Seconds between redundant pings while waiting"
    )

    # Output options
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Plain text output without rich formatting"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as a JSON object"
    )

    # Logging options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress logging output"
    )

    return parser

async def main(argv=None) -> int:
    """Main application entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.create_config:
            config_path = Path(args.config)
            if config_path.exists():
                response = input(f"Config file {config_path} already exists. Overwrite? (y/N): ")
                if response.lower() != 'y':
                    print("Aborted.")
                    return 0

            ConfigManager(args.config).create_default_config()
            print(f"✅ Default configuration created: {args.config}")
            return 0

        if args.validate_config:
            try:
                ConfigManager(args.config)
            except ConfigError as e:
                print(f"❌ Configuration validation failed: {e}")
                return 1
            print(f"✅ Configuration file {args.config} is valid")
            return 0

        if not args.address:
            parser.error("an address is required unless --create-config or --validate-config is given")

        config = ConfigManager(args.config)

        # Override configuration with command line arguments
        if args.timeout is not None:
            config.probe.timeout = args.timeout
        if args.resend_interval is not None:
            config.probe.resend_interval = args.resend_interval
        if args.json:
            config.ui.output_format = "json"
        config.validate()

        if not args.quiet:
            setup_logging(config.logging, args.verbose)

        if args.no_ui or config.ui.output_format == "json" or not config.ui.enabled:
            ui = CLIInterface(config.ui.output_format)
        else:
            ui = ConsoleUI()

        ok = await ui.run(args.address, config.probe)
        return 0 if ok else 1

    except BedrockPingError as e:
        print(f"❌ BedrockPing error: {e}", file=sys.stderr)
        return 1

def run() -> None:
    """Console script entry point"""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\n🛑 Interrupted")
        sys.exit(130)

if __name__ == "__main__":
    run()
