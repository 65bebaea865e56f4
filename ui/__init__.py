"""
BedrockPing UI Package
"""

from .console import ConsoleUI
from .cli import CLIInterface

__all__ = [
    'ConsoleUI',
    'CLIInterface'
]
