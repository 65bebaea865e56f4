"""
BedrockPing Utils Package
"""

from .network import NetworkUtils

__all__ = [
    'NetworkUtils'
]
