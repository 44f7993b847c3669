"""
Package: config
Description: Settings and endpoint configuration for the Events client.
"""

from .endpoints import EndpointConfig
from .settings import Settings, settings

__all__ = ["EndpointConfig", "Settings", "settings"]
