"""
js2ts Configuration

Centralized configuration management using pydantic-settings.
All environment variables use the JS2TS_ prefix.

Usage:
    from js2ts.config import get_settings

    settings = get_settings()
    config = settings.conversion
"""

from .groups import ConversionConfig, ObservabilityConfig
from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "ConversionConfig",
    "ObservabilityConfig",
]
