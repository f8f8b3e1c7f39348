"""
Configuration management modules.
"""

from corsguard.config.loader import ConfigLoader, CorsConfigError
from corsguard.config.defaults import CONFIG_DEFAULTS, get_default, get_type

__all__ = [
    "ConfigLoader",
    "CorsConfigError",
    "CONFIG_DEFAULTS",
    "get_default",
    "get_type",
]
