"""
Default configuration values for corsguard.

This module defines default values and their expected data types for all
configurable parameters. These defaults are used when values are not
specified in the configuration file.

Format: CONFIG_DEFAULTS[key] = (default_value, data_type)
"""

CONFIG_DEFAULTS = {
    # Logging configuration
    "log_level": ("INFO", str),

    # Policy
    "mode": ("whitelist", str),  # Options: whitelist or allow_any
    "allowed_hosts": ("", str),  # Comma separated hostnames

    # Preflight responses
    "allow_methods": ("GET,POST,PUT,DELETE,OPTIONS", str),
    "max_age": (600, int),  # Seconds; 0 omits Access-Control-Max-Age

    # Server binding
    "host": ("127.0.0.1", str),
    "port": (3000, int),
}


def get_default(key: str):
    """
    Get the default value for a configuration key.
    
    Args:
        key: Configuration key name
        
    Returns:
        The default value, or None if key is not found
    """
    if key in CONFIG_DEFAULTS:
        return CONFIG_DEFAULTS[key][0]
    return None


def get_type(key: str):
    """
    Get the expected data type for a configuration key.
    
    Args:
        key: Configuration key name
        
    Returns:
        The expected data type, or str if key is not found
    """
    if key in CONFIG_DEFAULTS:
        return CONFIG_DEFAULTS[key][1]
    return str
