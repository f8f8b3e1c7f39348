"""
File-based configuration loader for corsguard.

This module loads the CORS policy and server settings from an INI file and
builds the OriginPolicyEvaluator used by the HTTP middleware. The policy is
read once at startup; there is no runtime reconfiguration.
"""

import configparser
import logging
from typing import List, Optional

from corsguard.config.defaults import get_default, get_type
from corsguard.constants import MODE_ALLOW_ANY, MODE_WHITELIST
from corsguard.cors.evaluator import OriginPolicyEvaluator


class CorsConfigError(ValueError):
    """Raised when the CORS configuration cannot produce a valid policy."""


def _split_list(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


class ConfigLoader:
    """
    Load configuration from an INI file.

    Expected layout:

        [Cors]
        mode = whitelist
        allowed_hosts = example.com, api.example.com
        allow_methods = GET,POST,PUT,DELETE,OPTIONS
        max_age = 600
        log_level = INFO

        [Server]
        host = 127.0.0.1
        port = 3000

    Attributes:
        mode: Policy mode, "whitelist" or "allow_any"
        allowed_hosts: Whitelisted hostnames
        allow_methods: Methods advertised in preflight responses
        max_age: Preflight cache lifetime in seconds
        log_level: Logging level name
        host: Server bind address
        port: Server port
    """

    def __init__(self, config_file: str = "config/cors.ini"):
        """
        Initialize the configuration loader.

        Args:
            config_file: Path to the INI configuration file
        """
        self.config_file = config_file
        self.config = configparser.ConfigParser()

        # Load configuration
        self._load_common_config()

    def _read(self, section: str, key: str):
        """Read `key` from `section`, typed and defaulted from CONFIG_DEFAULTS."""
        fallback = get_default(key)
        if get_type(key) is int:
            try:
                return self.config.getint(section, key, fallback=fallback)
            except ValueError as e:
                raise CorsConfigError(f"{key} must be an integer: {e}") from e
        return self.config.get(section, key, fallback=fallback)

    def _load_common_config(self) -> None:
        """Load configuration settings from the INI file."""
        self.config.read(self.config_file)

        # Policy configuration
        self.mode: str = self._read("Cors", "mode").strip().lower()
        self.allowed_hosts: List[str] = _split_list(self._read("Cors", "allowed_hosts"))

        # Preflight configuration
        self.allow_methods: List[str] = _split_list(self._read("Cors", "allow_methods"))
        self.max_age: int = self._read("Cors", "max_age")

        # Logging configuration
        self.log_level: str = self._read("Cors", "log_level").upper()

        # Server configuration
        self.host: str = self._read("Server", "host")
        self.port: int = self._read("Server", "port")

    def get_log_level(self) -> str:
        """Return the configured log level name."""
        return self.log_level

    def build_evaluator(self, logger: Optional[logging.Logger] = None) -> OriginPolicyEvaluator:
        """
        Build the evaluator described by this configuration.

        Raises:
            CorsConfigError: Unknown mode, whitelist mode without hosts,
                negative max_age or an empty method list
        """
        if self.max_age < 0:
            raise CorsConfigError(f"max_age must not be negative, got {self.max_age}")
        if not self.allow_methods:
            raise CorsConfigError("allow_methods must name at least one HTTP method")

        max_age = self.max_age or None

        if self.mode == MODE_ALLOW_ANY:
            return OriginPolicyEvaluator.with_allow_any(
                allow_methods=self.allow_methods, max_age=max_age, logger=logger
            )

        if self.mode == MODE_WHITELIST:
            if not self.allowed_hosts:
                raise CorsConfigError(
                    f"mode is {MODE_WHITELIST} but no allowed_hosts are configured in {self.config_file}"
                )
            return OriginPolicyEvaluator.with_whitelist(
                self.allowed_hosts, allow_methods=self.allow_methods, max_age=max_age, logger=logger
            )

        raise CorsConfigError(
            f"Unknown CORS mode {self.mode!r}, expected {MODE_WHITELIST} or {MODE_ALLOW_ANY}"
        )
