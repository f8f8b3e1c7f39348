"""
Application-wide constants for corsguard.

This module defines constant values used throughout the application for:
- CORS request and response header names
- Policy mode names
- Rejection reasons
- Preflight defaults
"""

# Request header names
ORIGIN = "Origin"
ACCESS_CONTROL_REQUEST_METHOD = "Access-Control-Request-Method"
ACCESS_CONTROL_REQUEST_HEADERS = "Access-Control-Request-Headers"

# Response header names
ACCESS_CONTROL_ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ACCESS_CONTROL_ALLOW_METHODS = "Access-Control-Allow-Methods"
ACCESS_CONTROL_ALLOW_HEADERS = "Access-Control-Allow-Headers"
ACCESS_CONTROL_MAX_AGE = "Access-Control-Max-Age"
VARY = "Vary"

# Preflight method
PREFLIGHT_METHOD = "OPTIONS"

# Policy mode names (as used in configuration files)
MODE_WHITELIST = "whitelist"
MODE_ALLOW_ANY = "allow_any"

# Rejection reasons
REASON_MISSING_ORIGIN = "missing or empty origin"
REASON_INVALID_ORIGIN = "invalid origin"
REASON_ORIGIN_NOT_ALLOWED = "origin not allowed"

# Preflight defaults
DEFAULT_ALLOW_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
DEFAULT_MAX_AGE_SECONDS = 600  # 10 minutes
PREFLIGHT_STATUS_CODE = 204  # No Content

# HTTP status for rejected requests
REJECT_STATUS_CODE = 400

LOGGER_NAME = "CorsLogger"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024  # 5 MB per file
LOG_FILE_BACKUP_COUNT = 3
