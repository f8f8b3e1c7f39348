"""
Origin policy evaluator.

Decides, per request, whether the Origin is permitted under the configured
policy and which CORS headers the response must carry. Evaluation is pure
computation over the request values; the evaluator holds no mutable state and
can be shared across threads and event loops.
"""

import logging
from typing import Iterable, Optional, Sequence

from corsguard.constants import (
    ACCESS_CONTROL_ALLOW_HEADERS,
    ACCESS_CONTROL_ALLOW_METHODS,
    ACCESS_CONTROL_ALLOW_ORIGIN,
    ACCESS_CONTROL_MAX_AGE,
    DEFAULT_ALLOW_METHODS,
    DEFAULT_MAX_AGE_SECONDS,
    LOGGER_NAME,
    ORIGIN,
    REASON_INVALID_ORIGIN,
    REASON_MISSING_ORIGIN,
    REASON_ORIGIN_NOT_ALLOWED,
    VARY,
)
from corsguard.cors.decisions import Accept, Decision, PreflightResponse, Reject
from corsguard.cors.origin import InvalidOriginError, extract_origin_host
from corsguard.cors.policy import OriginPolicy, PolicyMode


class OriginPolicyEvaluator:
    """
    Evaluate requests against an immutable OriginPolicy.

    Construct with `with_whitelist` or `with_allow_any` once at startup and
    reuse the instance for the lifetime of the server.
    """

    def __init__(self, policy: OriginPolicy, logger: Optional[logging.Logger] = None):
        self._policy = policy
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    @classmethod
    def with_whitelist(
        cls,
        hosts: Iterable[str],
        allow_methods: Sequence[str] = DEFAULT_ALLOW_METHODS,
        max_age: Optional[int] = DEFAULT_MAX_AGE_SECONDS,
        logger: Optional[logging.Logger] = None,
    ) -> "OriginPolicyEvaluator":
        """
        Allow only the given origin hosts (port and scheme are not checked).

        Args:
            hosts: Allowed hostnames; duplicates collapse, empty matches nothing
            allow_methods: Methods advertised in preflight responses
            max_age: Preflight cache lifetime in seconds, None to omit
            logger: Logger for policy events
        """
        policy = OriginPolicy.whitelist(
            hosts,
            allow_methods=_normalize_methods(allow_methods),
            max_age=_validate_max_age(max_age),
        )
        evaluator = cls(policy, logger)
        if not policy.allowed_hosts:
            evaluator._logger.warning("CORS whitelist is empty, every cross-origin request will be rejected")
        return evaluator

    @classmethod
    def with_allow_any(
        cls,
        allow_methods: Sequence[str] = DEFAULT_ALLOW_METHODS,
        max_age: Optional[int] = DEFAULT_MAX_AGE_SECONDS,
        logger: Optional[logging.Logger] = None,
    ) -> "OriginPolicyEvaluator":
        """Allow any request carrying a non-empty Origin header."""
        policy = OriginPolicy.allow_any(
            allow_methods=_normalize_methods(allow_methods),
            max_age=_validate_max_age(max_age),
        )
        return cls(policy, logger)

    @property
    def policy(self) -> OriginPolicy:
        return self._policy

    def evaluate_request(self, method: str, origin_header: Optional[str]) -> Decision:
        """
        Evaluate a non-preflight request.

        Returns Reject when the origin is missing, not permitted or, under a
        whitelist, unparseable; otherwise Accept with the headers to merge into whatever
        response the application handler produces.
        """
        rejection = self._check_origin(method, origin_header)
        if rejection is not None:
            return rejection
        return Accept(headers=self._origin_headers(origin_header))

    def evaluate_preflight(
        self,
        method: str,
        origin_header: Optional[str],
        requested_method: Optional[str] = None,
        requested_headers: Optional[str] = None,
    ) -> Decision:
        """
        Evaluate an OPTIONS preflight request.

        The origin check is identical to `evaluate_request`. An accepted
        preflight yields a complete synthetic response; the application
        handler is never consulted.
        """
        rejection = self._check_origin(method, origin_header)
        if rejection is not None:
            return rejection

        policy = self._policy
        if requested_method and not policy.allows_method(requested_method):
            self._logger.warning(
                f"Preflight from {origin_header} requested method {requested_method} "
                f"outside allowed methods {', '.join(policy.allow_methods)}"
            )

        headers = self._origin_headers(origin_header)
        headers[ACCESS_CONTROL_ALLOW_METHODS] = ", ".join(policy.allow_methods)
        if requested_headers:
            headers[ACCESS_CONTROL_ALLOW_HEADERS] = requested_headers
        if policy.max_age:
            headers[ACCESS_CONTROL_MAX_AGE] = str(policy.max_age)

        return PreflightResponse(headers=headers)

    def _check_origin(self, method: str, origin_header: Optional[str]) -> Optional[Reject]:
        """Return a Reject for an impermissible origin, None if it passes."""
        if not origin_header:
            self._logger.debug(f"Got {method} request without Origin header")
            return Reject(reason=REASON_MISSING_ORIGIN)

        # Any non-empty value is usable when no host has to be compared
        if self._policy.mode is PolicyMode.ALLOW_ANY:
            return None

        try:
            host = extract_origin_host(origin_header)
        except InvalidOriginError as e:
            self._logger.warning(f"Got CORS request with invalid origin: {e}")
            return Reject(reason=REASON_INVALID_ORIGIN)

        if not self._policy.matches(host):
            self._logger.warning(f"Got disallowed CORS request from {host}")
            return Reject(reason=REASON_ORIGIN_NOT_ALLOWED)

        return None

    @staticmethod
    def _origin_headers(origin_header: str) -> dict:
        # Echo the received origin verbatim, never "*"
        return {
            ACCESS_CONTROL_ALLOW_ORIGIN: origin_header,
            VARY: ORIGIN,
        }


def _normalize_methods(methods: Sequence[str]) -> tuple:
    normalized = []
    for method in methods:
        method = method.strip().upper()
        if method and method not in normalized:
            normalized.append(method)
    if not normalized:
        raise ValueError("allow_methods must name at least one HTTP method")
    return tuple(normalized)


def _validate_max_age(max_age: Optional[int]) -> Optional[int]:
    if max_age is not None and max_age < 0:
        raise ValueError(f"max_age must not be negative, got {max_age}")
    return max_age
