"""
Origin policy model.

A policy is either a whitelist of hostnames or "allow any non-empty origin".
Both variants share one frozen dataclass tagged by PolicyMode; they differ only
in the match predicate.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Tuple

from corsguard.constants import (
    DEFAULT_ALLOW_METHODS,
    DEFAULT_MAX_AGE_SECONDS,
    MODE_ALLOW_ANY,
    MODE_WHITELIST,
)


class PolicyMode(Enum):
    """Policy variants."""
    WHITELIST = MODE_WHITELIST
    ALLOW_ANY = MODE_ALLOW_ANY


@dataclass(frozen=True)
class OriginPolicy:
    """Immutable CORS policy, constructed once at startup."""
    mode: PolicyMode
    allowed_hosts: FrozenSet[str] = field(default_factory=frozenset)
    allow_methods: Tuple[str, ...] = DEFAULT_ALLOW_METHODS
    max_age: Optional[int] = DEFAULT_MAX_AGE_SECONDS

    @classmethod
    def whitelist(cls, hosts: Iterable[str], **preflight) -> "OriginPolicy":
        """Build a whitelist policy; duplicate hostnames collapse."""
        return cls(PolicyMode.WHITELIST, frozenset(hosts), **preflight)

    @classmethod
    def allow_any(cls, **preflight) -> "OriginPolicy":
        """Build a policy matching any non-empty origin."""
        return cls(PolicyMode.ALLOW_ANY, frozenset(), **preflight)

    def matches(self, host: str) -> bool:
        if self.mode is PolicyMode.ALLOW_ANY:
            return True
        return host in self.allowed_hosts

    def allows_method(self, method: str) -> bool:
        return method.upper() in self.allow_methods

    def describe(self) -> str:
        """Allowed hosts as printed at startup, "*" under allow-any."""
        if self.mode is PolicyMode.ALLOW_ANY:
            return "*"
        return ", ".join(sorted(self.allowed_hosts)) or "<none>"

    def summary(self) -> str:
        """Mode and hosts, e.g. "whitelist (a.com, b.com)"."""
        return f"{self.mode.value} ({self.describe()})"
