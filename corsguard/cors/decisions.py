"""
Decision models returned by the origin policy evaluator.

This module defines Pydantic models for the three per-request outcomes. The
`kind` field discriminates the union so the collaborator can branch on it.
"""

from typing import Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from corsguard.constants import PREFLIGHT_STATUS_CODE, REJECT_STATUS_CODE


class Reject(BaseModel):
    """Terminal outcome: respond 400 and skip the application handler."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["reject"] = "reject"
    reason: str
    status_code: int = REJECT_STATUS_CODE


class Accept(BaseModel):
    """Non-terminal outcome: run the handler, then merge `headers`."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["accept"] = "accept"
    headers: Dict[str, str] = Field(default_factory=dict)


class PreflightResponse(BaseModel):
    """Synthetic response to an accepted preflight request."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["preflight"] = "preflight"
    status_code: int = PREFLIGHT_STATUS_CODE
    headers: Dict[str, str] = Field(default_factory=dict)
    body: bytes = b""


Decision = Union[Reject, Accept, PreflightResponse]
