"""
Origin policy evaluation: policy model, decisions and the evaluator.
"""

from corsguard.cors.decisions import Accept, Decision, PreflightResponse, Reject
from corsguard.cors.evaluator import OriginPolicyEvaluator
from corsguard.cors.origin import InvalidOriginError, extract_origin_host
from corsguard.cors.policy import OriginPolicy, PolicyMode

__all__ = [
    "Accept",
    "Decision",
    "PreflightResponse",
    "Reject",
    "OriginPolicyEvaluator",
    "InvalidOriginError",
    "extract_origin_host",
    "OriginPolicy",
    "PolicyMode",
]
