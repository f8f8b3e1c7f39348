"""
corsguard - Origin policy enforcement for HTTP servers

Inspects the Origin header of incoming requests, rejects origins that are not
permitted by the configured policy and annotates accepted responses with the
matching CORS headers. Preflight requests are answered directly.
"""

__version__ = "1.0.0"
__author__ = "corsguard Team"

from corsguard.cors.evaluator import OriginPolicyEvaluator
from corsguard.cors.policy import OriginPolicy, PolicyMode

__all__ = ["OriginPolicyEvaluator", "OriginPolicy", "PolicyMode"]
