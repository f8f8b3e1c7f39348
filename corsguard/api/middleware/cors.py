"""CORS middleware enforcing an OriginPolicyEvaluator."""

import logging
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp

from corsguard.constants import (
    ACCESS_CONTROL_REQUEST_HEADERS,
    ACCESS_CONTROL_REQUEST_METHOD,
    LOGGER_NAME,
    ORIGIN,
    PREFLIGHT_METHOD,
    VARY,
)
from corsguard.cors.decisions import PreflightResponse, Reject
from corsguard.cors.evaluator import OriginPolicyEvaluator


class OriginPolicyMiddleware(BaseHTTPMiddleware):
    """
    Wrap an application with origin policy enforcement.

    - Rejected requests get a 400 response without CORS headers and never
      reach the application.
    - OPTIONS requests are answered from the evaluator's preflight decision
      and never reach the application.
    - Accepted requests run the application; the CORS headers are attached to
      its response, including the 500 response produced when it raises.
    """

    def __init__(
        self,
        app: ASGIApp,
        evaluator: OriginPolicyEvaluator,
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(app)
        self.evaluator = evaluator
        self.logger = logger or logging.getLogger(LOGGER_NAME)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        origin = request.headers.get(ORIGIN)

        if request.method == PREFLIGHT_METHOD:
            decision = self.evaluator.evaluate_preflight(
                request.method,
                origin,
                request.headers.get(ACCESS_CONTROL_REQUEST_METHOD),
                request.headers.get(ACCESS_CONTROL_REQUEST_HEADERS),
            )
        else:
            decision = self.evaluator.evaluate_request(request.method, origin)

        if isinstance(decision, Reject):
            return PlainTextResponse(
                f"Invalid CORS request: {decision.reason}",
                status_code=decision.status_code,
            )

        if isinstance(decision, PreflightResponse):
            return Response(
                content=decision.body,
                status_code=decision.status_code,
                headers=decision.headers,
            )

        try:
            response = await call_next(request)
        except Exception as e:
            self.logger.error(
                f"Unhandled error in {request.method} {request.url.path}: {e}",
                exc_info=True,
            )
            response = PlainTextResponse("Internal Server Error", status_code=500)

        # Header attachment runs on every exit path of an accepted request
        for name, value in decision.headers.items():
            if name == VARY:
                response.headers.add_vary_header(value)
            else:
                response.headers[name] = value
        return response
