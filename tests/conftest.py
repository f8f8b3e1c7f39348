"""
Pytest configuration and shared fixtures for the corsguard test suite.

Provides:
- Mock logger capturing log calls
- Whitelist and allow-any evaluators
- A FastAPI application wrapped by the origin policy middleware, recording
  every handler invocation
"""

from typing import List
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from fastapi.testclient import TestClient

from corsguard.api.middleware.cors import OriginPolicyMiddleware
from corsguard.cors.evaluator import OriginPolicyEvaluator


# =============================================================================
# Mock Logger
# =============================================================================

@pytest.fixture
def mock_logger():
    """Create a mock logger that captures all log calls."""
    logger = MagicMock()
    logger._logs = {"debug": [], "info": [], "warning": [], "error": []}

    def capture_log(level):
        def _log(msg, *args, **kwargs):
            logger._logs[level].append(msg % args if args else msg)
        return _log

    logger.debug = MagicMock(side_effect=capture_log("debug"))
    logger.info = MagicMock(side_effect=capture_log("info"))
    logger.warning = MagicMock(side_effect=capture_log("warning"))
    logger.error = MagicMock(side_effect=capture_log("error"))

    return logger


# =============================================================================
# Evaluators
# =============================================================================

@pytest.fixture
def whitelist_evaluator(mock_logger):
    """Evaluator allowing only example.com."""
    return OriginPolicyEvaluator.with_whitelist(["example.com"], logger=mock_logger)


@pytest.fixture
def allow_any_evaluator(mock_logger):
    """Evaluator allowing any non-empty origin."""
    return OriginPolicyEvaluator.with_allow_any(logger=mock_logger)


# =============================================================================
# Wrapped Application
# =============================================================================

class HandlerCalls:
    """Record of application handler invocations."""

    def __init__(self):
        self.paths: List[str] = []

    def record(self, path: str):
        self.paths.append(path)

    @property
    def count(self) -> int:
        return len(self.paths)


def build_app(evaluator: OriginPolicyEvaluator, calls: HandlerCalls, logger=None) -> FastAPI:
    """Hello-world application wrapped by the middleware."""
    app = FastAPI()
    app.add_middleware(OriginPolicyMiddleware, evaluator=evaluator, logger=logger)

    @app.get("/hello", response_class=PlainTextResponse)
    def hello():
        calls.record("/hello")
        return "Hello, world!"

    @app.put("/hello", response_class=PlainTextResponse)
    def update_hello():
        calls.record("/hello")
        return "Updated"

    @app.options("/hello")
    def hello_options():
        calls.record("/hello")
        return {"handled_by": "application"}

    @app.get("/forbidden")
    def forbidden():
        calls.record("/forbidden")
        raise HTTPException(status_code=403, detail="Forbidden")

    @app.get("/boom")
    def boom():
        calls.record("/boom")
        raise RuntimeError("handler exploded")

    @app.get("/vary", response_class=PlainTextResponse)
    def vary():
        calls.record("/vary")
        return PlainTextResponse("varies", headers={"Vary": "Accept-Encoding"})

    return app


@pytest.fixture
def handler_calls():
    return HandlerCalls()


@pytest.fixture
def whitelist_client(whitelist_evaluator, handler_calls, mock_logger):
    """TestClient for an app allowing only example.com."""
    return TestClient(build_app(whitelist_evaluator, handler_calls, mock_logger))


@pytest.fixture
def allow_any_client(allow_any_evaluator, handler_calls, mock_logger):
    """TestClient for an app allowing any origin."""
    return TestClient(build_app(allow_any_evaluator, handler_calls, mock_logger))
