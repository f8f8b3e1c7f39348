"""
Scenario-based tests for corsguard.

Tests cover end-to-end behaviour through the middleware:
- Whitelisted and foreign origins
- Allow-any policy with and without an Origin header
- Preflight handling
- Handler failures after acceptance
- Concurrent evaluation against one shared policy
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from corsguard.cors.decisions import Accept, PreflightResponse, Reject
from corsguard.cors.evaluator import OriginPolicyEvaluator

from tests.conftest import HandlerCalls, build_app


# =============================================================================
# Reference Scenarios
# =============================================================================

class TestReferenceScenarios:
    """Whitelist and allow-any walkthroughs."""

    @pytest.mark.scenario
    @pytest.mark.smoke
    def test_whitelisted_origin_accepted(self, whitelist_client):
        """whitelist={example.com}, Origin http://example.com -> accepted."""
        response = whitelist_client.get("/hello", headers={"Origin": "http://example.com"})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://example.com"

    @pytest.mark.scenario
    @pytest.mark.smoke
    def test_foreign_origin_rejected(self, whitelist_client, handler_calls):
        """whitelist={example.com}, Origin http://evil.com -> 400."""
        response = whitelist_client.get("/hello", headers={"Origin": "http://evil.com"})

        assert response.status_code == 400
        assert handler_calls.count == 0

    @pytest.mark.scenario
    @pytest.mark.smoke
    def test_allow_any_without_origin_rejected(self, allow_any_client, handler_calls):
        """allow-any, no Origin header -> 400."""
        response = allow_any_client.get("/hello")

        assert response.status_code == 400
        assert handler_calls.count == 0

    @pytest.mark.scenario
    @pytest.mark.smoke
    def test_allow_any_preflight(self, allow_any_client, handler_calls):
        """allow-any, OPTIONS from http://a.com requesting PUT -> synthetic 204."""
        response = allow_any_client.options(
            "/hello",
            headers={"Origin": "http://a.com", "Access-Control-Request-Method": "PUT"},
        )

        assert response.status_code == 204
        assert response.headers["access-control-allow-origin"] == "http://a.com"
        assert "PUT" in response.headers["access-control-allow-methods"]
        assert "access-control-allow-headers" not in response.headers
        assert handler_calls.count == 0


# =============================================================================
# Browser Flows
# =============================================================================

class TestBrowserFlows:
    """Preflight followed by the actual request."""

    @pytest.mark.scenario
    def test_preflight_then_put(self, whitelist_client, handler_calls):
        preflight = whitelist_client.options(
            "/hello",
            headers={
                "Origin": "https://example.com:8443",
                "Access-Control-Request-Method": "PUT",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        actual = whitelist_client.put("/hello", headers={"Origin": "https://example.com:8443"})

        assert preflight.status_code == 204
        assert preflight.headers["access-control-allow-headers"] == "Content-Type"
        assert actual.status_code == 200
        assert actual.text == "Updated"
        assert actual.headers["access-control-allow-origin"] == "https://example.com:8443"
        assert handler_calls.paths == ["/hello"]

    @pytest.mark.scenario
    def test_distinct_origins_served_separately(self, mock_logger):
        """Each origin gets its own echoed value, never a wildcard."""
        calls = HandlerCalls()
        evaluator = OriginPolicyEvaluator.with_whitelist(["a.com", "b.com"], logger=mock_logger)
        client = TestClient(build_app(evaluator, calls, mock_logger))

        first = client.get("/hello", headers={"Origin": "http://a.com"})
        second = client.get("/hello", headers={"Origin": "http://b.com"})

        assert first.headers["access-control-allow-origin"] == "http://a.com"
        assert second.headers["access-control-allow-origin"] == "http://b.com"
        assert calls.count == 2


# =============================================================================
# Handler Failures
# =============================================================================

class TestHandlerFailures:
    """CORS headers are attached on every exit path of an accepted request."""

    @pytest.mark.scenario
    @pytest.mark.parametrize("path,status", [
        ("/hello", 200),
        ("/forbidden", 403),
        ("/boom", 500),
        ("/no-such-route", 404),
    ])
    def test_headers_present_on_every_outcome(self, allow_any_client, path, status):
        response = allow_any_client.get(path, headers={"Origin": "http://a.com"})

        assert response.status_code == status
        assert response.headers["access-control-allow-origin"] == "http://a.com"


# =============================================================================
# Concurrency
# =============================================================================

class TestConcurrentEvaluation:
    """One evaluator shared across threads."""

    @pytest.mark.scenario
    def test_parallel_evaluations_are_consistent(self, mock_logger):
        evaluator = OriginPolicyEvaluator.with_whitelist(["example.com"], logger=mock_logger)
        origins = ["http://example.com", "http://evil.com", None, "null"] * 50

        def evaluate(origin):
            return evaluator.evaluate_request("GET", origin)

        with ThreadPoolExecutor(max_workers=8) as pool:
            decisions = list(pool.map(evaluate, origins))

        for origin, decision in zip(origins, decisions):
            if origin == "http://example.com":
                assert isinstance(decision, Accept)
            else:
                assert isinstance(decision, Reject)

    @pytest.mark.scenario
    def test_parallel_preflights(self, mock_logger):
        evaluator = OriginPolicyEvaluator.with_allow_any(logger=mock_logger)

        def evaluate(i):
            return evaluator.evaluate_preflight("OPTIONS", f"http://host{i}.com", "PUT")

        with ThreadPoolExecutor(max_workers=8) as pool:
            decisions = list(pool.map(evaluate, range(100)))

        assert all(isinstance(d, PreflightResponse) for d in decisions)
        assert {d.headers["Access-Control-Allow-Origin"] for d in decisions} == {
            f"http://host{i}.com" for i in range(100)
        }
