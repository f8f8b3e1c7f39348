"""
Test suite for corsguard.

Structure:
- tests/unit/           Unit tests (fast, isolated)
- tests/scenarios/      End-to-end scenario tests through the middleware

Run all tests:
    pytest

Run specific category:
    pytest -m unit
    pytest -m scenario
    pytest -m smoke

Run with coverage:
    pytest --cov=corsguard --cov-report=html
"""
