"""
API module for corsguard.

Provides the Starlette middleware and a FastAPI application factory wiring it
around the application routes.
"""

from corsguard.api.server import create_app, get_evaluator

__all__ = ['create_app', 'get_evaluator']
