"""FastAPI server protected by the origin policy middleware."""

import os
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from corsguard import __version__
from corsguard.config.loader import ConfigLoader
from corsguard.cors.evaluator import OriginPolicyEvaluator
from corsguard.utils.logger import setup_logger

from corsguard.api.middleware.cors import OriginPolicyMiddleware


DEFAULT_CONFIG_PATH = 'config/cors.ini'

# Evaluator loaded from the config file, built once per process
_evaluator: Optional[OriginPolicyEvaluator] = None


def get_evaluator(config_path: Optional[str] = None) -> OriginPolicyEvaluator:
    """Get or create the evaluator described by the config file."""
    global _evaluator

    if _evaluator is None:
        config_path = config_path or os.environ.get('CORSGUARD_CONFIG', DEFAULT_CONFIG_PATH)
        config = ConfigLoader(config_file=config_path)
        logger = setup_logger(config)
        _evaluator = config.build_evaluator(logger=logger)
        logger.info(f"Loaded CORS policy from {config_path}: {_evaluator.policy.summary()}")

    return _evaluator


def create_app(
    evaluator: Optional[OriginPolicyEvaluator] = None,
    config_path: Optional[str] = None
) -> FastAPI:
    """
    Create FastAPI application.
    
    Args:
        evaluator: Origin policy evaluator. If None, one is loaded from config.
        config_path: INI file used when no evaluator is given
    
    Returns:
        FastAPI application instance
    """
    if evaluator is None:
        evaluator = get_evaluator(config_path)
    
    app = FastAPI(
        title="corsguard",
        description="Origin policy enforcement demo server",
        version=__version__
    )
    
    app.add_middleware(OriginPolicyMiddleware, evaluator=evaluator)
    app.state.evaluator = evaluator
    
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": "corsguard"}
    
    @app.get("/")
    def root():
        """Root endpoint."""
        policy = evaluator.policy
        return {
            "service": "corsguard",
            "version": __version__,
            "mode": policy.mode.value,
            "allowed_hosts": sorted(policy.allowed_hosts),
        }
    
    @app.get("/hello", response_class=PlainTextResponse)
    def hello():
        return "Hello, world!"
    
    return app
