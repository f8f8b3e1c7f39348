#!/usr/bin/env python3
"""
API Server Entry Point

Serves a hello-world application at /hello wrapped by the origin policy
middleware.

Usage:
    python api_server.py --whitelist example.com api.example.com
    python api_server.py --allow-any --port 8000
    python api_server.py --config config/cors.ini
"""

import argparse
import sys

from corsguard.api.server import DEFAULT_CONFIG_PATH, create_app
from corsguard.config.loader import ConfigLoader
from corsguard.cors.evaluator import OriginPolicyEvaluator
from corsguard.utils.logger import setup_logger


def parse_arguments():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="corsguard - origin policy enforcement demo server",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--whitelist",
        nargs="+",
        metavar="HOST",
        help="Allowed origin hosts (overrides the config file policy)"
    )
    mode.add_argument(
        "--allow-any",
        action="store_true",
        help="Allow any non-empty origin (overrides the config file policy)"
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help="INI configuration file"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Bind address (default from config)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Bind port (default from config)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default from config)"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Rotating log file (default: console)"
    )

    return parser.parse_args()


def build_evaluator(args, config: ConfigLoader, logger) -> OriginPolicyEvaluator:
    """Build the evaluator from CLI flags, falling back to the config file."""
    allow_methods = config.allow_methods
    max_age = config.max_age or None

    if args.allow_any:
        return OriginPolicyEvaluator.with_allow_any(
            allow_methods=allow_methods, max_age=max_age, logger=logger
        )
    if args.whitelist:
        return OriginPolicyEvaluator.with_whitelist(
            args.whitelist, allow_methods=allow_methods, max_age=max_age, logger=logger
        )
    return config.build_evaluator(logger=logger)


def main():
    """Main entry point."""
    args = parse_arguments()

    try:
        config = ConfigLoader(config_file=args.config)
        if args.log_level:
            config.log_level = args.log_level.upper()
        logger = setup_logger(config, log_file=args.log_file)
        evaluator = build_evaluator(args, config, logger)
        logger.info(f"CORS policy: {evaluator.policy.summary()}")
    except ValueError as e:
        print(f"\nConfiguration error: {e}")
        sys.exit(1)

    host = args.host or config.host
    port = args.port or config.port

    print(f"Allowed origin hosts: {evaluator.policy.describe()}")
    print(f"Starting new server on {host}:{port}...")

    import uvicorn

    try:
        uvicorn.run(create_app(evaluator=evaluator), host=host, port=port)
    except KeyboardInterrupt:
        print("\n\nShutting down gracefully...")
        sys.exit(0)


if __name__ == "__main__":
    main()
