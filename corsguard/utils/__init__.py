"""
Utility modules for logging.
"""

from corsguard.utils.logger import setup_logger

__all__ = ["setup_logger"]
