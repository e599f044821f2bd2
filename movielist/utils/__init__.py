"""
Shared utilities package.

This package contains the logging configuration shared across the
application.
"""

from movielist.utils.logging_config import setup_logging, get_logger, configure_api_logging

__all__ = ['setup_logging', 'get_logger', 'configure_api_logging']
