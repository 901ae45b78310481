"""
Logger module for reql_codec.

This module provides a centralized logger that can be imported throughout the package
without causing circular import issues. Other modules look the logger up as `logger.logger` at call time, so a
logger installed with set_logger() is used everywhere.
"""

import logging

# Module-level logger
logger: logging.Logger = logging.getLogger('reql_codec')
logger.setLevel(logging.WARNING)  # Default to WARNING level to avoid spam

def set_logger(custom_logger: logging.Logger) -> None:
    """Allow users to provide their own logger."""
    global logger
    logger = custom_logger

def set_log_level(level: int) -> None:
    """Set the logging level for the package.
    
    Args:
        level: logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL
    """
    logger.setLevel(level)
