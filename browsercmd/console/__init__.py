"""Rich, structured console output for browsercmd.

Usage:
    from browsercmd.console import logger

    logger.debug("tokens: ['click', '#b']")
    logger.error("Unknown command: frobnicate")

    # Structured output
    logger.header("navigate", "r123456")
    logger.key_value({"url": "https://example.com"})
"""
from browsercmd.console.logger import Logger, get_logger

# Module-level singleton for convenient import
logger = get_logger()

__all__ = ["Logger", "get_logger", "logger"]
