"""
Core utilities and configuration for wahlprogramm.

This package provides core functionality including logging configuration,
settings, domain records and the data-access layer.
"""

from wahlprogramm.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
