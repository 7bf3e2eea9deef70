"""
Core utilities and configuration for Pink Nail.

This package provides core functionality including logging configuration,
database setup, domain exceptions and other shared utilities.
"""

from pinknail.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
