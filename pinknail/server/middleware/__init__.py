"""
Middleware modules for the Pink Nail API.

This package contains custom middleware for request timing, logging and
monitoring.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
