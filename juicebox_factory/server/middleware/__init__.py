"""
Middleware modules for the JuiceBox Factory server.

This package contains custom middleware for request tracing and timing.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
