"""
Exception handlers for the JuiceBox Factory server.

This package contains the handlers mapping the domain error taxonomy and
unhandled exceptions to JSON responses, and a setup function to register
them with the FastAPI application.
"""

from .global_handler import setup_exception_handlers

__all__ = ["setup_exception_handlers"]
