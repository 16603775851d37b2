"""
Core utilities and configuration for JuiceBox Factory.

This package provides core functionality including logging configuration,
the error taxonomy, database setup, and other shared utilities.
"""

from juicebox_factory.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
