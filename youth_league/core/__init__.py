"""
Core utilities and configuration for the youth league data layer.

This package provides settings, logging configuration, error types and the
database layer.
"""

from youth_league.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
