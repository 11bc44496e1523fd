"""Utility functions for glyphpath.

This module provides logging setup and configuration.
"""

from glyphpath.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
