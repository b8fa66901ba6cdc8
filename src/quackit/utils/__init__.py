"""Utility modules for Quackit.

Provides:
- logger: get_logger for the quackit logger namespace
"""

from quackit.utils.logger import get_logger

__all__ = ["get_logger"]
