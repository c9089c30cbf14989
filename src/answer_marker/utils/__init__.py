"""
Utility module.

Common utilities for logging and reading text inputs.
"""

from .logging import setup_logging, get_logger
from .files import read_text

__all__ = ["setup_logging", "get_logger", "read_text"]
