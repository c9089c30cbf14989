"""
Configuration module.

Handles loading and validation of the marking vocabularies and tuning
constants.
"""

from .loader import ConfigLoader
from .models import MarkingConfig, PerformanceBand

__all__ = ["ConfigLoader", "MarkingConfig", "PerformanceBand"]
