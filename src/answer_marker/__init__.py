"""
Answer Marker

Rule-based marking of short exam answers against bullet-point mark schemes,
with exact and partial keyword matching and tiered feedback.
"""

from .marking import (
    InvalidInputError,
    MarkingEngine,
    MarkingPoint,
    MarkingResult,
    UnexpectedFailureError,
    grade,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidInputError",
    "MarkingEngine",
    "MarkingPoint",
    "MarkingResult",
    "UnexpectedFailureError",
    "grade",
]
