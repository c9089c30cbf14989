"""
Marking module.

Parses mark schemes into marking points, matches answers against their
keywords, and renders score feedback.
"""

from .engine import MarkingEngine, MarkingResult, grade
from .errors import InvalidInputError, MarkingError, UnexpectedFailureError
from .feedback import FeedbackGenerator
from .keywords import KeywordExtractor, extract_keywords
from .matcher import FuzzyMatcher, matches
from .scheme import MarkingPoint, MarkSchemeParser, parse_mark_scheme

__all__ = [
    "MarkingEngine",
    "MarkingResult",
    "grade",
    "MarkingError",
    "InvalidInputError",
    "UnexpectedFailureError",
    "FeedbackGenerator",
    "KeywordExtractor",
    "extract_keywords",
    "FuzzyMatcher",
    "matches",
    "MarkingPoint",
    "MarkSchemeParser",
    "parse_mark_scheme",
]
