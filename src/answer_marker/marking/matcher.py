"""Exact and partial substring matching of keywords against answers."""

import math
from collections.abc import Iterable

from ..config.models import MarkingConfig


class FuzzyMatcher:
    """Decides whether an answer contains a keyword.

    A keyword matches when it occurs literally in the answer, or, for
    keywords of at least ``min_fuzzy_keyword_length`` characters, when any
    window of ``ceil(len(keyword) * partial_match_threshold)`` consecutive
    keyword characters occurs in the answer. This tolerates truncation and
    small misspellings at either end of a word.
    """

    def __init__(self, config: MarkingConfig | None = None):
        self.config = config or MarkingConfig()

    def matches(self, answer_text: str, keyword: str) -> bool:
        """Check one keyword against an already lowercased answer."""
        if keyword in answer_text:
            return True
        return self._partial_match(answer_text, keyword)

    def matches_any(self, answer_text: str, keywords: Iterable[str]) -> bool:
        """True if at least one keyword matches; stops at the first hit."""
        return any(self.matches(answer_text, keyword) for keyword in keywords)

    def _partial_match(self, answer_text: str, keyword: str) -> bool:
        if len(keyword) < self.config.min_fuzzy_keyword_length:
            return False

        window = math.ceil(len(keyword) * self.config.partial_match_threshold)
        return any(
            keyword[start:start + window] in answer_text
            for start in range(len(keyword) - window + 1)
        )


_default_matcher = FuzzyMatcher()


def matches(answer_text: str, keyword: str) -> bool:
    """Match a keyword using the default thresholds."""
    return _default_matcher.matches(answer_text, keyword)
