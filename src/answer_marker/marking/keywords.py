"""Keyword extraction from marking-point text."""

import re

from ..config.models import MarkingConfig
from ..utils.logging import get_logger

logger = get_logger(__name__)

_NON_WORD_CHARS = re.compile(r"[^a-z0-9\s]")


class KeywordExtractor:
    """Turns a phrase into its salient keywords and known domain phrases."""

    def __init__(self, config: MarkingConfig | None = None):
        self.config = config or MarkingConfig()

    def extract(self, text: str) -> tuple[str, ...]:
        """Extract keywords from text.

        Single tokens come first, in the order they appear, followed by any
        domain phrases found in the text, in vocabulary order. Duplicates
        are dropped.

        Args:
            text: Free text, typically a marking point description

        Returns:
            Ordered, de-duplicated keywords (empty for blank input)
        """
        lowered = text.lower()

        tokens = [
            token
            for token in _NON_WORD_CHARS.sub(" ", lowered).split()
            if len(token) >= self.config.min_token_length
            and token not in self.config.stop_words
        ]

        # Phrases are matched before punctuation stripping so that
        # hyphenated entries like "non-volatile" still match.
        phrases = [p for p in self.config.domain_phrases if p in lowered]

        return tuple(dict.fromkeys(tokens + phrases))


_default_extractor = KeywordExtractor()


def extract_keywords(text: str) -> tuple[str, ...]:
    """Extract keywords using the default vocabularies."""
    return _default_extractor.extract(text)
