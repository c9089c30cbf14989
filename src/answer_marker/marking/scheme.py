"""Mark scheme parsing into discrete marking points."""

import re
from dataclasses import dataclass

from ..config.models import MarkingConfig
from ..utils.logging import get_logger
from .keywords import KeywordExtractor

logger = get_logger(__name__)

# "(2 marks)", "(1 mark)", "(3MARKS)"
MARK_ANNOTATION = re.compile(r"\((\d+)\s*marks?\)", re.IGNORECASE)
_PHRASE_SEPARATOR = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class MarkingPoint:
    """One scoreable criterion from a mark scheme."""

    description: str
    keywords: tuple[str, ...]
    marks: int = 1

    def __post_init__(self) -> None:
        if self.marks < 1:
            raise ValueError(f"A marking point is worth at least 1 mark, got {self.marks}")

    @property
    def match_terms(self) -> tuple[str, ...]:
        """Keywords the answer is checked against.

        Words of a hyphenated compound in this point ("non-volatile") are
        only credited through the compound, so "volatile" on its own does not
        satisfy a "non-volatile" criterion. The cost: an answer using just
        one half of the compound ("volatile", "non") earns nothing from it.
        Spaced phrases such as "logic gate" keep their words as separate
        terms, so "gate" alone still credits a logic gate criterion.
        """
        phrase_words = {
            word
            for keyword in self.keywords
            if _PHRASE_SEPARATOR.search(keyword) and not any(c.isspace() for c in keyword)
            for word in _PHRASE_SEPARATOR.split(keyword)
        }
        return tuple(k for k in self.keywords if k not in phrase_words)

    @property
    def label(self) -> str:
        """Description with its mark value, as shown in feedback."""
        unit = "marks" if self.marks > 1 else "mark"
        return f"{self.description} ({self.marks} {unit})"


class MarkSchemeParser:
    """Parses raw mark scheme text into an ordered list of marking points.

    Only bullet lines (``-`` or ``•`` after optional indentation) are
    criteria. Header lines and prose are skipped, as are bullets that yield
    no keywords.
    """

    def __init__(
        self,
        config: MarkingConfig | None = None,
        extractor: KeywordExtractor | None = None,
    ):
        self.config = config or MarkingConfig()
        self.extractor = extractor or KeywordExtractor(self.config)
        self._bullet_chars = "".join(self.config.bullet_markers)

    def parse(self, text: str) -> list[MarkingPoint]:
        """Parse a mark scheme.

        Args:
            text: Raw mark scheme text, one criterion per bullet line

        Returns:
            Marking points in source order (empty if there are no bullets)
        """
        points: list[MarkingPoint] = []

        for line in text.splitlines():
            if not line.strip() or self._is_header(line) or not self._is_bullet(line):
                continue

            point = self._parse_line(line)
            if point is None:
                logger.debug(f"Dropping criterion without keywords: {line.strip()!r}")
                continue
            points.append(point)

        if not points:
            logger.warning("Mark scheme contains no scoreable bullet points")
        else:
            logger.debug(f"Parsed {len(points)} marking points")
        return points

    def _is_header(self, line: str) -> bool:
        lowered = line.lower()
        return any(marker in lowered for marker in self.config.header_markers)

    def _is_bullet(self, line: str) -> bool:
        return line.lstrip().startswith(self.config.bullet_markers)

    def _parse_line(self, line: str) -> MarkingPoint | None:
        cleaned = line.lstrip().lstrip(self._bullet_chars + " \t").strip()

        marks = self.config.default_marks
        description = cleaned
        annotation = MARK_ANNOTATION.search(cleaned)
        if annotation:
            value = int(annotation.group(1))
            if value >= 1:
                marks = value
            description = MARK_ANNOTATION.sub("", cleaned).strip()

        keywords = self.extractor.extract(description)
        if not keywords:
            return None
        return MarkingPoint(description=description, keywords=keywords, marks=marks)


_default_parser = MarkSchemeParser()


def parse_mark_scheme(text: str) -> list[MarkingPoint]:
    """Parse a mark scheme using the default configuration."""
    return _default_parser.parse(text)
