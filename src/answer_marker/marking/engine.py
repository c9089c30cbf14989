"""Marking engine: grades a free-text answer against a mark scheme."""

from dataclasses import dataclass, field
from typing import Any

from ..config.models import MarkingConfig
from ..utils.logging import get_logger
from .errors import InvalidInputError, UnexpectedFailureError
from .feedback import FeedbackGenerator
from .keywords import KeywordExtractor
from .matcher import FuzzyMatcher
from .scheme import MarkingPoint, MarkSchemeParser

logger = get_logger(__name__)


@dataclass(frozen=True)
class MarkingResult:
    """Result of grading one answer."""

    marks_awarded: int
    marks_available: int
    feedback: str
    matched: tuple[MarkingPoint, ...] = field(default_factory=tuple)
    missed: tuple[MarkingPoint, ...] = field(default_factory=tuple)

    @property
    def percentage(self) -> float:
        """Get the score as a percentage."""
        return (self.marks_awarded / self.marks_available) * 100


class MarkingEngine:
    """Scores answers against mark schemes and synthesizes feedback.

    The engine holds only read-only configuration, so one instance can be
    shared freely between threads.
    """

    def __init__(self, config: MarkingConfig | None = None):
        """Initialize the engine and its components.

        Args:
            config: Marking vocabularies and thresholds
        """
        self.config = config or MarkingConfig()
        self.extractor = KeywordExtractor(self.config)
        self.parser = MarkSchemeParser(self.config, self.extractor)
        self.matcher = FuzzyMatcher(self.config)
        self.feedback = FeedbackGenerator(self.config)

    def grade(
        self,
        answer_text: str,
        mark_scheme_text: str,
        marks_available: int,
        question_text: str = "",
    ) -> MarkingResult:
        """Grade an answer.

        Args:
            answer_text: The candidate's answer
            mark_scheme_text: Raw mark scheme with one bullet per criterion
            marks_available: Maximum marks for the question
            question_text: The question, kept for context only

        Returns:
            MarkingResult with capped marks and feedback

        Raises:
            InvalidInputError: If a required input is missing or invalid
            UnexpectedFailureError: If marking fails for any other reason
        """
        self._validate(answer_text, mark_scheme_text, marks_available)

        if question_text:
            logger.debug("Grading answer for question: %r", question_text)

        try:
            return self._mark(answer_text, mark_scheme_text, marks_available)
        except Exception as exc:
            logger.exception("Unexpected error while marking answer")
            raise UnexpectedFailureError(str(exc) or exc.__class__.__name__) from exc

    def _mark(self, answer_text: str, mark_scheme_text: str, marks_available: int) -> MarkingResult:
        answer = answer_text.lower().strip()
        points = self.parser.parse(mark_scheme_text.lower())

        matched: list[MarkingPoint] = []
        missed: list[MarkingPoint] = []
        for point in points:
            if self.matcher.matches_any(answer, point.match_terms):
                matched.append(point)
            else:
                missed.append(point)

        total = sum(point.marks for point in matched)
        # Schemes may list more criteria than the question's ceiling.
        marks_awarded = min(total, marks_available)

        logger.debug(
            f"Matched {len(matched)}/{len(points)} points: "
            f"{total} raw marks, {marks_awarded}/{marks_available} awarded"
        )

        return MarkingResult(
            marks_awarded=marks_awarded,
            marks_available=marks_available,
            feedback=self.feedback.render(marks_awarded, marks_available, matched, missed),
            matched=tuple(matched),
            missed=tuple(missed),
        )

    @staticmethod
    def _validate(answer_text: Any, mark_scheme_text: Any, marks_available: Any) -> None:
        if not isinstance(answer_text, str) or not answer_text.strip():
            raise InvalidInputError("Answer text must be a non-empty string", field="userAnswer")
        if not isinstance(mark_scheme_text, str) or not mark_scheme_text.strip():
            raise InvalidInputError("Mark scheme must be a non-empty string", field="markScheme")
        if (
            isinstance(marks_available, bool)
            or not isinstance(marks_available, int)
            or marks_available < 1
        ):
            raise InvalidInputError(
                f"marksAvailable must be a positive integer, got {marks_available!r}",
                field="marksAvailable",
            )


_default_engine = MarkingEngine()


def grade(
    answer_text: str,
    mark_scheme_text: str,
    marks_available: int,
    question_text: str = "",
) -> MarkingResult:
    """Grade an answer with the default configuration."""
    return _default_engine.grade(answer_text, mark_scheme_text, marks_available, question_text)
