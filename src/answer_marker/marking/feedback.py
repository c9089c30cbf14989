"""Feedback generation for marked answers."""

from collections.abc import Sequence

from ..config.models import MarkingConfig, PerformanceBand
from .scheme import MarkingPoint

MATCHED_SYMBOL = "✓"
MISSED_SYMBOL = "✗"


class FeedbackGenerator:
    """Renders the score header, point breakdown, and performance comment."""

    def __init__(self, config: MarkingConfig | None = None):
        """Initialize the feedback generator.

        Args:
            config: Marking configuration providing the performance bands
        """
        self.config = config or MarkingConfig()

    def band_for(self, percentage: float) -> PerformanceBand:
        """Select the performance band for a percentage score.

        Args:
            percentage: Marks awarded as a percentage of marks available

        Returns:
            The highest band whose threshold the percentage reaches
        """
        for band in self.config.bands:
            if percentage >= band.min_percentage:
                return band
        return self.config.bands[-1]

    def render(
        self,
        marks_awarded: int,
        marks_available: int,
        matched: Sequence[MarkingPoint],
        missed: Sequence[MarkingPoint],
    ) -> str:
        """Build the feedback text shown to the candidate.

        Args:
            marks_awarded: Capped marks awarded
            marks_available: Maximum marks for the question
            matched: Points the answer covered, in mark scheme order
            missed: Points the answer did not cover, in mark scheme order

        Returns:
            Multi-line feedback text
        """
        parts = [f"Score: {marks_awarded}/{marks_available} marks\n\n"]

        if matched:
            lines = [f"{MATCHED_SYMBOL} {point.label}" for point in matched]
            parts.append("Points awarded:\n" + "\n".join(lines) + "\n\n")

        if missed:
            lines = [f"{MISSED_SYMBOL} {point.label}" for point in missed]
            parts.append("Points to improve:\n" + "\n".join(lines) + "\n\n")

        percentage = marks_awarded / marks_available * 100
        parts.append(self.band_for(percentage).message)

        return "".join(parts)
