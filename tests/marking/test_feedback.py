"""
Unit tests for FeedbackGenerator.

Tests performance band selection and feedback layout.
"""

import pytest

from answer_marker.config import MarkingConfig, PerformanceBand
from answer_marker.marking.feedback import FeedbackGenerator
from answer_marker.marking.scheme import MarkingPoint


RAM_POINT = MarkingPoint(
    description="explains ram is volatile memory",
    keywords=("explains", "ram", "volatile", "memory", "volatile memory"),
)
ROM_POINT = MarkingPoint(
    description="explains rom is non-volatile",
    keywords=("explains", "rom", "non", "volatile", "non-volatile"),
    marks=2,
)


class TestBandFor:
    """Tests for performance band selection."""

    @pytest.mark.parametrize(
        "percentage, expected_start",
        [
            (100, "Excellent work!"),
            (99.9, "Good answer!"),
            (75, "Good answer!"),
            (74.9, "Decent attempt."),
            (50, "Decent attempt."),
            (25, "Basic understanding shown."),
            (24.9, "More detail needed."),
            (0, "More detail needed."),
        ],
    )
    def test_band_for_when_percentage_then_selects_tier(self, percentage, expected_start):
        """Each threshold selects its tier, inclusive of the threshold."""
        band = FeedbackGenerator().band_for(percentage)
        assert band.message.startswith(expected_start)

    def test_band_for_when_custom_bands_then_uses_them(self):
        """Configured bands replace the defaults."""
        config = MarkingConfig(
            bands=(PerformanceBand(0, "Keep going."), PerformanceBand(60, "Pass."))
        )
        generator = FeedbackGenerator(config)

        assert generator.band_for(60).message == "Pass."
        assert generator.band_for(59).message == "Keep going."


class TestRender:
    """Tests for feedback text layout."""

    def test_render_when_matched_and_missed_then_both_blocks(self):
        """Matched and missed points are listed under their headings."""
        feedback = FeedbackGenerator().render(1, 3, [RAM_POINT], [ROM_POINT])

        assert feedback == (
            "Score: 1/3 marks\n\n"
            "Points awarded:\n"
            "✓ explains ram is volatile memory (1 mark)\n\n"
            "Points to improve:\n"
            "✗ explains rom is non-volatile (2 marks)\n\n"
            "Basic understanding shown. Work on including more key points from the mark scheme."
        )

    def test_render_when_all_matched_then_no_missed_block(self):
        """The missed block is omitted when nothing was missed."""
        feedback = FeedbackGenerator().render(3, 3, [RAM_POINT, ROM_POINT], [])

        assert "Points to improve" not in feedback
        assert feedback.endswith("Excellent work! You've covered all key points.")

    def test_render_when_no_points_then_header_and_band_only(self):
        """Without points only the score and band message remain."""
        feedback = FeedbackGenerator().render(0, 4, [], [])

        assert feedback == (
            "Score: 0/4 marks\n\n"
            "More detail needed. Review the topic and ensure you address the question fully."
        )
