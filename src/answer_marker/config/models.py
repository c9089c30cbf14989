"""Configuration data models."""

from dataclasses import dataclass, field
from typing import Any

DEFAULT_STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "is", "are", "was", "were", "been", "be", "have", "has",
        "had",
    }
)

# Closed vocabulary of multi-word domain phrases (GCSE computer science).
DEFAULT_DOMAIN_PHRASES = (
    "volatile memory",
    "non-volatile",
    "read only",
    "von neumann",
    "stored program",
    "fetch execute",
    "logic gate",
    "truth table",
    "data type",
    "memory management",
    "file management",
    "operating system",
    "denial of service",
    "local area network",
    "wide area network",
    "ip address",
    "mac address",
    "binary number",
    "hexadecimal",
    "character encoding",
    "lossy compression",
    "lossless compression",
)

PARTIAL_MATCH_THRESHOLD = 0.75
MIN_FUZZY_KEYWORD_LENGTH = 4


@dataclass(frozen=True)
class PerformanceBand:
    """A feedback tier selected by the percentage of marks awarded."""

    min_percentage: float
    message: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PerformanceBand":
        return cls(
            min_percentage=float(data["min_percentage"]),
            message=data["message"],
        )


DEFAULT_BANDS = (
    PerformanceBand(100, "Excellent work! You've covered all key points."),
    PerformanceBand(75, "Good answer! Consider adding more detail to improve further."),
    PerformanceBand(50, "Decent attempt. Review the mark scheme and add more specific points."),
    PerformanceBand(
        25,
        "Basic understanding shown. Work on including more key points from the mark scheme.",
    ),
    PerformanceBand(
        0,
        "More detail needed. Review the topic and ensure you address the question fully.",
    ),
)


@dataclass(frozen=True)
class MarkingConfig:
    """Vocabularies and tuning constants shared by every grading call.

    Instances are immutable; build one at startup and pass it to the
    marking components.
    """

    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
    domain_phrases: tuple[str, ...] = DEFAULT_DOMAIN_PHRASES
    min_token_length: int = 3
    partial_match_threshold: float = PARTIAL_MATCH_THRESHOLD
    min_fuzzy_keyword_length: int = MIN_FUZZY_KEYWORD_LENGTH
    bullet_markers: tuple[str, ...] = ("-", "•")
    header_markers: tuple[str, ...] = ("mark scheme", "award 1 mark")
    default_marks: int = 1
    bands: tuple[PerformanceBand, ...] = field(default=DEFAULT_BANDS)

    def __post_init__(self) -> None:
        if not 0 < self.partial_match_threshold <= 1:
            raise ValueError(
                f"partial_match_threshold must be in (0, 1], got {self.partial_match_threshold}"
            )
        if self.min_fuzzy_keyword_length < 1:
            raise ValueError("min_fuzzy_keyword_length must be at least 1")
        if self.default_marks < 1:
            raise ValueError("default_marks must be at least 1")
        if not self.bands:
            raise ValueError("At least one performance band is required")

        # Band lookup walks from the highest threshold down.
        ordered = tuple(sorted(self.bands, key=lambda b: b.min_percentage, reverse=True))
        if ordered[-1].min_percentage > 0:
            raise ValueError("The lowest performance band must start at 0%")
        object.__setattr__(self, "bands", ordered)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MarkingConfig":
        stop_words = frozenset(
            w.lower() for w in data.get("stop_words", DEFAULT_STOP_WORDS)
        )
        stop_words |= {w.lower() for w in data.get("extra_stop_words", [])}

        phrases = [p.lower() for p in data.get("domain_phrases", DEFAULT_DOMAIN_PHRASES)]
        for phrase in data.get("extra_domain_phrases", []):
            if phrase.lower() not in phrases:
                phrases.append(phrase.lower())

        bands = DEFAULT_BANDS
        if "bands" in data:
            bands = tuple(PerformanceBand.from_dict(b) for b in data["bands"])

        return cls(
            stop_words=stop_words,
            domain_phrases=tuple(phrases),
            min_token_length=data.get("min_token_length", 3),
            partial_match_threshold=data.get("partial_match_threshold", PARTIAL_MATCH_THRESHOLD),
            min_fuzzy_keyword_length=data.get("min_fuzzy_keyword_length", MIN_FUZZY_KEYWORD_LENGTH),
            bullet_markers=tuple(data.get("bullet_markers", ("-", "•"))),
            header_markers=tuple(
                m.lower() for m in data.get("header_markers", ("mark scheme", "award 1 mark"))
            ),
            default_marks=data.get("default_marks", 1),
            bands=bands,
        )
