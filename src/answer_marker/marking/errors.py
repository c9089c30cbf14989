"""Exceptions raised by the marking engine."""


class MarkingError(Exception):
    """Base exception for marking errors."""

    pass


class InvalidInputError(MarkingError):
    """A required grading input is missing, empty, or out of range."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class UnexpectedFailureError(MarkingError):
    """An internal error occurred while parsing, matching, or rendering."""

    pass
