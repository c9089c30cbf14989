"""
Request/response codec for the marking endpoint.

Maps the JSON payloads exchanged with the question store and UI onto the
marking engine. The HTTP transport itself lives outside this package; each
handler returns the status code the transport must send with the body.
"""

import json
from dataclasses import dataclass
from typing import Any

from .marking.engine import MarkingEngine
from .marking.errors import InvalidInputError
from .utils.logging import get_logger

logger = get_logger(__name__)

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_SERVER_ERROR = 500

MISSING_FIELDS_MESSAGE = "Missing required fields"
RETRY_FEEDBACK = "An error occurred during marking. Please try again."


@dataclass
class MarkingRequest:
    """Incoming marking request."""

    user_answer: Any
    mark_scheme: Any
    marks_available: Any
    question_text: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MarkingRequest":
        marks = data.get("marksAvailable")
        # JSON clients may send 2.0 for 2.
        if isinstance(marks, float) and marks.is_integer():
            marks = int(marks)
        question = data.get("questionText")
        return cls(
            user_answer=data.get("userAnswer"),
            mark_scheme=data.get("markScheme"),
            marks_available=marks,
            question_text="" if question is None else str(question),
        )

    @property
    def is_complete(self) -> bool:
        """Whether every required field is present and non-empty."""
        return bool(self.user_answer and self.mark_scheme and self.marks_available)


@dataclass
class MarkingResponse:
    """Outgoing marking response."""

    success: bool
    marks_awarded: int | None = None
    feedback: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"success": self.success}
        if self.error is not None:
            data["error"] = self.error
        if self.marks_awarded is not None:
            data["marksAwarded"] = self.marks_awarded
        if self.feedback is not None:
            data["feedback"] = self.feedback
        return data


_default_engine: MarkingEngine | None = None


def _get_engine(engine: MarkingEngine | None) -> MarkingEngine:
    global _default_engine
    if engine is not None:
        return engine
    if _default_engine is None:
        _default_engine = MarkingEngine()
    return _default_engine


def handle_marking_request(
    payload: dict[str, Any],
    engine: MarkingEngine | None = None,
) -> tuple[int, dict[str, Any]]:
    """Grade a decoded request payload.

    Args:
        payload: Decoded JSON object with userAnswer, markScheme,
            marksAvailable and questionText
        engine: Engine to grade with (a shared default if omitted)

    Returns:
        Tuple of (HTTP status code, JSON-serializable response body)
    """
    try:
        request = MarkingRequest.from_dict(payload)
        if not request.is_complete:
            return HTTP_BAD_REQUEST, MarkingResponse(
                success=False, error=MISSING_FIELDS_MESSAGE
            ).to_dict()

        result = _get_engine(engine).grade(
            request.user_answer,
            request.mark_scheme,
            request.marks_available,
            request.question_text,
        )
    except InvalidInputError as exc:
        logger.info(f"Rejected marking request: {exc}")
        return HTTP_BAD_REQUEST, MarkingResponse(success=False, error=str(exc)).to_dict()
    except Exception as exc:
        logger.error(f"Marking request failed: {exc}")
        return HTTP_SERVER_ERROR, MarkingResponse(
            success=False,
            error=str(exc) or "Unknown error",
            marks_awarded=0,
            feedback=RETRY_FEEDBACK,
        ).to_dict()

    return HTTP_OK, MarkingResponse(
        success=True,
        marks_awarded=result.marks_awarded,
        feedback=result.feedback,
    ).to_dict()


def handle_raw_request(
    body: str | bytes,
    engine: MarkingEngine | None = None,
) -> tuple[int, dict[str, Any]]:
    """Decode a JSON request body and grade it.

    Bodies that are not valid JSON objects are reported as server errors,
    matching the behaviour clients already handle.
    """
    try:
        payload = json.loads(body)
        if not isinstance(payload, dict):
            raise ValueError("Request body must be a JSON object")
    except ValueError as exc:
        logger.error(f"Could not decode marking request: {exc}")
        return HTTP_SERVER_ERROR, MarkingResponse(
            success=False,
            error=str(exc),
            marks_awarded=0,
            feedback=RETRY_FEEDBACK,
        ).to_dict()

    return handle_marking_request(payload, engine)
