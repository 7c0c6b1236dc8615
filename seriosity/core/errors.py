from __future__ import annotations


class EvaluationError(Exception):
    """Base class for failures surfaced by the interview evaluation pipeline."""

    user_message = "Interview evaluation failed."

    def __init__(self, message: str = "", user_message: str | None = None) -> None:
        super().__init__(message or self.user_message)
        if user_message:
            self.user_message = user_message


class ValidationError(EvaluationError):
    """Required input is missing or malformed. Raised before any work starts."""

    user_message = "The submitted recording is missing or invalid."


class TranscriptionFailure(EvaluationError):
    """The transcription provider errored or returned unusable text."""

    user_message = "We could not understand the recording. Please record your answer again."


class NotFoundError(EvaluationError):
    """A referenced record does not exist at the point of persistence."""

    user_message = "The profile for this interview could not be found."


class InternalError(EvaluationError):
    user_message = "Something went wrong while scoring the interview."
