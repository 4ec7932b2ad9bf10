"""Exception types raised by the quiz service and the session controller."""

from __future__ import annotations


class QuizServiceError(Exception):
    """Raised by a quiz service when a call fails for transport or server reasons."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NoActiveAttempt(QuizServiceError):
    """The server has no running attempt for this participant."""


class QuizSessionError(Exception):
    """Base class for errors surfaced by the session controller."""


class IdentityMissing(QuizSessionError):
    """The participant identity could not be resolved."""


class SessionStartFailed(QuizSessionError):
    """The quiz service refused or failed to begin an attempt."""


class AnswerSubmitFailed(QuizSessionError):
    """An answer could not be submitted; the current question is kept."""


class SessionNotFinished(QuizSessionError):
    """A report was requested before the attempt finished."""
