"""Quiz service capability consumed by the session controller."""

from __future__ import annotations

from typing import Protocol

from quiz_player.core.models import AnswerResult, Question


class QuizService(Protocol):
    """Remote authority for attempts, questions and correctness.

    Implementations raise ``QuizServiceError`` on failure and its subclass
    ``NoActiveAttempt`` when an answer arrives for an attempt the server no
    longer tracks.
    """

    def begin_attempt(self, quiz_id: str, participant: str) -> Question:
        ...

    def submit_answer(self, quiz_id: str, participant: str, answer_index: int) -> AnswerResult:
        ...
