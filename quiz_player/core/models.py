"""Domain models for the quiz player."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from quiz_player.constants.quiz_constants import NO_ANSWER


class ControllerPhase(Enum):
    """Lifecycle phase of a single quiz attempt."""

    IDLE = auto()
    LOADING = auto()
    IN_PROGRESS = auto()
    SUBMITTING = auto()
    FINISHED = auto()


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice prompt handed out by the quiz service."""

    id: str
    quiz_id: str
    prompt: str
    options: tuple[str, ...]
    correct_option_index: int

    def option_text(self, index: int) -> str | None:
        """Return the option at ``index`` or None for the sentinel/out-of-range."""
        if 0 <= index < len(self.options):
            return self.options[index]
        return None


@dataclass(frozen=True, slots=True)
class AnsweredQuestion:
    """A question together with the submitted answer and the server's verdict."""

    question: Question
    user_answer: int
    is_correct: bool

    @property
    def timed_out(self) -> bool:
        return self.user_answer == NO_ANSWER


@dataclass(frozen=True, slots=True)
class AnswerResult:
    """Outcome of an answer submission as reported by the quiz service."""

    is_correct: bool
    next_question: Question | None = None


@dataclass(slots=True)
class SessionState:
    """Mutable working state of the controller for one attempt."""

    quiz_id: str | None = None
    current_question: Question | None = None
    time_remaining: int = 0
    finished: bool = False
    score: int = 0
    history: list[AnsweredQuestion] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ReviewEntry:
    """Self-contained row of the review screen."""

    prompt: str
    options: tuple[str, ...]
    user_answer: int
    user_answer_text: str | None
    correct_option_index: int
    correct_option_text: str | None
    is_correct: bool

    @classmethod
    def from_answered(cls, answered: AnsweredQuestion) -> ReviewEntry:
        question = answered.question
        return cls(
            prompt=question.prompt,
            options=question.options,
            user_answer=answered.user_answer,
            user_answer_text=question.option_text(answered.user_answer),
            correct_option_index=question.correct_option_index,
            correct_option_text=question.option_text(question.correct_option_index),
            is_correct=answered.is_correct,
        )


@dataclass(frozen=True, slots=True)
class SessionReport:
    """Final score and per-question review of a finished attempt."""

    quiz_id: str
    score: int
    total_answered: int
    entries: tuple[ReviewEntry, ...]

    @classmethod
    def from_history(cls, quiz_id: str, score: int, history: list[AnsweredQuestion]) -> SessionReport:
        return cls(
            quiz_id=quiz_id,
            score=score,
            total_answered=len(history),
            entries=tuple(ReviewEntry.from_answered(item) for item in history),
        )
