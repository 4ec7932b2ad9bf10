from __future__ import annotations

import os

import pytest

from quiz_player.core.errors import QuizServiceError
from quiz_player.core.models import AnswerResult, Question
from quiz_player.core.quiz_session_controller import QuizSessionController, SessionListener
from quiz_player.core.services.identity import InMemoryIdentityStore
from quiz_player.core.services.session_clock import ManualSessionClock

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


QUESTION_A = Question(
    id="qa",
    quiz_id="quiz1",
    prompt="What is 2 + 2?",
    options=("3", "4", "5"),
    correct_option_index=1,
)
QUESTION_B = Question(
    id="qb",
    quiz_id="quiz1",
    prompt="Capital of France?",
    options=("Paris", "Rome"),
    correct_option_index=0,
)


class FakeQuizService:
    """Scripted quiz service; each queued outcome is a result or an exception."""

    def __init__(self) -> None:
        self.start_outcomes: list[Question | Exception] = []
        self.answer_outcomes: list[AnswerResult | Exception] = []
        self.begin_calls: list[tuple[str, str]] = []
        self.answer_calls: list[tuple[str, str, int]] = []
        self.on_submit = None

    def begin_attempt(self, quiz_id: str, participant: str) -> Question:
        self.begin_calls.append((quiz_id, participant))
        outcome = self.start_outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def submit_answer(self, quiz_id: str, participant: str, answer_index: int) -> AnswerResult:
        self.answer_calls.append((quiz_id, participant, answer_index))
        if self.on_submit is not None:
            self.on_submit()
        outcome = self.answer_outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class RecordingListener(SessionListener):
    def __init__(self) -> None:
        self.questions = []
        self.ticks = []
        self.recorded = []
        self.finished = []
        self.errors = []

    def on_question(self, question):
        self.questions.append(question)

    def on_tick(self, seconds_remaining):
        self.ticks.append(seconds_remaining)

    def on_answer_recorded(self, answered):
        self.recorded.append(answered)

    def on_finished(self, report, already_finished):
        self.finished.append((report, already_finished))

    def on_error(self, error):
        self.errors.append(error)


@pytest.fixture
def service() -> FakeQuizService:
    return FakeQuizService()


@pytest.fixture
def identity() -> InMemoryIdentityStore:
    return InMemoryIdentityStore("alice")


@pytest.fixture
def clock() -> ManualSessionClock:
    return ManualSessionClock()


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def controller(service, identity, clock, listener) -> QuizSessionController:
    return QuizSessionController(
        quiz_service=service,
        identity_provider=identity,
        clock=clock,
        listener=listener,
    )


def transport_error() -> QuizServiceError:
    return QuizServiceError("Connection refused")
