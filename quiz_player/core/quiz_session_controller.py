"""State machine governing a single timed quiz attempt."""

from __future__ import annotations

import logging

from quiz_player.constants.quiz_constants import MAX_SECONDS, NO_ANSWER
from quiz_player.core.errors import (
    AnswerSubmitFailed,
    IdentityMissing,
    NoActiveAttempt,
    QuizSessionError,
    SessionNotFinished,
    SessionStartFailed,
)
from quiz_player.core.models import (
    AnsweredQuestion,
    ControllerPhase,
    Question,
    SessionReport,
    SessionState,
)
from quiz_player.core.services.identity import IdentityProvider
from quiz_player.core.services.quiz_service import QuizService
from quiz_player.core.services.session_clock import SessionClock

logger = logging.getLogger(__name__)


class SessionListener:
    """Receives controller notifications. Override the hooks you need."""

    def on_question(self, question: Question) -> None:
        pass

    def on_tick(self, seconds_remaining: int) -> None:
        pass

    def on_answer_recorded(self, answered: AnsweredQuestion) -> None:
        pass

    def on_finished(self, report: SessionReport, already_finished: bool) -> None:
        pass

    def on_error(self, error: QuizSessionError) -> None:
        pass


class QuizSessionController:
    """Drives one quiz attempt: start, countdown, answer submission and review.

    The controller is meant to be driven from a single event loop. All
    mutations go through ``start``, ``submit_answer`` and the clock callbacks,
    each of which runs to completion before the next event is handled.
    Correctness is never judged locally; the quiz service is the authority and
    the controller only records its verdicts.
    """

    def __init__(
        self,
        quiz_service: QuizService,
        identity_provider: IdentityProvider,
        clock: SessionClock,
        listener: SessionListener | None = None,
        max_seconds: int = MAX_SECONDS,
    ) -> None:
        self._service = quiz_service
        self._identity = identity_provider
        self._clock = clock
        self._listener = listener or SessionListener()
        self._max_seconds = max_seconds
        self._state = SessionState()
        self._phase = ControllerPhase.IDLE

    # --- Read-only views ---

    @property
    def phase(self) -> ControllerPhase:
        return self._phase

    @property
    def quiz_id(self) -> str | None:
        return self._state.quiz_id

    @property
    def current_question(self) -> Question | None:
        return self._state.current_question

    @property
    def time_remaining(self) -> int:
        return self._state.time_remaining

    @property
    def finished(self) -> bool:
        return self._state.finished

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def clock_running(self) -> bool:
        return self._clock.is_armed

    @property
    def history(self) -> tuple[AnsweredQuestion, ...]:
        return tuple(self._state.history)

    def set_listener(self, listener: SessionListener | None) -> None:
        self._listener = listener or SessionListener()

    # --- Operations ---

    def start(self, quiz_id: str) -> Question:
        """Begin a fresh attempt of ``quiz_id`` and arm the clock for its first question."""
        if not quiz_id:
            raise ValueError("quiz_id must be a non-empty identifier.")
        participant = self._resolve_participant()

        self._clock.cancel()
        self._state = SessionState(quiz_id=quiz_id)
        self._phase = ControllerPhase.LOADING
        logger.info("Starting quiz %s for %s", quiz_id, participant)

        try:
            question = self._service.begin_attempt(quiz_id, participant)
        except Exception as exc:
            logger.warning("Could not start quiz %s: %s", quiz_id, exc)
            self._state = SessionState()
            self._phase = ControllerPhase.IDLE
            raise SessionStartFailed(f"Failed to start quiz {quiz_id!r}.") from exc

        self._install_question(question)
        return question

    def submit_answer(self, answer_index: int, question_id: str | None = None) -> bool:
        """Submit ``answer_index`` (or ``NO_ANSWER``) for the current question.

        Returns True when the server's verdict was recorded into the history.
        Returns False without side effects when there is nothing to answer:
        no current question, a submission already in flight, or a
        ``question_id`` that no longer matches the current question. Also
        returns False when the server reports that the attempt is already
        over, in which case the session is finished quietly.
        """
        state = self._state
        question = state.current_question
        if question is None or self._phase is not ControllerPhase.IN_PROGRESS:
            logger.debug("Ignoring answer %s: no question is awaiting an answer.", answer_index)
            return False
        if question_id is not None and question_id != question.id:
            logger.debug("Ignoring answer for stale question %s.", question_id)
            return False

        participant = self._resolve_participant()

        # A running clock means a manual tap; an expired one means a forced submission.
        clock_was_running = self._clock.is_armed
        self._clock.cancel()
        self._phase = ControllerPhase.SUBMITTING
        try:
            result = self._service.submit_answer(state.quiz_id, participant, answer_index)
        except NoActiveAttempt as exc:
            if self._state is not state:
                return False
            logger.warning("Quiz %s has no active attempt; finishing session: %s", state.quiz_id, exc)
            self._finish(already_finished=True)
            return False
        except Exception as exc:
            if self._state is not state:
                return False
            logger.warning("Answer submission for question %s failed: %s", question.id, exc)
            self._phase = ControllerPhase.IN_PROGRESS
            if clock_was_running:
                # Continue the same countdown from where it stopped.
                self._arm_clock(question)
            raise AnswerSubmitFailed(f"Failed to submit answer for question {question.id!r}.") from exc

        if self._state is not state:
            # Attempt was abandoned or restarted while the request was in flight.
            return False

        answered = AnsweredQuestion(question=question, user_answer=answer_index, is_correct=result.is_correct)
        state.history.append(answered)
        if answered.is_correct:
            state.score += 1
        self._listener.on_answer_recorded(answered)

        if result.next_question is not None:
            self._install_question(result.next_question)
        else:
            self._finish(already_finished=False)
        return True

    def resume_clock(self) -> bool:
        """Re-arm the countdown after a failed forced submission left it stopped."""
        question = self._state.current_question
        if question is None or self._phase is not ControllerPhase.IN_PROGRESS or self._clock.is_armed:
            return False
        self._arm_clock(question)
        return True

    def abandon(self) -> None:
        """Discard the attempt, e.g. when the quiz screen is left."""
        self._clock.cancel()
        if self._state.quiz_id is not None:
            logger.info("Abandoning quiz %s", self._state.quiz_id)
        self._state = SessionState()
        self._phase = ControllerPhase.IDLE

    def report(self) -> SessionReport:
        """Return the score and review of the finished attempt."""
        if not self._state.finished or self._state.quiz_id is None:
            raise SessionNotFinished("The quiz session has not finished yet.")
        return SessionReport.from_history(self._state.quiz_id, self._state.score, self._state.history)

    # --- Internals ---

    def _resolve_participant(self) -> str:
        participant = self._identity.get_current_participant_identity()
        if not participant:
            raise IdentityMissing("Participant identity could not be resolved.")
        return participant

    def _install_question(self, question: Question) -> None:
        self._state.current_question = question
        self._state.time_remaining = self._max_seconds
        self._phase = ControllerPhase.IN_PROGRESS
        self._listener.on_question(question)
        self._arm_clock(question)

    def _arm_clock(self, question: Question) -> None:
        self._clock.arm(
            self._state.time_remaining,
            self._handle_tick,
            lambda: self._handle_expired(question.id),
        )

    def _handle_tick(self, seconds_remaining: int) -> None:
        logger.debug("%d seconds left", seconds_remaining)
        self._state.time_remaining = seconds_remaining
        self._listener.on_tick(seconds_remaining)

    def _handle_expired(self, question_id: str) -> None:
        logger.info("Time expired for question %s; submitting without an answer.", question_id)
        try:
            self.submit_answer(NO_ANSWER, question_id=question_id)
        except QuizSessionError as exc:
            self._listener.on_error(exc)

    def _finish(self, already_finished: bool) -> None:
        self._clock.cancel()
        self._state.current_question = None
        self._state.finished = True
        self._phase = ControllerPhase.FINISHED
        report = self.report()
        logger.info(
            "Quiz %s finished with score %d/%d",
            report.quiz_id,
            report.score,
            report.total_answered,
        )
        self._listener.on_finished(report, already_finished)
