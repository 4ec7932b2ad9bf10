"""Qt main window that plays one quiz attempt and shows its review."""

from __future__ import annotations

from functools import partial

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_player.constants.quiz_constants import NO_ANSWER
from quiz_player.constants.ui_constants import (
    BACK_BUTTON,
    ERROR_TITLE,
    IDENTITY_MISSING_MESSAGE,
    LOADING_MESSAGE,
    QUIZ_ALREADY_FINISHED_MESSAGE,
    QUIZ_COMPLETE_MESSAGE,
    QUIZ_COMPLETE_TITLE,
    RESUME_BUTTON,
    START_FAILED_MESSAGE,
    SUBMIT_FAILED_MESSAGE,
    TIMER_TEMPLATE,
    WINDOW_TITLE,
)
from quiz_player.core.errors import AnswerSubmitFailed, IdentityMissing, QuizSessionError, SessionStartFailed
from quiz_player.core.html_renderer import render_question, render_review
from quiz_player.core.models import Question, SessionReport
from quiz_player.core.quiz_session_controller import QuizSessionController, SessionListener
from quiz_player.ui.dialog_helpers import ask_retry, show_error, show_info


class QuizPlayerWindow(QMainWindow, SessionListener):
    """Loading, question and review pages for a single quiz."""

    def __init__(self, controller: QuizSessionController, quiz_id: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(WINDOW_TITLE)
        self.controller = controller
        self.quiz_id = quiz_id
        self._option_buttons: list[QPushButton] = []

        self._build_ui()
        self.controller.set_listener(self)

    def _build_ui(self) -> None:
        self.stack = QStackedWidget(self)
        self.setCentralWidget(self.stack)

        self.loading_page = QLabel(LOADING_MESSAGE, self)
        self.loading_page.setAlignment(Qt.AlignCenter)
        self.stack.addWidget(self.loading_page)

        self.question_page = QWidget(self)
        question_layout = QVBoxLayout()
        self.question_page.setLayout(question_layout)
        self.timer_label = QLabel("", self.question_page)
        self.timer_label.setAlignment(Qt.AlignCenter)
        question_layout.addWidget(self.timer_label)
        self.prompt_view = QWebEngineView(self.question_page)
        question_layout.addWidget(self.prompt_view, stretch=1)
        self.options_layout = QVBoxLayout()
        question_layout.addLayout(self.options_layout)
        self.resume_button = QPushButton(RESUME_BUTTON, self.question_page)
        self.resume_button.setVisible(False)
        self.resume_button.clicked.connect(self._handle_resume)
        question_layout.addWidget(self.resume_button)
        self.stack.addWidget(self.question_page)

        self.review_page = QWidget(self)
        review_layout = QVBoxLayout()
        self.review_page.setLayout(review_layout)
        self.review_view = QWebEngineView(self.review_page)
        review_layout.addWidget(self.review_view, stretch=1)
        back_button = QPushButton(BACK_BUTTON, self.review_page)
        back_button.clicked.connect(self.close)
        review_layout.addWidget(back_button)
        self.stack.addWidget(self.review_page)

    def start_quiz(self) -> None:
        self.stack.setCurrentWidget(self.loading_page)
        try:
            self.controller.start(self.quiz_id)
        except IdentityMissing:
            show_error(self, ERROR_TITLE, IDENTITY_MISSING_MESSAGE)
        except SessionStartFailed:
            show_error(self, ERROR_TITLE, START_FAILED_MESSAGE)

    # --- SessionListener hooks ---

    def on_question(self, question: Question) -> None:
        self.prompt_view.setHtml(render_question(question))
        self._rebuild_option_buttons(question)
        self.resume_button.setVisible(False)
        self._update_timer_label(self.controller.time_remaining)
        self.stack.setCurrentWidget(self.question_page)

    def on_tick(self, seconds_remaining: int) -> None:
        self._update_timer_label(seconds_remaining)

    def on_finished(self, report: SessionReport, already_finished: bool) -> None:
        self.review_view.setHtml(render_review(report))
        self.stack.setCurrentWidget(self.review_page)
        message = QUIZ_ALREADY_FINISHED_MESSAGE if already_finished else QUIZ_COMPLETE_MESSAGE
        # Defer the modal dialog until the submission handler has returned.
        QTimer.singleShot(0, partial(show_info, self, QUIZ_COMPLETE_TITLE, message))

    def on_error(self, error: QuizSessionError) -> None:
        question = self.controller.current_question
        if isinstance(error, AnswerSubmitFailed) and question is not None:
            self._handle_submit_failure(NO_ANSWER, question.id)
        elif isinstance(error, IdentityMissing):
            show_error(self, ERROR_TITLE, IDENTITY_MISSING_MESSAGE)
        else:
            show_error(self, ERROR_TITLE, str(error))

    # --- Internals ---

    def _rebuild_option_buttons(self, question: Question) -> None:
        for button in self._option_buttons:
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self._option_buttons = []
        for index, option in enumerate(question.options):
            button = QPushButton(option, self.question_page)
            button.clicked.connect(partial(self._handle_option, index, question.id))
            self.options_layout.addWidget(button)
            self._option_buttons.append(button)

    def _update_timer_label(self, seconds: int) -> None:
        self.timer_label.setText(TIMER_TEMPLATE.format(seconds=seconds))

    def _set_options_enabled(self, enabled: bool) -> None:
        for button in self._option_buttons:
            button.setEnabled(enabled)

    def _handle_option(self, answer_index: int, question_id: str, *_: object) -> None:
        self._set_options_enabled(False)
        try:
            self.controller.submit_answer(answer_index, question_id=question_id)
        except IdentityMissing:
            show_error(self, ERROR_TITLE, IDENTITY_MISSING_MESSAGE)
        except AnswerSubmitFailed:
            self._handle_submit_failure(answer_index, question_id)
        finally:
            self._set_options_enabled(True)

    def _handle_submit_failure(self, answer_index: int, question_id: str) -> None:
        if ask_retry(self, ERROR_TITLE, SUBMIT_FAILED_MESSAGE):
            self._handle_option(answer_index, question_id)
        else:
            self.resume_button.setVisible(not self.controller.clock_running)

    def _handle_resume(self) -> None:
        if self.controller.resume_clock():
            self.resume_button.setVisible(False)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt override
        self.controller.abandon()
        super().closeEvent(event)
