"""Application entry point for QuizPlayer."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from quiz_player.core.quiz_session_controller import QuizSessionController
from quiz_player.core.services.http_quiz_service import HttpQuizService
from quiz_player.core.services.identity import InMemoryIdentityStore
from quiz_player.ui.qt_clock import QtSessionClock
from quiz_player.ui.quiz_window import QuizPlayerWindow
from quiz_player.utils.cli import build_parser
from quiz_player.utils.logging_config import configure_logging


def main(argv: list[str] | None = None) -> None:
    """Initialize logging, wire the session controller, and launch the Qt UI."""
    args = build_parser().parse_args(argv)
    logger = configure_logging()
    logger.info("Starting QuizPlayer against %s", args.api_url)
    if args.timeout is None:
        logger.warning("No request timeout set; a hung backend will freeze the window.")

    app = QApplication(sys.argv[:1])
    identity_store = InMemoryIdentityStore(args.user)
    with HttpQuizService(args.api_url, timeout=args.timeout) as quiz_service:
        controller = QuizSessionController(
            quiz_service=quiz_service,
            identity_provider=identity_store,
            clock=QtSessionClock(app),
        )
        window = QuizPlayerWindow(controller=controller, quiz_id=args.quiz_id)
        window.show()
        window.start_quiz()
        exit_code = app.exec()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
