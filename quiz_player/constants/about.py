"""Static metadata describing QuizPlayer."""

APP_NAME = "QuizPlayer"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizPlayer is a Qt client for taking timed multiple-choice quizzes "
    "served by a remote quiz backend."
)
