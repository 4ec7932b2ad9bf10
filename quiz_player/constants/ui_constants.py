"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "QuizPlayer"
LOADING_MESSAGE: str = "Loading..."
TIMER_TEMPLATE: str = "Time left: {seconds} seconds"
SCORE_TEMPLATE: str = "Your Score: {score} / {total}"
REVIEW_TITLE: str = "Review your answers:"
BACK_BUTTON: str = "Back to Quizzes"
RETRY_BUTTON: str = "Retry"
RESUME_BUTTON: str = "Resume Timer"
NO_ANSWER_TEXT: str = "(no answer)"

QUIZ_COMPLETE_TITLE: str = "Quiz Completed"
QUIZ_COMPLETE_MESSAGE: str = "You have answered all questions!"
QUIZ_ALREADY_FINISHED_MESSAGE: str = "Quiz has already been finished!"

ERROR_TITLE: str = "Error"
IDENTITY_MISSING_MESSAGE: str = "User name not found"
START_FAILED_MESSAGE: str = "Failed to start the quiz"
SUBMIT_FAILED_MESSAGE: str = "Failed to submit answer"
