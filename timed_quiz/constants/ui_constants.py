"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "TimedQuiz"

WELCOME_TITLE: str = "Welcome to Quiz App"
WELCOME_SUBTITLE: str = "Start a Quiz"
WELCOME_BUTTON: str = "Click here"
WELCOME_RESUME_HINT: str = "Your previous progress will be restored."

QUESTION_TITLE_TEMPLATE: str = "Question No. {number}"
TIME_LEFT_TEMPLATE: str = "Time Left: {clock}"
PREV_BUTTON: str = "Previous"
NEXT_BUTTON: str = "Next"
SUBMIT_BUTTON: str = "Submit"

RESULT_TITLE: str = "Quiz Results"
RESULT_SCORE_TEMPLATE: str = "You scored {correct} out of {total}"
RESULT_PERCENTAGE_TEMPLATE: str = "Percentage: {percentage}"
RESULT_EXIT_HINT: str = "You Can exit the Test"
RESULT_EXIT_BUTTON: str = "Exit the window"

FULLSCREEN_REFUSED_TITLE: str = "Quiz not started"
FULLSCREEN_REFUSED_MESSAGE: str = (
    "The quiz could not switch to full-screen mode. Try again to start the quiz."
)
