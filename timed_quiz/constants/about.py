"""Static metadata describing TimedQuiz."""

APP_NAME = "TimedQuiz"
APP_VERSION = "0.1"
APP_ORGANIZATION = "TimedQuiz"
