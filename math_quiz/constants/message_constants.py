"""User-facing console strings."""

WELCOME_MESSAGE: str = "Welcome to The Simple Math Test!"
RULES_MESSAGE_TEMPLATE: str = (
    "You will be asked {rounds} questions and have {minutes} to answer them."
)
DIFFICULTY_PROMPT: str = "Please choose a difficulty: easy, medium, or hard"
INVALID_DIFFICULTY_PROMPT: str = "Invalid choice. Please type 'easy', 'medium', or 'hard':"

QUESTION_TEMPLATE: str = "Question {number}: {problem}"
ANSWER_PROMPT: str = "Your answer: "
CORRECT_MESSAGE: str = "Correct!"
WRONG_MESSAGE_TEMPLATE: str = "Wrong! The correct answer was: {expected}"
TIME_UP_MESSAGE: str = "\nTime's up!"
GAME_OVER_TEMPLATE: str = "Game over! Your score: {score}/{max_rounds}"
