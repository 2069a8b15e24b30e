"""
Database entities, one module per table group.

Importing this package registers every table on ``Base.metadata``.
"""

from .exchange_requests import ExchangeRequest, ExchangeStatus
from .feedback import ExchangeFeedback
from .messages import Message
from .quizzes import Quiz, QuizAttempt, QuizDifficulty
from .users import User

REQUIRED_TABLES = (
    "users",
    "exchange_requests",
    "exchange_feedback",
    "messages",
    "quizzes",
    "quiz_attempts",
)

__all__ = [
    "REQUIRED_TABLES",
    "ExchangeFeedback",
    "ExchangeRequest",
    "ExchangeStatus",
    "Message",
    "Quiz",
    "QuizAttempt",
    "QuizDifficulty",
    "User",
]
