"""
Repositories for the SkillVouch tables.

Each repository wraps an ``AsyncSession`` and exposes the queries one
resource's endpoints need.
"""

from .base import AsyncBaseRepository, QueryBuilder
from .exchange_requests import ExchangeRequestRepository
from .feedback import FeedbackRepository
from .messages import ConversationSummary, MessageRepository
from .quizzes import QuizAttemptRepository, QuizRepository, score_answers
from .users import UserRepository

__all__ = [
    "AsyncBaseRepository",
    "QueryBuilder",
    "ConversationSummary",
    "ExchangeRequestRepository",
    "FeedbackRepository",
    "MessageRepository",
    "QuizAttemptRepository",
    "QuizRepository",
    "UserRepository",
    "score_answers",
]
