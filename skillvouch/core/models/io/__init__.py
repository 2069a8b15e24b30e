"""
I/O models for API requests and responses.

These schemas define the camelCase JSON contract between the endpoints and
the frontend. They are separate from the database entities so the storage
layout (JSON text columns, snake_case names) never leaks into responses.
"""

from .ai import AIPromptRequest, AIPromptResponse, RoadmapRequest, SkillSuggestRequest
from .base import CamelModel
from .exchange_requests import ExchangeRequestCreate, ExchangeRequestRead, ExchangeStatusUpdate
from .feedback import FeedbackCreate, FeedbackRead, FeedbackStats
from .messages import (
    ConversationRead,
    LastMessage,
    MarkAsReadRequest,
    MarkAsReadResponse,
    MessageCreate,
    MessageRead,
    UnreadCountResponse,
)
from .quizzes import QuizAttemptCreate, QuizAttemptRead, QuizGenerateRequest, QuizRead
from .users import LoginRequest, LoginResponse, UserCreate, UserRead, UserUpdate

__all__ = [
    "AIPromptRequest",
    "AIPromptResponse",
    "CamelModel",
    "ConversationRead",
    "ExchangeRequestCreate",
    "ExchangeRequestRead",
    "ExchangeStatusUpdate",
    "FeedbackCreate",
    "FeedbackRead",
    "FeedbackStats",
    "LastMessage",
    "LoginRequest",
    "LoginResponse",
    "MarkAsReadRequest",
    "MarkAsReadResponse",
    "MessageCreate",
    "MessageRead",
    "QuizAttemptCreate",
    "QuizAttemptRead",
    "QuizGenerateRequest",
    "QuizRead",
    "RoadmapRequest",
    "SkillSuggestRequest",
    "UnreadCountResponse",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
