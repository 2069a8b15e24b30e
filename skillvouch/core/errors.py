"""Error types for the SkillVouch backend.

A small hierarchy of exceptions raised by the database and AI layers. The
server maps each of them to an HTTP response in ``exception_handlers``.
"""

from __future__ import annotations


class SkillVouchError(Exception):
    """Base error for all SkillVouch exceptions."""


class DatabaseUnavailableError(SkillVouchError):
    """Raised when a data operation is attempted while the database is unreachable."""

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        super().__init__("Database connection unavailable")


class AIServiceError(SkillVouchError):
    """Raised when the LLM provider could not produce a usable response."""

    def __init__(self, operation: str, message: str, attempts: int = 1) -> None:
        self.operation = operation
        self.attempts = attempts
        super().__init__(f"AI {operation} failed after {attempts} attempt(s): {message}")
