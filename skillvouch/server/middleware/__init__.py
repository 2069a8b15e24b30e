"""
Middleware modules for the SkillVouch server.

This package contains custom middleware for request/response logging
and performance tracking.
"""

from .logfire_middleware import LogfireMiddleware

__all__ = ["LogfireMiddleware"]
