"""
SkillVouch HTTP server.

FastAPI application exposing the user, messaging, exchange request, feedback,
quiz and AI endpoints used by the SkillVouch frontend.
"""
