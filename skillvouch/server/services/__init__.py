"""Shared dependencies for the SkillVouch API endpoints."""
