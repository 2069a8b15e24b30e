"""
API routers for the SkillVouch server.

``health`` and ``ai`` declare their full paths; every other router is
mounted under ``/api``.
"""
