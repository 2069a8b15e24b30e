"""SkillVouch: backend service for a skill-exchange social platform."""

__version__ = "1.0.0"
