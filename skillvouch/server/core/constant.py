"""Server-wide constants."""

PROJECT_NAME = "SkillVouch API"
API_PREFIX = "/api"

# Requests slower than this are logged as warnings by the request middleware.
SLOW_REQUEST_MS = 1000
