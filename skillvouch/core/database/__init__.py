"""
Database layer for SkillVouch.

Structure:
- entities/: SQLModel table models, one module per table group
- repositories/: data access layer wrapping parameterized statements
- health.py: connection-health monitor with retry/backoff and polling
- session.py: global engine, session factory and monitor
- utils.py: engine/session helpers and table checks
"""

from .base import Base
from .health import DatabaseHealthMonitor, DatabaseStatus
from .session import (
    async_session_maker,
    db_monitor,
    engine,
    get_db_monitor,
    get_session,
    init_db,
)
from .utils import (
    check_tables,
    create_engine,
    create_sessionmaker,
    ensure_tables,
    normalize_url,
)

__all__ = [
    "Base",
    "DatabaseHealthMonitor",
    "DatabaseStatus",
    "async_session_maker",
    "check_tables",
    "create_engine",
    "create_sessionmaker",
    "db_monitor",
    "engine",
    "ensure_tables",
    "get_db_monitor",
    "get_session",
    "init_db",
    "normalize_url",
]
