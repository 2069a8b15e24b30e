"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS
and request logging), registers the exception handlers and includes all API
routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillvouch import __version__
from skillvouch.core.database import db_monitor, engine
from skillvouch.core.logging_config import get_logger, setup_logging
from skillvouch.core.monitoring import initialize_logfire

from .api import ai, conversations, exchange_requests, feedback, health, messages, quizzes, users
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import LogfireMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    On startup the connection monitor makes its first attempt (creating any
    missing tables when the database answers) and keeps retrying and polling
    in the background. The server starts either way; data endpoints answer
    503 until the database is reachable.
    """
    setup_logging()
    logger.info(f"Starting up {constant.PROJECT_NAME} ({settings.environment})...")
    initialize_logfire(app=app, engine=engine)

    connected = await db_monitor.start()
    if connected:
        logger.info("Database ready")
    else:
        logger.warning("Database unavailable at startup; retrying in the background")

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME}...")
    await db_monitor.stop()
    await engine.dispose()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    SkillVouch API

    Backend of the SkillVouch skill-exchange platform: user profiles, exchange
    requests, messaging, feedback, quizzes and AI-generated learning content.
    """,
    version=__version__,
    openapi_url=f"{constant.API_PREFIX}/openapi.json",
    docs_url=f"{constant.API_PREFIX}/docs",
    redoc_url=f"{constant.API_PREFIX}/redoc",
    lifespan=lifespan,
)

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=["*"],
)
app.add_middleware(LogfireMiddleware)

setup_exception_handlers(app)

app.include_router(health.router)
app.include_router(ai.router)
app.include_router(users.router, prefix=constant.API_PREFIX)
app.include_router(messages.router, prefix=constant.API_PREFIX)
app.include_router(conversations.router, prefix=constant.API_PREFIX)
app.include_router(exchange_requests.router, prefix=constant.API_PREFIX)
app.include_router(feedback.router, prefix=constant.API_PREFIX)
app.include_router(quizzes.router, prefix=constant.API_PREFIX)


def run() -> None:
    """Run the API server with uvicorn on the configured host and port."""
    uvicorn.run(
        "skillvouch.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
