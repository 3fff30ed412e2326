"""
FastAPI application for the PR report.

Serves the rendered HTML report at "/" and the same data as JSON under
"/api/prs".
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from backend.routes import get_config, router
from utils.logger import setup_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Missing credentials must stop the server at startup, not on first request
    config = get_config()
    logger = setup_logger(config.log_level)
    logger.info(f"Serving PR report for GitHub user {config.credentials.github_username}")
    yield


# Create FastAPI app
app = FastAPI(
    title="PR Showcase",
    description="Open and merged pull requests of one GitHub user, with commit histories",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(router)
