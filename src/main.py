"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.router import api_router
from src.config import settings
from src.db.turso import TursoClient
from src.repositories.node_repo import NodeRepository
from src.resolution.fuzzy_matcher import PathMatcher
from src.resolution.resolver import PathResolver
from src.services.context_bundler import ContextBundler

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def init_services(app: FastAPI, db: TursoClient) -> None:
    """Create the node repository and resolution services in app state."""
    node_repo = NodeRepository(db)
    path_resolver = PathResolver(node_repo=node_repo, matcher=PathMatcher())

    app.state.node_repo = node_repo
    app.state.path_resolver = path_resolver
    app.state.context_bundler = ContextBundler(path_resolver, node_repo)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management.

    Startup:
    - Connect to the node store and ensure its schema
    - Initialize resolution services

    Shutdown:
    - Close database connection
    """
    logger.info("Starting %s...", settings.app_name)

    db = TursoClient()
    await db.connect()
    app.state.db = db

    init_services(app, db)
    await app.state.node_repo.initialize()
    logger.info("Node repository initialized")

    yield

    logger.info("Shutting down %s...", settings.app_name)
    await db.close()


app = FastAPI(
    title=settings.app_name,
    description="Node lookup with fuzzy path resolution",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
