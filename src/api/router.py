"""API router aggregation."""

from fastapi import APIRouter

from src.api.health import router as health_router
from src.api.nodes import router as nodes_router

api_router = APIRouter()
api_router.include_router(health_router)
# Node lookup, batch resolution and context endpoints
api_router.include_router(nodes_router)
