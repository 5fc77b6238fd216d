"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from restyle.api import health, rewrite

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(rewrite.router)
