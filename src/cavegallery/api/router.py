"""API router registration."""

from fastapi import APIRouter

from . import paintings

router = APIRouter(prefix="/api")

router.include_router(paintings.router)
