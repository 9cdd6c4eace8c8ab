"""API layer."""

from .images import router as images_router
from .router import router

__all__ = ["router", "images_router"]
