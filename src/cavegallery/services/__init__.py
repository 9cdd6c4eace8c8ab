"""Service layer."""

from .painting_service import PaintingService

__all__ = ["PaintingService"]
