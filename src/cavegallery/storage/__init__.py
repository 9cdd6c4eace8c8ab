"""Storage layer."""

from .painting_store import PaintingStore

__all__ = ["PaintingStore"]
