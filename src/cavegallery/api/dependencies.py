"""Shared dependencies for API endpoints."""

from typing import Annotated

from fastapi import Depends

from ..config import Settings, get_settings
from ..services import PaintingService
from ..storage import PaintingStore


def get_painting_store(settings: Annotated[Settings, Depends(get_settings)]) -> PaintingStore:
    """Get a painting store rooted at the configured paintings directory."""
    return PaintingStore(
        settings.paintings_dir,
        image_url_prefix=settings.image_url_prefix,
        default_artist=settings.default_artist,
    )


def get_painting_service(
    store: Annotated[PaintingStore, Depends(get_painting_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> PaintingService:
    """Get the painting service for the current request."""
    return PaintingService(store, max_image_bytes=settings.max_image_bytes)


# Type aliases for cleaner endpoint signatures
SettingsDep = Annotated[Settings, Depends(get_settings)]
StoreDep = Annotated[PaintingStore, Depends(get_painting_store)]
PaintingServiceDep = Annotated[PaintingService, Depends(get_painting_service)]
