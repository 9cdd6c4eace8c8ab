"""Painting image endpoints."""

from fastapi import APIRouter
from fastapi.responses import FileResponse

from ..exceptions import PaintingNotFoundException
from ..models import ErrorResponse
from .dependencies import StoreDep

router = APIRouter(prefix="/paintings", tags=["images"])


@router.get(
    "/{filename}",
    responses={
        200: {"content": {"image/png": {}}, "description": "Image file"},
        404: {"model": ErrorResponse},
    },
)
async def get_image(filename: str, store: StoreDep) -> FileResponse:
    """Get a stored painting image."""
    file_path = store.resolve_image_path(filename)
    if not file_path:
        raise PaintingNotFoundException("Image not found")

    return FileResponse(file_path, media_type="image/png")
