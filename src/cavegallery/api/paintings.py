"""Painting API endpoints."""

from fastapi import APIRouter

from ..models import ErrorResponse
from .dependencies import PaintingServiceDep
from .schemas import CreatePaintingRequest, CreatePaintingResponse, PaintingResponse

router = APIRouter(prefix="/paintings", tags=["paintings"])


@router.post(
    "",
    response_model=CreatePaintingResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_painting(
    request: CreatePaintingRequest,
    service: PaintingServiceDep,
) -> CreatePaintingResponse:
    """Save a new painting."""
    painting_id = service.create_painting(request.story, request.artist, request.image_data)
    return CreatePaintingResponse(id=painting_id)


@router.get(
    "",
    response_model=list[PaintingResponse],
)
async def list_paintings(service: PaintingServiceDep) -> list[PaintingResponse]:
    """Get all paintings, newest first."""
    return [PaintingResponse.from_painting(p) for p in service.list_paintings()]


@router.get(
    "/{painting_id}",
    response_model=PaintingResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_painting(painting_id: str, service: PaintingServiceDep) -> PaintingResponse:
    """Get a specific painting."""
    return PaintingResponse.from_painting(service.get_painting(painting_id))
