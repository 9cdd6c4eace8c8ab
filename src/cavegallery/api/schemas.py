"""Pydantic request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field

from ..models import Painting


class CreatePaintingRequest(BaseModel):
    """Create painting request.

    Fields are optional here so missing values are reported as a
    VALIDATION_ERROR by the service rather than a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    image_data: str | None = Field(default=None, alias="imageData")
    story: str | None = None
    artist: str | None = None


class CreatePaintingResponse(BaseModel):
    """Create painting response."""

    success: bool = True
    message: str = "Painting saved successfully!"
    id: int


class PaintingResponse(BaseModel):
    """Painting response."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    filename: str
    story: str
    artist: str
    timestamp: int
    date: str
    image_url: str = Field(alias="imageUrl")

    @classmethod
    def from_painting(cls, painting: Painting) -> "PaintingResponse":
        """Convert a painting domain model to its API representation."""
        return cls(
            id=painting.id,
            filename=painting.filename,
            story=painting.story,
            artist=painting.artist,
            timestamp=painting.timestamp,
            date=painting.date,
            image_url=painting.image_url or "",
        )
