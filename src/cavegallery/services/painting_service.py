"""Painting management service."""

from ..exceptions import ValidationException
from ..models import Painting
from ..storage import PaintingStore
from ..utils.image_data import decode_image_data, verify_png

# Room for the data URI header and line breaks
ENCODING_OVERHEAD = 1024


class PaintingService:
    """Painting business service."""

    def __init__(self, store: PaintingStore, max_image_bytes: int) -> None:
        """Initialize painting service."""
        self.store = store
        self.max_image_bytes = max_image_bytes

    @property
    def max_encoded_length(self) -> int:
        """Longest image_data string that can decode within the size limit."""
        return -(-self.max_image_bytes // 3) * 4 + ENCODING_OVERHEAD

    def create_painting(
        self,
        story: str | None,
        artist: str | None,
        image_data: str | None,
    ) -> int:
        """
        Save a painting uploaded as a base64 data URI.

        Args:
            story: Story told by the painting.
            artist: Optional artist name.
            image_data: Base64 PNG, usually "data:image/png;base64,...".

        Returns:
            The new painting ID.
        """
        # Both fields are checked before decoding so nothing reaches disk
        if not image_data or not story or not story.strip():
            raise ValidationException("Image data and story are required")

        # Reject oversized bodies before decoding; base64 is 4 chars per 3 bytes
        if len(image_data) > self.max_encoded_length:
            raise ValidationException(
                f"Image is too large (more than {self.max_image_bytes} bytes)"
            )

        image_bytes = decode_image_data(image_data)
        if len(image_bytes) > self.max_image_bytes:
            raise ValidationException(
                f"Image is too large ({len(image_bytes)} bytes, limit {self.max_image_bytes})"
            )
        verify_png(image_bytes)

        return self.store.create(story, artist, image_bytes)

    def list_paintings(self) -> list[Painting]:
        """List visible paintings, newest first."""
        return self.store.list_all()

    def get_painting(self, painting_id: str) -> Painting:
        """Get a single painting by ID."""
        return self.store.get(painting_id)
