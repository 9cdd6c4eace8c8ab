"""Painting domain model."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

IMAGE_FILENAME_PREFIX = "cave-painting-"
IMAGE_EXTENSION = ".png"
METADATA_EXTENSION = ".json"


def image_filename_for(painting_id: int) -> str:
    """Get the image filename for a painting ID."""
    return f"{IMAGE_FILENAME_PREFIX}{painting_id}{IMAGE_EXTENSION}"


def metadata_filename_for(painting_id: int | str) -> str:
    """Get the metadata filename for a painting ID."""
    return f"{painting_id}{METADATA_EXTENSION}"


def format_timestamp(timestamp_ms: int) -> str:
    """Render a millisecond timestamp as ISO-8601 UTC, e.g. 2024-01-01T00:00:00.000Z."""
    seconds, millis = divmod(timestamp_ms, 1000)
    moment = datetime.fromtimestamp(seconds, tz=UTC) + timedelta(milliseconds=millis)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Painting:
    """A stored painting: an image file plus its JSON metadata sidecar."""

    id: int
    filename: str
    story: str
    artist: str
    timestamp: int
    date: str
    image_url: str | None = None

    @classmethod
    def new(cls, painting_id: int, story: str, artist: str) -> "Painting":
        """Build a painting whose filename, timestamp and date derive from its ID."""
        return cls(
            id=painting_id,
            filename=image_filename_for(painting_id),
            story=story,
            artist=artist,
            timestamp=painting_id,
            date=format_timestamp(painting_id),
        )

    @classmethod
    def from_document(cls, data: Any) -> "Painting":
        """
        Build a painting from a parsed metadata document.

        Raises:
            ValueError: If the document does not follow the metadata schema.
        """
        if not isinstance(data, dict):
            raise ValueError("metadata document is not an object")

        try:
            painting_id = data["id"]
            filename = data["filename"]
            timestamp = data.get("timestamp", painting_id)
        except KeyError as e:
            raise ValueError(f"metadata document is missing {e.args[0]!r}") from e

        # bool is an int subclass; reject it explicitly
        for name, value in (("id", painting_id), ("timestamp", timestamp)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"metadata field {name!r} must be an integer")
        if not isinstance(filename, str) or not filename:
            raise ValueError("metadata field 'filename' must be a non-empty string")

        return cls(
            id=painting_id,
            filename=filename,
            story=str(data.get("story", "")),
            artist=str(data.get("artist", "")),
            timestamp=timestamp,
            date=str(data.get("date") or format_timestamp(timestamp)),
        )

    def to_document(self) -> dict[str, Any]:
        """Convert to the metadata document persisted as <id>.json."""
        return {
            "id": self.id,
            "filename": self.filename,
            "story": self.story,
            "artist": self.artist,
            "timestamp": self.timestamp,
            "date": self.date,
        }
