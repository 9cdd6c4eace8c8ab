"""File system storage for paintings.

Each painting is a pair of files in one flat directory:

    cave-painting-<id>.png   the image
    <id>.json                the metadata document

A painting is only visible while both files exist.
"""

import contextlib
import errno
import json
import logging
import os
import threading
import time
from collections.abc import Iterator
from pathlib import Path

from ..exceptions import PaintingNotFoundException, StorageException, ValidationException
from ..models import Painting
from ..models.painting import (
    IMAGE_EXTENSION,
    METADATA_EXTENSION,
    image_filename_for,
    metadata_filename_for,
)

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".tmp"
MAX_NAME_BYTES = 255
DEFAULT_ARTIST = "Anonymous Cave Dweller"


class PaintingStore:
    """Persists paintings as image + JSON sidecar pairs."""

    # Shared across instances so stores built per request still hand out unique IDs
    _id_lock = threading.Lock()
    _last_id = 0

    def __init__(
        self,
        root_dir: Path,
        image_url_prefix: str = "/paintings",
        default_artist: str = DEFAULT_ARTIST,
    ) -> None:
        """Initialize painting store."""
        self.root_dir = Path(root_dir)
        self.image_url_prefix = image_url_prefix.rstrip("/")
        self.default_artist = default_artist

    def ensure_directory(self) -> None:
        """Ensure the paintings directory exists."""
        self.root_dir.mkdir(parents=True, exist_ok=True)

    def get_image_path(self, filename: str) -> Path:
        """Get the path of an image file."""
        return self.root_dir / filename

    def get_metadata_path(self, painting_id: int | str) -> Path:
        """Get the metadata path for a painting ID."""
        return self.root_dir / metadata_filename_for(painting_id)

    def image_url(self, filename: str) -> str:
        """Get the public URL of an image file."""
        return f"{self.image_url_prefix}/{filename}"

    def create(self, story: str | None, artist: str | None, image_bytes: bytes | None) -> int:
        """
        Persist a new painting.

        Args:
            story: Story told by the painting. Required.
            artist: Artist name. Falls back to the default artist when empty.
            image_bytes: Decoded image payload. Required.

        Returns:
            The new painting ID.

        Raises:
            ValidationException: If story or image is missing. Nothing is written.
            StorageException: If writing either file fails.
        """
        if not story or not story.strip():
            raise ValidationException("Story is required")
        if not image_bytes:
            raise ValidationException("Image data is required")
        if not artist or not artist.strip():
            artist = self.default_artist

        try:
            self.ensure_directory()
            painting_id = self._allocate_id()
        except OSError as e:
            logger.exception("Cannot prepare paintings directory %s", self.root_dir)
            raise StorageException("Failed to save painting") from e

        painting = Painting.new(painting_id, story, artist)

        image_path = self.get_image_path(painting.filename)
        image_tmp = self._temp_path_for(image_path)
        metadata_path = self.get_metadata_path(painting_id)
        metadata_tmp = self._temp_path_for(metadata_path)
        metadata_written = False

        try:
            # The image is renamed into place last, so the pair only becomes
            # visible once both files are complete.
            image_tmp.write_bytes(image_bytes)
            metadata_tmp.write_text(
                json.dumps(painting.to_document(), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
            os.replace(metadata_tmp, metadata_path)
            metadata_written = True
            os.replace(image_tmp, image_path)
        except OSError as e:
            logger.exception("Error saving painting %s", painting_id)
            for leftover in (image_tmp, metadata_tmp):
                with contextlib.suppress(OSError):
                    leftover.unlink(missing_ok=True)
            if metadata_written:
                with contextlib.suppress(OSError):
                    metadata_path.unlink(missing_ok=True)
            raise StorageException("Failed to save painting") from e

        logger.info("Saved painting %s by %s", painting_id, artist)
        return painting_id

    def list_all(self) -> list[Painting]:
        """
        List all visible paintings, newest first.

        Metadata files that cannot be read or parsed are logged and skipped.
        Paintings whose image file is missing are skipped.
        """
        paintings = []
        for painting in self._iter_documents():
            if not self._is_plain_name(painting.filename) or not self.get_image_path(
                painting.filename
            ).is_file():
                logger.info("Image file not found: %s", painting.filename)
                continue
            painting.image_url = self.image_url(painting.filename)
            paintings.append(painting)

        return sorted(paintings, key=lambda p: p.timestamp, reverse=True)

    def get(self, painting_id: str | int) -> Painting:
        """
        Get a single painting by ID.

        The ID is matched literally against metadata filenames.

        Raises:
            PaintingNotFoundException: If the metadata is missing or unparsable,
                or the image file is missing.
            StorageException: If the metadata cannot be read for another reason.
        """
        key = str(painting_id)
        if not self._is_plain_name(key) or not self._is_plain_name(metadata_filename_for(key)):
            raise PaintingNotFoundException("Painting not found")

        metadata_path = self.get_metadata_path(key)
        try:
            raw = metadata_path.read_bytes()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise PaintingNotFoundException("Painting not found") from e
        except OSError as e:
            if e.errno == errno.ENAMETOOLONG:
                raise PaintingNotFoundException("Painting not found") from e
            logger.exception("Error reading painting %s", key)
            raise StorageException("Failed to read painting") from e

        try:
            painting = Painting.from_document(json.loads(raw.decode("utf-8")))
        except ValueError as e:
            # UnicodeDecodeError and JSONDecodeError are ValueErrors
            logger.warning("Malformed metadata file %s: %s", metadata_path.name, e)
            raise PaintingNotFoundException("Painting not found") from e

        if not self._is_plain_name(painting.filename) or not self.get_image_path(
            painting.filename
        ).is_file():
            raise PaintingNotFoundException("Painting not found")

        painting.image_url = self.image_url(painting.filename)
        return painting

    def resolve_image_path(self, filename: str) -> Path | None:
        """
        Resolve a stored image filename to its path.

        Returns:
            The image path if it exists inside the store, None otherwise.
        """
        if not self._is_plain_name(filename) or not filename.endswith(IMAGE_EXTENSION):
            return None

        full_path = self.get_image_path(filename)
        if not full_path.is_file():
            return None

        # Ensure the path is within the store directory
        try:
            full_path.resolve().relative_to(self.root_dir.resolve())
        except ValueError:
            return None

        return full_path

    def _iter_documents(self) -> Iterator[Painting]:
        """Yield every parsable metadata document, skipping bad files."""
        if not self.root_dir.is_dir():
            return

        for metadata_path in self.root_dir.glob(f"*{METADATA_EXTENSION}"):
            if metadata_path.name.startswith("."):
                continue
            try:
                data = json.loads(metadata_path.read_text(encoding="utf-8"))
                painting = Painting.from_document(data)
            except (OSError, ValueError) as e:
                # JSONDecodeError and UnicodeDecodeError are ValueErrors
                logger.warning("Error reading metadata file %s: %s", metadata_path.name, e)
                continue
            yield painting

    def _allocate_id(self) -> int:
        """Allocate a millisecond-timestamp ID not used by this process or on disk."""
        with PaintingStore._id_lock:
            candidate = max(time.time_ns() // 1_000_000, PaintingStore._last_id + 1)
            while (
                self.get_metadata_path(candidate).exists()
                or self.get_image_path(image_filename_for(candidate)).exists()
            ):
                candidate += 1
            PaintingStore._last_id = candidate
            return candidate

    @staticmethod
    def _temp_path_for(path: Path) -> Path:
        """Hidden sibling used while a file is being written."""
        return path.with_name(f".{path.name}{TEMP_SUFFIX}")

    @staticmethod
    def _is_plain_name(name: str) -> bool:
        """Check a name refers to a file directly inside the store."""
        if not name or name in (".", ".."):
            return False
        if len(name.encode("utf-8", "replace")) > MAX_NAME_BYTES:
            return False
        return not any(c in name for c in "/\\\x00")
