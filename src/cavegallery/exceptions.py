"""Structured exception types for Cave Gallery.

Each exception maps to an HTTP status code and an error code, so the API
layer can translate them with a single exception handler.

Usage:
    from cavegallery.exceptions import PaintingNotFoundException

    # In storage layer
    if not metadata_path.exists():
        raise PaintingNotFoundException(f"Painting {painting_id} not found")
"""

from .models.errors import ErrorCode


class CaveGalleryException(Exception):
    """Base exception for Cave Gallery.

    Attributes:
        error_code: ErrorCode enum value for API responses
        status_code: HTTP status code to return
        message: Human-readable error message
    """

    error_code: ErrorCode = ErrorCode.STORAGE_ERROR
    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationException(CaveGalleryException):
    """Raised when a required painting field is missing or malformed."""

    error_code = ErrorCode.VALIDATION_ERROR
    status_code = 400


class PaintingNotFoundException(CaveGalleryException):
    """Raised when a painting's metadata or image is not on disk."""

    error_code = ErrorCode.NOT_FOUND
    status_code = 404


class StorageException(CaveGalleryException):
    """Raised when reading or writing the paintings directory fails."""

    error_code = ErrorCode.STORAGE_ERROR
    status_code = 500
