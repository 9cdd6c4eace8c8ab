"""Domain models."""

from .errors import ErrorCode, ErrorResponse
from .painting import Painting

__all__ = ["Painting", "ErrorCode", "ErrorResponse"]
