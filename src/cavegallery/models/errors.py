"""Error response models."""

from enum import Enum

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Error codes for API responses."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    STORAGE_ERROR = "STORAGE_ERROR"


class ErrorResponse(BaseModel):
    """Unified error response format."""

    error: str = Field(..., description="Error code")
    message: str = Field(..., description="Error description")
