"""Domain layer: errors, schemas, constants."""

from .errors import ErrorCodes, UploadRejectError
from .schemas import (
    StoredFile,
    UploadCategory,
    UploadResponse,
)

__all__ = [
    "ErrorCodes",
    "UploadRejectError",
    "StoredFile",
    "UploadCategory",
    "UploadResponse",
]
