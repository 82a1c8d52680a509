"""Application layer - file extraction services."""

from .services import (
    extract_files,
    is_extractable_file,
    is_upload_stream,
    any_of,
)

__all__ = [
    "extract_files",
    "is_extractable_file",
    "is_upload_stream",
    "any_of",
]
