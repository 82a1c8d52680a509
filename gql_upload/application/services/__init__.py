"""
Application Services.

- extract_files: Clone a value with files replaced by None, collecting file paths
- is_extractable_file / is_upload_stream / any_of: File matchers
"""

from .extract_files import extract_files
from .file_classifier import (
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
