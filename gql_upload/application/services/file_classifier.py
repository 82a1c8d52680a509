"""
File Classifier.

Predicates deciding which values count as extractable files. The default
recognizes the package's File and Blob value objects; callers can swap in
or combine other matchers, for example to upload open binary streams.

Usage:
    from gql_upload.application.services import (
        any_of,
        is_extractable_file,
        is_upload_stream,
    )

    matcher = any_of(is_extractable_file, is_upload_stream)
"""

import io
from typing import Any, Tuple

from gql_upload.domain.interfaces.link import ExtractableFileMatcher
from gql_upload.domain.models.exceptions import ArgumentError
from gql_upload.domain.models.files import Blob, File


_FILE_TYPES: Tuple[Any, ...] = (File, Blob)


def _runtime_file_types() -> Tuple[type, ...]:
    """Registered file types that are usable as isinstance targets."""
    return tuple(t for t in _FILE_TYPES if isinstance(t, type))


def is_extractable_file(value: Any) -> bool:
    """
    Check if a value is an extractable file (File or Blob instance).

    Returns False for everything when no file types are available.
    """
    file_types = _runtime_file_types()
    return bool(file_types) and isinstance(value, file_types)


def is_upload_stream(value: Any) -> bool:
    """Check if a value is an open binary stream, e.g. open(path, "rb")."""
    if not isinstance(value, (io.BufferedIOBase, io.RawIOBase)):
        return False
    return not value.closed and value.readable()


def any_of(*matchers: ExtractableFileMatcher) -> ExtractableFileMatcher:
    """
    Combine matchers; a value is extractable if any matcher accepts it.

    Raises:
        ArgumentError: If a matcher is not callable
    """
    for index, matcher in enumerate(matchers):
        if not callable(matcher):
            raise ArgumentError(f"Matcher {index + 1} must be callable.")

    def matches(value: Any) -> bool:
        return any(matcher(value) for matcher in matchers)

    return matches


__all__ = [
    "is_extractable_file",
    "is_upload_stream",
    "any_of",
]
