"""
Uploadable File Value Objects.

Immutable binary values that can travel as parts of a GraphQL multipart
request.

Value Objects:
- Blob: Opaque binary content with an optional media type
- File: Blob with a file name
- FileList: Ordered, read-only collection of files (e.g. a multi-file picker)

Blobs compare by identity: two blobs with equal content are still two
uploads.
"""

from __future__ import annotations

import mimetypes
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union, overload

from .exceptions import ArgumentError


DEFAULT_CONTENT_TYPE = "application/octet-stream"

BlobPart = Union[bytes, bytearray, memoryview, str]


def _to_bytes(part: BlobPart) -> bytes:
    if isinstance(part, bytes):
        return part
    if isinstance(part, (bytearray, memoryview)):
        return bytes(part)
    if isinstance(part, str):
        return part.encode("utf-8")
    raise ArgumentError(f"Blob content must be bytes or str, got {type(part).__name__}")


@dataclass(frozen=True, eq=False)
class Blob:
    """
    Immutable binary content.

    Attributes:
        content: Raw bytes (str is stored UTF-8 encoded)
        content_type: Media type sent with the multipart part ("" if unknown)

    Examples:
        >>> blob = Blob(b"hello", content_type="text/plain")
        >>> blob.size
        5
    """
    content: bytes
    content_type: str = ""

    def __post_init__(self):
        object.__setattr__(self, "content", _to_bytes(self.content))
        if not isinstance(self.content_type, str):
            raise ArgumentError("Blob content_type must be a string")

    @classmethod
    def from_parts(cls, parts: Iterable[BlobPart], content_type: str = "") -> "Blob":
        """Concatenate byte/str parts into one blob."""
        return cls(b"".join(_to_bytes(p) for p in parts), content_type=content_type)

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def effective_content_type(self) -> str:
        """Media type for transport, falling back to application/octet-stream."""
        return self.content_type or DEFAULT_CONTENT_TYPE

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, content_type={self.content_type!r})"


@dataclass(frozen=True, eq=False, kw_only=True)
class File(Blob):
    """
    Blob with a file name.

    Attributes:
        name: File name sent as the multipart part filename
        last_modified: Modification time, if known
    """
    name: str
    last_modified: Optional[datetime] = field(default=None)

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.name, str) or not self.name:
            raise ArgumentError("File name must be a non-empty string")

    @classmethod
    def from_path(cls, path: Union[str, Path], content_type: Optional[str] = None) -> "File":
        """
        Read a file from disk.

        Args:
            path: File to read
            content_type: Media type; guessed from the extension when omitted

        Returns:
            File holding the full content
        """
        path = Path(path)
        if content_type is None:
            content_type = mimetypes.guess_type(path.name)[0] or ""
        return cls(
            path.read_bytes(),
            content_type=content_type,
            name=path.name,
            last_modified=datetime.fromtimestamp(path.stat().st_mtime),
        )

    def __repr__(self) -> str:
        return f"File(name={self.name!r}, size={self.size}, content_type={self.content_type!r})"


class FileList(Sequence):
    """
    Read-only ordered collection of files.

    Extraction treats it as a list of files; its clone is a plain list.
    """

    def __init__(self, files: Iterable[File] = ()):
        self._files = tuple(files)
        for item in self._files:
            if not isinstance(item, Blob):
                raise ArgumentError(f"FileList accepts only files, got {type(item).__name__}")

    @overload
    def __getitem__(self, index: int) -> File: ...

    @overload
    def __getitem__(self, index: slice) -> "FileList": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return FileList(self._files[index])
        return self._files[index]

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[File]:
        return iter(self._files)

    def item(self, index: int) -> Optional[File]:
        """Return the file at index, or None when out of range."""
        if 0 <= index < len(self._files):
            return self._files[index]
        return None

    def __repr__(self) -> str:
        return f"FileList({list(self._files)!r})"


__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "Blob",
    "File",
    "FileList",
]
