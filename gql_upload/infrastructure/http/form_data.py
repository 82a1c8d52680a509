"""
Multipart Form Data.

An ordered multipart form that converts to httpx ``data``/``files``
arguments, and the default appender used for extracted files.
"""

import mimetypes
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from gql_upload.domain.models.exceptions import ArgumentError
from gql_upload.domain.models.files import DEFAULT_CONTENT_TYPE, Blob, File

# Filename browsers give nameless blobs
DEFAULT_BLOB_FILENAME = "blob"


@dataclass(frozen=True)
class FormField:
    """One multipart part. ``filename`` is None for plain text fields."""
    name: str
    value: Any
    filename: Optional[str] = None
    content_type: Optional[str] = None

    @property
    def is_file(self) -> bool:
        return self.filename is not None


class FormData:
    """
    Ordered multipart form.

    httpx always encodes text fields before file parts, so text fields
    should be appended first (operations, map, then files).
    """

    def __init__(self):
        self._fields: List[FormField] = []

    def append(
        self,
        name: str,
        value: Any,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> None:
        """
        Append a part.

        Args:
            name: Field name
            value: str for text fields; bytes or a binary stream for files
            filename: Part filename; makes the part a file part
            content_type: Part media type for file parts
        """
        if filename is None and not isinstance(value, str):
            raise ArgumentError(f"Text field {name!r} needs a string value")
        self._fields.append(FormField(name, value, filename, content_type))

    @property
    def fields(self) -> List[FormField]:
        return list(self._fields)

    def get(self, name: str) -> Optional[Any]:
        """Value of the first part named name."""
        for form_field in self._fields:
            if form_field.name == name:
                return form_field.value
        return None

    def to_httpx(self) -> Tuple[Dict[str, str], List[Tuple[str, Tuple[str, Any, str]]]]:
        """Split into httpx ``data`` and ``files`` arguments."""
        data: Dict[str, str] = {}
        files: List[Tuple[str, Tuple[str, Any, str]]] = []
        for form_field in self._fields:
            if form_field.is_file:
                files.append((
                    form_field.name,
                    (form_field.filename, form_field.value, form_field.content_type or DEFAULT_CONTENT_TYPE),
                ))
            else:
                data[form_field.name] = form_field.value
        return data, files

    def __len__(self) -> int:
        return len(self._fields)


def form_data_append_file(form: FormData, field_name: str, file: Any) -> None:
    """
    Default appender for extracted files.

    - File: sent with its own name and media type
    - Blob: sent as "blob"
    - Binary stream: sent with the basename of its ``name`` when it has one
    - bytes: sent as "blob"
    """
    if isinstance(file, File):
        form.append(field_name, file.content, file.name, file.effective_content_type)
    elif isinstance(file, Blob):
        form.append(field_name, file.content, DEFAULT_BLOB_FILENAME, file.effective_content_type)
    elif isinstance(file, (bytes, bytearray, memoryview)):
        form.append(field_name, bytes(file), DEFAULT_BLOB_FILENAME, DEFAULT_CONTENT_TYPE)
    elif hasattr(file, "read"):
        name = getattr(file, "name", None)
        filename = os.path.basename(name) if isinstance(name, str) and name else DEFAULT_BLOB_FILENAME
        content_type = mimetypes.guess_type(filename)[0] or DEFAULT_CONTENT_TYPE
        form.append(field_name, file, filename, content_type)
    else:
        raise ArgumentError(f"Cannot append {type(file).__name__} to a multipart form")


__all__ = [
    "DEFAULT_BLOB_FILENAME",
    "FormField",
    "FormData",
    "form_data_append_file",
]
