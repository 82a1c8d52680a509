"""
GraphQL Upload Domain Models Package.

Package Structure:
- exceptions.py: All package exceptions
- files.py: Blob, File, FileList (uploadable value objects)
- extraction.py: ObjectPath, FileIdentityMap, Extraction
- operation.py: GraphQLOperation

Usage:
    from gql_upload.domain.models import File, Extraction, GraphQLOperation

    avatar = File(b"...", name="avatar.png", content_type="image/png")
    operation = GraphQLOperation(
        query="mutation ($file: Upload!) { upload(file: $file) }",
        variables={"file": avatar},
    )
"""

from .exceptions import (
    GraphQLUploadError,
    ArgumentError,
    ServerError,
    ServerParseError,
)
from .files import (
    DEFAULT_CONTENT_TYPE,
    Blob,
    File,
    FileList,
)
from .extraction import (
    ObjectPath,
    FileIdentityMap,
    Extraction,
)
from .operation import GraphQLOperation


__all__ = [
    # Errors
    "GraphQLUploadError",
    "ArgumentError",
    "ServerError",
    "ServerParseError",
    # Files
    "DEFAULT_CONTENT_TYPE",
    "Blob",
    "File",
    "FileList",
    # Extraction
    "ObjectPath",
    "FileIdentityMap",
    "Extraction",
    # Operation
    "GraphQLOperation",
]
