"""
GraphQL Upload - file extraction and multipart requests for GraphQL clients.

Extracts files from operation variables into a deep clone with files
replaced by null, then sends a GraphQL multipart request
(https://github.com/jaydenseric/graphql-multipart-request-spec) when files
are present, or a plain JSON request otherwise.

Architecture follows the layering:
- domain: File/Blob/FileList value objects, extraction results, link contract
- application: extract_files and file matchers
- infrastructure: httpx link and multipart form building
"""

__version__ = "0.1.0"

# Domain Models
from gql_upload.domain.models import (
    GraphQLUploadError,
    ArgumentError,
    ServerError,
    ServerParseError,
    Blob,
    File,
    FileList,
    ObjectPath,
    FileIdentityMap,
    Extraction,
    GraphQLOperation,
)

# Domain Interfaces
from gql_upload.domain.interfaces import (
    ExtractableFileMatcher,
    FormDataFileAppender,
    IGraphQLLink,
)

# Application Services
from gql_upload.application import (
    extract_files,
    is_extractable_file,
    is_upload_stream,
    any_of,
)

# Infrastructure
from gql_upload.infrastructure import (
    FormData,
    UploadHttpLink,
    create_upload_link,
    form_data_append_file,
)

from gql_upload.config import UploadLinkConfig

__all__ = [
    # Version
    "__version__",
    # Errors
    "GraphQLUploadError",
    "ArgumentError",
    "ServerError",
    "ServerParseError",
    # Domain Models
    "Blob",
    "File",
    "FileList",
    "ObjectPath",
    "FileIdentityMap",
    "Extraction",
    "GraphQLOperation",
    # Domain Interfaces
    "ExtractableFileMatcher",
    "FormDataFileAppender",
    "IGraphQLLink",
    # Application Services
    "extract_files",
    "is_extractable_file",
    "is_upload_stream",
    "any_of",
    # Infrastructure
    "FormData",
    "UploadHttpLink",
    "create_upload_link",
    "form_data_append_file",
    # Config
    "UploadLinkConfig",
]
