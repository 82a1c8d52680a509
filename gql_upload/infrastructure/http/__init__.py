"""
HTTP Infrastructure.

Implementations:
- UploadHttpLink: JSON or multipart GraphQL requests over httpx
- FormData / form_data_append_file: multipart form building
- build_multipart_form: operations/map/file parts from an extraction

Usage:
    from gql_upload.infrastructure.http import UploadHttpLink
    from gql_upload.config import UploadLinkConfig

    link = UploadHttpLink(UploadLinkConfig(uri="https://api.example.com/graphql"))

    # Custom transport (tests, proxies, connection pooling)
    import httpx
    link = UploadHttpLink(client=httpx.Client(transport=transport))
"""

from gql_upload.infrastructure.http.form_data import (
    DEFAULT_BLOB_FILENAME,
    FormField,
    FormData,
    form_data_append_file,
)
from gql_upload.infrastructure.http.multipart import build_multipart_form
from gql_upload.infrastructure.http.upload_link import (
    PreparedRequest,
    UploadHttpLink,
    create_upload_link,
)
from gql_upload.infrastructure.http.utils import (
    FALLBACK_HTTP_CONFIG,
    compact,
    serialize_fetch_parameter,
    select_uri,
    select_http_options_and_body,
    parse_and_check_http_response,
)

__all__ = [
    "DEFAULT_BLOB_FILENAME",
    "FormField",
    "FormData",
    "form_data_append_file",
    "build_multipart_form",
    "PreparedRequest",
    "UploadHttpLink",
    "create_upload_link",
    "FALLBACK_HTTP_CONFIG",
    "compact",
    "serialize_fetch_parameter",
    "select_uri",
    "select_http_options_and_body",
    "parse_and_check_http_response",
]
