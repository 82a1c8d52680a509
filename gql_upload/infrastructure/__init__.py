"""Infrastructure layer - HTTP transport for GraphQL upload requests."""

from gql_upload.infrastructure.http import (
    FormData,
    UploadHttpLink,
    create_upload_link,
    form_data_append_file,
)

__all__ = [
    "FormData",
    "UploadHttpLink",
    "create_upload_link",
    "form_data_append_file",
]
