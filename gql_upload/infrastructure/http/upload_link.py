"""
Upload HTTP Link.

Terminating link that sends a GraphQL multipart request when the operation
variables contain files, or a regular JSON POST otherwise.

Request lifecycle:
1. Merge fallback, link and operation-context settings into headers/options.
2. Build the body {operationName, variables, query[, extensions]}.
3. Extract files from the body with the configured matcher.
4. No files: POST the body as JSON.
   Files: drop the content-type header (httpx sets the boundary) and POST
   operations/map/file parts as multipart/form-data.
5. Store the httpx response on the operation context and parse the result.

Usage:
    from gql_upload import UploadHttpLink, UploadLinkConfig, File, GraphQLOperation

    link = UploadHttpLink(UploadLinkConfig(uri="https://api.example.com/graphql"))
    result = link.request(GraphQLOperation(
        query="mutation ($file: Upload!) { upload(file: $file) { id } }",
        variables={"file": File.from_path("avatar.png")},
    ))
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx

from gql_upload.application.services.extract_files import extract_files
from gql_upload.application.services.file_classifier import (
    is_extractable_file as default_is_extractable_file,
)
from gql_upload.config import UploadLinkConfig
from gql_upload.domain.interfaces.link import (
    ExtractableFileMatcher,
    FormDataFileAppender,
    IGraphQLLink,
)
from gql_upload.domain.models.exceptions import ArgumentError
from gql_upload.domain.models.operation import GraphQLOperation
from gql_upload.infrastructure.http.form_data import (
    FormData,
    form_data_append_file as default_form_data_append_file,
)
from gql_upload.infrastructure.http.multipart import build_multipart_form
from gql_upload.infrastructure.http.utils import (
    FALLBACK_HTTP_CONFIG,
    parse_and_check_http_response,
    select_http_options_and_body,
    select_uri,
    serialize_fetch_parameter,
)

logger = logging.getLogger(__name__)


@dataclass
class PreparedRequest:
    """
    Keyword arguments for one httpx POST.

    Exactly one of ``content`` (JSON) or ``data``/``files`` (multipart) is set.
    """
    uri: str
    headers: Dict[str, str]
    timeout: Optional[float]
    content: Optional[str] = None
    data: Dict[str, str] = field(default_factory=dict)
    files: List[Tuple[str, Tuple[str, Any, str]]] = field(default_factory=list)

    @property
    def is_multipart(self) -> bool:
        return bool(self.files)

    def to_httpx_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"headers": self.headers, "timeout": self.timeout}
        if self.is_multipart:
            kwargs["data"] = self.data
            kwargs["files"] = self.files
        else:
            kwargs["content"] = self.content
        return kwargs


class UploadHttpLink(IGraphQLLink):
    """
    JSON/multipart GraphQL link over httpx.

    Thread-safe: holds no per-request state. Injected clients are used
    as-is and never closed by the link; otherwise a client is created and
    closed per request.

    Attributes:
        config: Link-level settings
    """

    def __init__(
        self,
        config: Optional[UploadLinkConfig] = None,
        is_extractable_file: Optional[ExtractableFileMatcher] = None,
        form_data_append_file: Optional[FormDataFileAppender] = None,
        form_data_class: Callable[[], Any] = FormData,
        client: Optional[httpx.Client] = None,
        async_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the link.

        Args:
            config: Link settings; defaults to UploadLinkConfig()
            is_extractable_file: File matcher; defaults to File/Blob detection
            form_data_append_file: Appends one extracted file to the form
            form_data_class: Form factory; its instances must offer to_httpx()
            client: httpx.Client used by request()
            async_client: httpx.AsyncClient used by arequest()
        """
        self.config = config or UploadLinkConfig()
        self._is_extractable_file = is_extractable_file or default_is_extractable_file
        self._form_data_append_file = form_data_append_file or default_form_data_append_file
        self._form_data_class = form_data_class
        self._client = client
        self._async_client = async_client

        if not callable(self._is_extractable_file):
            raise ArgumentError("is_extractable_file must be callable")
        if not callable(self._form_data_append_file):
            raise ArgumentError("form_data_append_file must be callable")

        if self.config.log_level is not None:
            logging.getLogger("gql_upload").setLevel(self.config.log_level)

    # ═══════════════════════════════════════════════════════════════════════
    # Request preparation
    # ═══════════════════════════════════════════════════════════════════════

    def prepare(self, operation: GraphQLOperation) -> PreparedRequest:
        """Build the HTTP request for an operation without sending it."""
        context = operation.get_context()
        context_config = {
            "http": context.get("http"),
            "headers": context.get("headers"),
            "options": {"timeout": context.get("timeout")},
        }

        options, body = select_http_options_and_body(
            operation,
            FALLBACK_HTTP_CONFIG,
            self.config.to_link_config(),
            context_config,
        )
        uri = select_uri(operation, self.config.uri)
        headers = options["headers"]
        timeout = options.get("timeout", self.config.timeout)

        extraction = extract_files(body, self._is_extractable_file, "")

        if not extraction.has_files:
            logger.debug(f"Sending {operation.operation_name or 'anonymous'} operation as JSON to {uri}")
            return PreparedRequest(
                uri=uri,
                headers=headers,
                timeout=timeout,
                content=serialize_fetch_parameter(body, "Payload"),
            )

        # httpx sets multipart/form-data with the boundary
        headers = {name: value for name, value in headers.items() if name.lower() != "content-type"}

        form = build_multipart_form(extraction, self._form_data_append_file, self._form_data_class)
        data, files = form.to_httpx()

        logger.debug(
            f"Sending {operation.operation_name or 'anonymous'} operation as multipart "
            f"with {len(files)} file(s) to {uri}"
        )
        return PreparedRequest(uri=uri, headers=headers, timeout=timeout, data=data, files=files)

    # ═══════════════════════════════════════════════════════════════════════
    # Execution
    # ═══════════════════════════════════════════════════════════════════════

    def request(self, operation: GraphQLOperation) -> Dict[str, Any]:
        prepared = self.prepare(operation)

        if self._client is not None:
            response = self._client.post(prepared.uri, **prepared.to_httpx_kwargs())
        else:
            with httpx.Client() as client:
                response = client.post(prepared.uri, **prepared.to_httpx_kwargs())

        operation.set_context(response=response)
        return parse_and_check_http_response(operation, response)

    async def arequest(self, operation: GraphQLOperation) -> Dict[str, Any]:
        prepared = self.prepare(operation)

        if self._async_client is not None:
            response = await self._async_client.post(prepared.uri, **prepared.to_httpx_kwargs())
        else:
            async with httpx.AsyncClient() as client:
                response = await client.post(prepared.uri, **prepared.to_httpx_kwargs())

        operation.set_context(response=response)
        return parse_and_check_http_response(operation, response)


def create_upload_link(
    config: Optional[UploadLinkConfig] = None,
    **kwargs: Any,
) -> UploadHttpLink:
    """
    Create an upload link.

    Args:
        config: Link settings
        **kwargs: Forwarded to UploadHttpLink

    Returns:
        Configured UploadHttpLink
    """
    return UploadHttpLink(config, **kwargs)


__all__ = [
    "PreparedRequest",
    "UploadHttpLink",
    "create_upload_link",
]
