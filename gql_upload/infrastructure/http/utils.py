"""
HTTP helpers shared by the upload link.

- compact: shallow merge dropping None values
- serialize_fetch_parameter: JSON encoding with a labelled error
- select_uri: per-operation endpoint override
- select_http_options_and_body: header/options merging and body building
- parse_and_check_http_response: GraphQL response envelope validation
"""

import json
import logging
from typing import Any, Dict, Optional, Tuple

import httpx
from pydantic import ValidationError

from gql_upload.domain.models.exceptions import (
    GraphQLUploadError,
    ServerError,
    ServerParseError,
)
from gql_upload.domain.models.operation import GraphQLOperation
from gql_upload.infrastructure.http.models import GraphQLResponse

logger = logging.getLogger(__name__)


FALLBACK_HTTP_CONFIG: Dict[str, Any] = {
    "http": {
        "include_query": True,
        "include_extensions": False,
        "preserve_header_case": False,
    },
    "headers": {
        "accept": "application/graphql-response+json,application/json;q=0.9",
        "content-type": "application/json",
    },
    "options": {},
}


def compact(*objects: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Merge dictionaries shallowly, dropping keys whose value is None."""
    result: Dict[str, Any] = {}
    for obj in objects:
        if not obj:
            continue
        for key, value in obj.items():
            if value is not None:
                result[key] = value
    return result


def serialize_fetch_parameter(value: Any, label: str) -> str:
    try:
        return json.dumps(value)
    except (TypeError, ValueError) as e:
        raise GraphQLUploadError(f"Network request failed. {label} is not serializable: {e}") from e


def select_uri(operation: GraphQLOperation, fallback_uri: Any = "/graphql") -> str:
    """
    Pick the endpoint for an operation.

    The operation context ``uri`` wins over the link default; either may be
    a callable taking the operation.
    """
    context_uri = operation.get_context().get("uri")
    uri = context_uri if context_uri is not None else fallback_uri
    if callable(uri):
        return uri(operation)
    return uri


def _merge_headers(merged: Dict[str, Tuple[str, Any]], headers: Optional[Dict[str, Any]]) -> None:
    # Keyed by lower-cased name; the latest spelling wins
    for name, value in (headers or {}).items():
        merged[name.lower()] = (name, value)


def _normalize_headers(merged: Dict[str, Tuple[str, Any]], preserve_header_case: bool) -> Dict[str, str]:
    return {
        (name if preserve_header_case else key): str(value)
        for key, (name, value) in merged.items()
        if value is not None
    }


def select_http_options_and_body(
    operation: GraphQLOperation,
    fallback_config: Dict[str, Any],
    *configs: Dict[str, Any],
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Merge fallback, link and context configs into request options and body.

    Each config may have "http", "headers" and "options" sections; later
    configs override earlier ones.

    Returns:
        (options, body) where options holds "headers" plus any extra
        options (e.g. "timeout") and body is the JSON-ready GraphQL payload
    """
    http = dict(fallback_config.get("http") or {})
    options = dict(fallback_config.get("options") or {})
    headers: Dict[str, Tuple[str, Any]] = {}
    _merge_headers(headers, fallback_config.get("headers"))

    for config in configs:
        http.update(compact(config.get("http")))
        options.update(compact(config.get("options")))
        _merge_headers(headers, config.get("headers"))

    options["headers"] = _normalize_headers(headers, http.get("preserve_header_case", False))

    body: Dict[str, Any] = {
        "operationName": operation.operation_name,
        "variables": operation.variables,
    }
    if http.get("include_extensions"):
        body["extensions"] = operation.extensions
    if http.get("include_query", True):
        body["query"] = operation.query

    return options, body


def parse_and_check_http_response(
    operation: GraphQLOperation,
    response: httpx.Response,
) -> Dict[str, Any]:
    """
    Parse a GraphQL HTTP response.

    Raises:
        ServerParseError: Body is not JSON or not a GraphQL result envelope
        ServerError: HTTP status >= 300, or no "data"/"errors" in the result
    """
    body_text = response.text
    try:
        parsed = json.loads(body_text)
    except ValueError as e:
        raise ServerParseError(
            f"Failed to parse server response as JSON: {e}",
            status_code=response.status_code,
            body_text=body_text,
        ) from e

    if response.status_code >= 300:
        raise ServerError(
            f"Response not successful: Received status code {response.status_code}",
            status_code=response.status_code,
            response_text=body_text,
            result=parsed,
        )

    if not isinstance(parsed, dict) or ("data" not in parsed and "errors" not in parsed):
        raise ServerError(
            f"Server response was missing for query '{operation.operation_name}'.",
            status_code=response.status_code,
            response_text=body_text,
            result=parsed,
        )

    try:
        result = GraphQLResponse.model_validate(parsed)
    except ValidationError as e:
        raise ServerParseError(
            f"Server response is not a GraphQL result: {e}",
            status_code=response.status_code,
            body_text=body_text,
        ) from e

    if result.errors:
        logger.debug(f"Operation {operation.operation_name!r} returned {len(result.errors)} error(s)")
    return result.to_result()


__all__ = [
    "FALLBACK_HTTP_CONFIG",
    "compact",
    "serialize_fetch_parameter",
    "select_uri",
    "select_http_options_and_body",
    "parse_and_check_http_response",
]
