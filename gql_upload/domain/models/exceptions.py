"""
GraphQL Upload Exceptions.

Custom exceptions for file extraction and upload request handling.
Follows exception hierarchy pattern for precise error handling.

Design Principles:
- Single Responsibility: One file for all upload exceptions
- Hierarchy: All inherit from GraphQLUploadError base
- Rich context: Exceptions carry relevant data
"""

from typing import Any, Optional


class GraphQLUploadError(Exception):
    """
    Base exception for GraphQL upload errors.

    All package exceptions inherit from this.
    Allows catching all upload errors with one handler.
    """
    pass


class ArgumentError(GraphQLUploadError, TypeError):
    """
    Caller contract violation.

    Raised when:
    - The value to extract from is omitted
    - The file matcher is not callable
    - The path prefix is not a string
    """
    pass


class ServerError(GraphQLUploadError):
    """
    The server answered with a non-success HTTP status.

    Attributes:
        status_code: HTTP status of the response
        response_text: Raw response body
        result: Parsed GraphQL result, when the body was valid JSON
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response_text: str = "",
        result: Optional[Any] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text
        self.result = result


class ServerParseError(GraphQLUploadError):
    """
    The response body could not be parsed as a GraphQL result.

    Attributes:
        status_code: HTTP status of the response
        body_text: Raw response body
    """

    def __init__(self, message: str, status_code: int, body_text: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body_text = body_text


__all__ = [
    "GraphQLUploadError",
    "ArgumentError",
    "ServerError",
    "ServerParseError",
]
