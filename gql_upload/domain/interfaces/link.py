"""
GraphQL Link Interface.

Defines the contract for terminating links that execute a GraphQL operation
over a transport, plus the pluggable callables an upload link consumes.

Usage:
    from gql_upload.domain.interfaces import IGraphQLLink

    class Client:
        def __init__(self, link: IGraphQLLink):
            self._link = link

        def mutate(self, operation):
            return self._link.request(operation)
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict

from gql_upload.domain.models.operation import GraphQLOperation


# Decides whether a value is an extractable file.
ExtractableFileMatcher = Callable[[Any], bool]

# Appends an extracted file to a form under the given field name:
# (form, field_name, file) -> None
FormDataFileAppender = Callable[[Any, str, Any], None]


class IGraphQLLink(ABC):
    """
    Interface for terminating GraphQL links.

    Implementations:
    - UploadHttpLink: JSON or multipart POST over httpx
    """

    @abstractmethod
    def request(self, operation: GraphQLOperation) -> Dict[str, Any]:
        """
        Execute an operation and return the parsed GraphQL result.

        Args:
            operation: Operation to send

        Returns:
            Result dictionary with "data" and, if present, "errors"/"extensions"

        Raises:
            ServerError: Non-success HTTP status
            ServerParseError: Body is not a GraphQL result
        """
        pass

    @abstractmethod
    async def arequest(self, operation: GraphQLOperation) -> Dict[str, Any]:
        """Async counterpart of request()."""
        pass


__all__ = [
    "ExtractableFileMatcher",
    "FormDataFileAppender",
    "IGraphQLLink",
]
